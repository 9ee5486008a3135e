# blendoracle/scheduler.py
"""
Oracle Scheduler

Single-shot: run one reconciliation cycle, emit the quote or report the error.
Periodic:    run a cycle every `interval` seconds until stopped. A failed cycle
             is reported and the loop carries on with the next tick.

Usage:
  python3 -m blendoracle ethereum        # once
  python3 -m blendoracle ethereum 30     # every 30s until SIGINT/SIGTERM
"""

import json
import logging
import sys
import threading
import time

from blendoracle.errors import BothSourcesFailed
from blendoracle.reconcile import get_quote

log = logging.getLogger("blendoracle.scheduler")


def write_quote(quote, stream=None):
    """Pretty-printed JSON object, one per cycle."""
    stream = stream or sys.stdout
    stream.write(json.dumps(quote.to_dict(), indent=2) + "\n")
    stream.flush()


def write_error(error, stream=None):
    stream = stream or sys.stderr
    stream.write(f"error: {error}\n")
    stream.flush()


def run_once(symbol, emit=write_quote, report=write_error, sources=None, session=None):
    """One cycle. Returns True when a quote was emitted."""
    try:
        quote = get_quote(symbol, sources=sources, session=session)
    except BothSourcesFailed as e:
        log.warning(f"Cycle failed for {symbol}: {e}")
        report(e)
        return False
    log.info(f"{symbol}: ${quote.usd:,.2f} from {quote.source}")
    emit(quote)
    return True


def run_loop(symbol, interval, stop=None, emit=write_quote, report=write_error,
             sources=None, session=None):
    """Fire a cycle every `interval` seconds until `stop` is set.

    Ticks sit on a fixed grid measured from start; the first one fires after
    one full interval. Ticks missed while a cycle overran are dropped.
    Returns the number of cycles run.
    """
    if interval <= 0:
        raise ValueError(f"interval must be positive, got {interval}")
    if stop is None:
        stop = threading.Event()

    log.info(f"=== Oracle Scheduler: {symbol} every {interval}s ===")
    start = time.monotonic()
    ticks = 1
    cycles = 0
    while True:
        wait = start + ticks * interval - time.monotonic()
        if stop.wait(max(wait, 0)):
            break
        run_once(symbol, emit=emit, report=report, sources=sources, session=session)
        cycles += 1

        elapsed = time.monotonic() - start
        ticks = max(ticks + 1, int(elapsed // interval) + 1)
    log.info(f"Scheduler stopped after {cycles} cycles")
    return cycles
