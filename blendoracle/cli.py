# blendoracle/cli.py
"""
Command line entry point.

  blendoracle <ethereum|bitcoin> [intervalSec]

No interval (or one that is not a positive integer) runs a single cycle and
exits non-zero if both sources fail. A positive interval runs until SIGINT or
SIGTERM; failed cycles are reported and skipped.
"""

import argparse
import logging
import signal
import sys
import threading

from blendoracle import __version__, config
from blendoracle.scheduler import run_loop, run_once

log = logging.getLogger("blendoracle.cli")


def parse_interval(raw):
    """Seconds between cycles; anything unparseable means single-shot (0)."""
    if raw is None:
        return 0
    try:
        return int(raw)
    except ValueError:
        return 0


def build_parser():
    parser = argparse.ArgumentParser(
        prog="blendoracle",
        description="Blend CoinGecko and Binance prices into one JSON quote",
    )
    parser.add_argument("symbol", help="Asset id, e.g. ethereum or bitcoin")
    parser.add_argument(
        "interval",
        nargs="?",
        default=None,
        help="Repeat every N seconds (default: run once)",
    )
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        help=f"Logging level for stderr diagnostics (default: {config.LOG_LEVEL})",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def setup_logging(level):
    logging.basicConfig(
        level=level.upper(),
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATEFMT,
    )


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    interval = parse_interval(args.interval)

    if interval <= 0:
        return 0 if run_once(args.symbol) else 1

    stop = threading.Event()

    def _shutdown(signum, frame):
        log.info(f"Received signal {signum}, stopping after current cycle")
        stop.set()

    signal.signal(signal.SIGINT, _shutdown)
    signal.signal(signal.SIGTERM, _shutdown)
    run_loop(args.symbol, interval, stop=stop)
    return 0


if __name__ == "__main__":
    sys.exit(main())
