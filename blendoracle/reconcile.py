# blendoracle/reconcile.py
"""
Source reconciliation.

Precedence:
  1. Both sources answer   -> mean price, latest timestamp, avg(a,b) provenance
  2. One source answers    -> that quote, untouched
  3. Neither answers       -> BothSourcesFailed with both causes
"""
import logging
from concurrent.futures import ThreadPoolExecutor

from blendoracle.errors import BothSourcesFailed, FetchError
from blendoracle.feeds import SOURCES
from blendoracle.quote import Quote

log = logging.getLogger("blendoracle.reconcile")


def blend(a: Quote, b: Quote) -> Quote:
    """Simple average with preference to the newer timestamp (a wins ties)."""
    avg = (a.usd + b.usd) / 2.0
    ts = a.ts
    if b.ts > ts:
        ts = b.ts
    return Quote(symbol=a.symbol, usd=avg, ts=ts, source=f"avg({a.source},{b.source})")


def reconcile(outcomes) -> Quote:
    """Combine [(name, Quote | FetchError), (name, Quote | FetchError)]."""
    quotes = [r for _, r in outcomes if isinstance(r, Quote)]
    errors = [r for _, r in outcomes if not isinstance(r, Quote)]

    if len(quotes) == 2:
        return blend(quotes[0], quotes[1])
    if len(quotes) == 1:
        log.info(f"Single source for {quotes[0].symbol}: {quotes[0].source} "
                 f"({'; '.join(str(e) for e in errors)})")
        return quotes[0]
    raise BothSourcesFailed(errors)


def _run_source(name, fn, symbol, session):
    try:
        return fn(symbol, session=session)
    except FetchError as e:
        log.info(f"Source failed: {e}")
        return e
    except Exception as e:
        log.exception(f"Unexpected error from {name}")
        return FetchError(name, e)


def fetch_outcomes(symbol, sources=None, session=None):
    """Run every source concurrently and wait for all of them."""
    if sources is None:
        sources = SOURCES
    with ThreadPoolExecutor(max_workers=len(sources)) as pool:
        futures = [
            (name, pool.submit(_run_source, name, fn, symbol, session))
            for name, fn in sources
        ]
        return [(name, f.result()) for name, f in futures]


def get_quote(symbol, sources=None, session=None) -> Quote:
    """One full reconciliation cycle."""
    quote = reconcile(fetch_outcomes(symbol, sources=sources, session=session))
    log.debug(f"Quote: {quote}")
    return quote
