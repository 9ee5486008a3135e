# feeds/common.py
"""Request and parse helpers shared by the feed adapters."""

import logging
import math

import requests

from blendoracle import config
from blendoracle.errors import FetchError

log = logging.getLogger("blendoracle.feeds")


def get_json(name, url, params, session=None):
    """One GET with the configured timeout. Any failure becomes a FetchError."""
    session = session or requests
    try:
        # requests applies the timeout to connect and to each socket read,
        # not to the whole transfer.
        r = session.get(url, params=params, timeout=config.REQUEST_TIMEOUT)
        r.raise_for_status()
        return r.json()
    except requests.RequestException as e:
        raise FetchError(name, e) from e
    except ValueError as e:
        raise FetchError(name, f"malformed response body: {e}") from e


def parse_price(name, raw):
    """Decimal price from a number or decimal string. Rejects anything else."""
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        raise FetchError(name, f"unexpected price value {raw!r}")
    try:
        price = float(raw)
    except ValueError:
        raise FetchError(name, f"unparseable price {raw!r}")
    if not math.isfinite(price) or price < 0:
        raise FetchError(name, f"price out of range: {raw!r}")
    return price
