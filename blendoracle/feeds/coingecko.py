# feeds/coingecko.py
"""
CoinGecko simple-price feed.
Symbol is passed through as the CoinGecko coin id (ethereum, bitcoin, ...).

Response: {"ethereum": {"usd": 3012.55}}
"""
import time

from blendoracle import config
from blendoracle.errors import FetchError
from blendoracle.feeds.common import get_json, parse_price
from blendoracle.quote import Quote

NAME = "coingecko"


def fetch(symbol, session=None):
    data = get_json(
        NAME,
        config.COINGECKO_URL,
        {"ids": symbol, "vs_currencies": "usd"},
        session=session,
    )
    try:
        raw = data[symbol]["usd"]
    except (KeyError, TypeError):
        raise FetchError(NAME, f"no usd price for {symbol} in response")
    price = parse_price(NAME, raw)
    return Quote(symbol=symbol, usd=price, ts=int(time.time()), source=NAME)


if __name__ == "__main__":
    import sys
    print(fetch(sys.argv[1] if len(sys.argv) > 1 else "ethereum"))
