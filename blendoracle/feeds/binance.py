# feeds/binance.py
"""
Binance spot ticker feed.
Binance wants tickers like ETHUSDT, BTCUSDT, so only symbols in PAIRS are
served. USDT is taken at par with USD.

Response: {"symbol": "ETHUSDT", "price": "3012.55000000"}
"""
import time

from blendoracle import config
from blendoracle.errors import FetchError, UnsupportedSymbol
from blendoracle.feeds.common import get_json, parse_price
from blendoracle.quote import Quote

NAME = "binance"

PAIRS = {
    "ethereum": "ETHUSDT",
    "bitcoin": "BTCUSDT",
}


def fetch(symbol, session=None):
    pair = PAIRS.get(symbol)
    if pair is None:
        raise UnsupportedSymbol(NAME, symbol)
    data = get_json(NAME, config.BINANCE_URL, {"symbol": pair}, session=session)
    if not isinstance(data, dict) or "price" not in data:
        raise FetchError(NAME, f"no price field for {pair} in response")
    price = parse_price(NAME, data["price"])
    return Quote(symbol=symbol, usd=price, ts=int(time.time()), source=NAME)


if __name__ == "__main__":
    import sys
    print(fetch(sys.argv[1] if len(sys.argv) > 1 else "ethereum"))
