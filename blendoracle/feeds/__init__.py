"""
Price feeds. Each adapter exposes fetch(symbol, session=None) -> Quote and
raises FetchError on any failure.

Order matters: the first source wins timestamp ties when blending.
"""
from blendoracle.feeds import binance, coingecko

SOURCES = [
    (coingecko.NAME, coingecko.fetch),
    (binance.NAME, binance.fetch),
]
