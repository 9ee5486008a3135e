"""
Blend Oracle
Two-source price oracle: CoinGecko + Binance, blended by mean.
"""

__version__ = "1.0.0"
