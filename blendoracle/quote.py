# blendoracle/quote.py
from dataclasses import dataclass


@dataclass(frozen=True)
class Quote:
    """One price observation. `ts` is when the adapter parsed the answer."""

    symbol: str
    usd: float
    ts: int
    source: str

    def to_dict(self) -> dict:
        return {
            "symbol": self.symbol,
            "usd": self.usd,
            "ts": self.ts,
            "source": self.source,
        }
