# blendoracle/errors.py
"""Exceptions raised by feeds and the reconciler."""


class OracleError(Exception):
    pass


class FetchError(OracleError):
    """A single source failed to produce a quote."""

    def __init__(self, source, detail):
        super().__init__(f"{source}: {detail}")
        self.source = source
        self.detail = detail


class UnsupportedSymbol(FetchError):
    def __init__(self, source, symbol):
        super().__init__(source, f"pair unknown for {symbol}")
        self.symbol = symbol


class BothSourcesFailed(OracleError):
    """Every source failed in one cycle. Carries each underlying error."""

    def __init__(self, errors):
        super().__init__("both sources failed: " + " | ".join(str(e) for e in errors))
        self.errors = list(errors)
