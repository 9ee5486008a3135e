# blendoracle/server.py
"""
Blend Oracle — HTTP server
Serves the reconciled quote as a signed attestation.

Endpoints:
  GET /oracle/{symbol}           — signed blended quote
  GET /oracle/{symbol}/sources   — per-source status, unreconciled
  GET /health                    — liveness and public key
"""
import logging
import sys

from fastapi import FastAPI
from fastapi.responses import JSONResponse
import uvicorn

from blendoracle import __version__, config
from blendoracle.attest import sign
from blendoracle.errors import BothSourcesFailed
from blendoracle.feeds import SOURCES
from blendoracle.keys import load_or_create_key, pubkey_hex
from blendoracle.quote import Quote
from blendoracle.reconcile import fetch_outcomes, get_quote

log = logging.getLogger("blendoracle.server")


def create_app(sk=None, sources=None, session=None):
    if sk is None:
        sk = load_or_create_key(config.KEY_PATH)
    if sources is None:
        sources = SOURCES

    app = FastAPI(
        title="Blend Oracle",
        description="Two-source price oracle — signed blended quotes",
        version=__version__,
    )

    @app.get("/oracle/{symbol}")
    def oracle_quote(symbol: str):
        try:
            quote = get_quote(symbol, sources=sources, session=session)
        except BothSourcesFailed as e:
            log.warning(f"Quote failed for {symbol}: {e}")
            return JSONResponse(status_code=502, content={"error": str(e)})
        return JSONResponse(sign(quote, sk))

    @app.get("/oracle/{symbol}/sources")
    def oracle_sources(symbol: str):
        status = {}
        for name, result in fetch_outcomes(symbol, sources=sources, session=session):
            if isinstance(result, Quote):
                status[name] = {"status": "ok", "usd": result.usd, "ts": result.ts}
            else:
                status[name] = {"status": "error", "error": str(result)}
        return JSONResponse(status)

    @app.get("/health")
    def health():
        return {
            "status": "ok",
            "version": __version__,
            "pubkey": pubkey_hex(sk),
            "sources": [name for name, _ in sources],
        }

    return app


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    port = int(argv[0]) if argv else config.SERVER_PORT
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATEFMT,
    )
    sk = load_or_create_key(config.KEY_PATH)
    app = create_app(sk=sk)
    print(f"Blend Oracle v{__version__} starting on {config.SERVER_HOST}:{port}")
    print(f"  Public key: {pubkey_hex(sk)}")
    uvicorn.run(app, host=config.SERVER_HOST, port=port)


if __name__ == "__main__":
    main()
