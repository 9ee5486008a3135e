# blendoracle/config.py
import os
from pathlib import Path

# ── Upstream feeds ───────────────────────────────────────────────────────────

REQUEST_TIMEOUT = float(os.environ.get("ORACLE_TIMEOUT", "7"))
COINGECKO_URL = os.environ.get(
    "COINGECKO_URL", "https://api.coingecko.com/api/v3/simple/price"
)
BINANCE_URL = os.environ.get(
    "BINANCE_URL", "https://api.binance.com/api/v3/ticker/price"
)

# ── Logging ──────────────────────────────────────────────────────────────────

LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%SZ"

# ── HTTP server ──────────────────────────────────────────────────────────────

SERVER_HOST = os.environ.get("ORACLE_HOST", "127.0.0.1")
SERVER_PORT = int(os.environ.get("ORACLE_PORT", "9100"))
KEY_PATH = Path(os.environ.get(
    "ORACLE_KEY_PATH", str(Path(__file__).parent / "keys" / "oracle_secp256k1.key")
))
DECIMALS = 2
