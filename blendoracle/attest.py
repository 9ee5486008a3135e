# blendoracle/attest.py
"""
Signed quote attestations.

Canonical message:
  v1|<SYMBOL>|<usd>|USD|<decimals>|<ISO8601 ts>|<source>|<method>

method is "avg" for a blended quote and "single" when one source answered.
Signature is secp256k1 ECDSA over sha256(canonical), base64 encoded.
"""
import base64
import hashlib
from datetime import datetime, timezone

from ecdsa import BadSignatureError, SECP256k1, VerifyingKey

from blendoracle import config
from blendoracle.keys import pubkey_hex
from blendoracle.quote import Quote


def canonical(quote, decimals=config.DECIMALS):
    value = f"{quote.usd:.{decimals}f}"
    ts = datetime.fromtimestamp(quote.ts, timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    method = "avg" if quote.source.startswith("avg(") else "single"
    return f"v1|{quote.symbol.upper()}|{value}|USD|{decimals}|{ts}|{quote.source}|{method}"


def sign(quote, sk):
    message = canonical(quote)
    h = hashlib.sha256(message.encode("utf-8")).digest()
    sig = sk.sign_digest(h)
    payload = quote.to_dict()
    payload.update({
        "canonical": message,
        "signature": base64.b64encode(sig).decode("utf-8"),
        "pubkey": pubkey_hex(sk),
    })
    return payload


def verify(payload, expected_pubkey=None):
    """Check the signature over payload["canonical"] and that the top-level
    quote fields match what was signed. Optionally pin the key."""
    if expected_pubkey is not None and payload["pubkey"] != expected_pubkey:
        return False
    quote = Quote(
        symbol=payload["symbol"],
        usd=payload["usd"],
        ts=payload["ts"],
        source=payload["source"],
    )
    if canonical(quote) != payload["canonical"]:
        return False
    h = hashlib.sha256(payload["canonical"].encode("utf-8")).digest()
    vk = VerifyingKey.from_string(bytes.fromhex(payload["pubkey"]), curve=SECP256k1)
    try:
        return vk.verify_digest(base64.b64decode(payload["signature"]), h)
    except BadSignatureError:
        return False
