# blendoracle/keys/__init__.py
"""
Persistent secp256k1 signing key for the HTTP oracle.
Key is generated once and stored as hex; consumers can pin the public key.
"""

import os
from pathlib import Path

from ecdsa import SigningKey, SECP256k1


def load_or_create_key(path) -> SigningKey:
    """Load existing secp256k1 key or generate a new persistent one."""
    path = Path(path)
    if path.exists():
        sk_hex = path.read_text().strip()
        return SigningKey.from_string(bytes.fromhex(sk_hex), curve=SECP256k1)

    sk = SigningKey.generate(curve=SECP256k1)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(sk.to_string().hex())
    os.chmod(str(path), 0o600)
    return sk


def pubkey_hex(sk: SigningKey) -> str:
    return sk.get_verifying_key().to_string("compressed").hex()
