"""
Ed25519 cryptographic operations.
"""

from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey as CryptoEd25519PublicKey

from ..runtime.errors import InvalidKeyError


PUBLIC_KEY_SIZE = 32
SIGNATURE_SIZE = 64


def load_public_key(key_bytes: bytes) -> CryptoEd25519PublicKey:
    """
    Load a raw 32-byte Ed25519 public key.

    Raises:
        InvalidKeyError: If the key has the wrong length or cannot be loaded
    """
    if len(key_bytes) != PUBLIC_KEY_SIZE:
        raise InvalidKeyError(
            f"Ed25519 public key must be {PUBLIC_KEY_SIZE} bytes, got {len(key_bytes)}",
            details={"length": len(key_bytes)}
        )
    try:
        return CryptoEd25519PublicKey.from_public_bytes(key_bytes)
    except ValueError as e:
        raise InvalidKeyError(f"Invalid Ed25519 public key: {e}", cause=e) from e


__all__ = ["PUBLIC_KEY_SIZE", "SIGNATURE_SIZE", "load_public_key"]
