"""
Ed25519 verifier primitive.
"""

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey as CryptoEd25519PublicKey

from ..crypto.ed25519 import SIGNATURE_SIZE
from ..keys.models import ED25519_PUBLIC_KEY_TYPE_URL
from ..runtime.errors import MalformedSignatureError
from .verifier import Verifier, ensure_bytes


class Ed25519Verifier(Verifier):
    """Ed25519 verifier for one public key."""

    def __init__(self, public_key: CryptoEd25519PublicKey):
        self._public_key = public_key

    @property
    def key_type(self) -> str:
        return ED25519_PUBLIC_KEY_TYPE_URL

    def verify(self, message: bytes, signature: bytes) -> bool:
        message = ensure_bytes("message", message)
        signature = ensure_bytes("signature", signature)
        if len(signature) != SIGNATURE_SIZE:
            raise MalformedSignatureError(
                f"Ed25519 signature must be {SIGNATURE_SIZE} bytes, got {len(signature)}",
                details={"expected": SIGNATURE_SIZE, "actual": len(signature)}
            )
        try:
            self._public_key.verify(signature, message)
        except InvalidSignature:
            return False
        return True


__all__ = ["Ed25519Verifier"]
