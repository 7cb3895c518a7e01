"""
ECDSA verifier primitive.
"""

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import ec

from ..crypto.ecdsa import decode_der_signature, hash_for, ieee_p1363_to_der
from ..enums import EcdsaSignatureEncoding, EllipticCurveType, HashType
from ..keys.models import ECDSA_PUBLIC_KEY_TYPE_URL
from ..runtime.errors import MalformedSignatureError
from .verifier import Verifier, ensure_bytes


class EcdsaVerifier(Verifier):
    """ECDSA verifier for one public key and parameter set."""

    def __init__(self, public_key: ec.EllipticCurvePublicKey, curve: EllipticCurveType,
                 hash_type: HashType, encoding: EcdsaSignatureEncoding):
        """
        Initialize ECDSA verifier.

        Args:
            public_key: Validated public key
            curve: Curve of ``public_key``
            hash_type: Hash applied to messages
            encoding: Signature encoding
        """
        self._public_key = public_key
        self._algorithm = ec.ECDSA(hash_for(hash_type))
        self.curve = curve
        self.hash_type = hash_type
        self.encoding = encoding

    @property
    def key_type(self) -> str:
        return ECDSA_PUBLIC_KEY_TYPE_URL

    def _to_der(self, signature: bytes) -> bytes:
        if self.encoding == EcdsaSignatureEncoding.DER:
            decode_der_signature(signature)
            return signature
        if self.encoding == EcdsaSignatureEncoding.IEEE_P1363:
            return ieee_p1363_to_der(signature, self.curve)
        raise MalformedSignatureError(f"Unsupported signature encoding: {self.encoding.name}")

    def verify(self, message: bytes, signature: bytes) -> bool:
        message = ensure_bytes("message", message)
        der = self._to_der(ensure_bytes("signature", signature))
        try:
            self._public_key.verify(der, message, self._algorithm)
        except InvalidSignature:
            return False
        return True

    def __repr__(self) -> str:
        return (f"EcdsaVerifier(curve={self.curve.name}, hash={self.hash_type.name}, "
                f"encoding={self.encoding.name})")


__all__ = ["EcdsaVerifier"]
