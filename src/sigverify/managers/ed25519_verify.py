"""
Ed25519 verify key manager.
"""

from typing import Tuple

from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey as CryptoEd25519PublicKey

from ..codec.keys import decode_ed25519_public_key
from ..crypto.ed25519 import load_public_key
from ..keys.models import ED25519_PUBLIC_KEY_TYPE_URL, Ed25519PublicKey, SerializedKey
from ..verifiers.ed25519 import Ed25519Verifier
from .key_manager import KeyManager


class Ed25519VerifyKeyManager(KeyManager):
    """Key manager for Ed25519 public keys."""

    primitive_class = Ed25519Verifier

    def key_type(self) -> str:
        return ED25519_PUBLIC_KEY_TYPE_URL

    def _load(self, serialized_key: SerializedKey) -> Tuple[Ed25519PublicKey, CryptoEd25519PublicKey]:
        self._check_key_type(serialized_key)
        key = decode_ed25519_public_key(serialized_key.value, max_version=self.policy.max_key_version)
        return key, load_public_key(key.key_value)

    def validate_key(self, serialized_key: SerializedKey) -> Ed25519PublicKey:
        key, _ = self._load(serialized_key)
        return key

    def new_primitive(self, serialized_key: SerializedKey) -> Ed25519Verifier:
        _, public_key = self._load(serialized_key)
        return Ed25519Verifier(public_key)


__all__ = ["Ed25519VerifyKeyManager"]
