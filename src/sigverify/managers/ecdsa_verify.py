"""
ECDSA verify key manager.

Accepts ECDSA public keys on the approved NIST curves and produces
EcdsaVerifier primitives.
"""

import logging
from typing import Tuple

from cryptography.hazmat.primitives.asymmetric import ec

from ..codec.keys import decode_ecdsa_public_key
from ..crypto.ecdsa import load_public_key
from ..keys.models import ECDSA_PUBLIC_KEY_TYPE_URL, EcdsaPublicKey, SerializedKey
from ..verifiers.ecdsa import EcdsaVerifier
from .key_manager import KeyManager


logger = logging.getLogger(__name__)


class EcdsaVerifyKeyManager(KeyManager):
    """Key manager for ECDSA public keys."""

    primitive_class = EcdsaVerifier

    def key_type(self) -> str:
        return ECDSA_PUBLIC_KEY_TYPE_URL

    def _load(self, serialized_key: SerializedKey) -> Tuple[EcdsaPublicKey, ec.EllipticCurvePublicKey]:
        self._check_key_type(serialized_key)
        key = decode_ecdsa_public_key(serialized_key.value, max_version=self.policy.max_key_version)
        self.policy.validate_ecdsa_params(key.params)
        return key, load_public_key(key.params.curve, key.x, key.y)

    def validate_key(self, serialized_key: SerializedKey) -> EcdsaPublicKey:
        key, _ = self._load(serialized_key)
        return key

    def new_primitive(self, serialized_key: SerializedKey) -> EcdsaVerifier:
        key, public_key = self._load(serialized_key)
        logger.debug(f"Created ECDSA verifier ({key.params.curve.name}, {key.params.hash_type.name})")
        return EcdsaVerifier(public_key, key.params.curve, key.params.hash_type, key.params.encoding)


__all__ = ["EcdsaVerifyKeyManager"]
