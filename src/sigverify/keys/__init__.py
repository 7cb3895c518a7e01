"""
Key types understood by the registry.
"""

from .models import (
    ECDSA_PUBLIC_KEY_TYPE_URL,
    ED25519_PUBLIC_KEY_TYPE_URL,
    SerializedKey,
    EcdsaParams,
    EcdsaPublicKey,
    Ed25519PublicKey,
)

__all__ = [
    "ECDSA_PUBLIC_KEY_TYPE_URL",
    "ED25519_PUBLIC_KEY_TYPE_URL",
    "SerializedKey",
    "EcdsaParams",
    "EcdsaPublicKey",
    "Ed25519PublicKey",
]
