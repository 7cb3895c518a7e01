"""
Key managers: one per supported key type.
"""

from .key_manager import KeyManager
from .ecdsa_verify import EcdsaVerifyKeyManager
from .ed25519_verify import Ed25519VerifyKeyManager

__all__ = [
    "KeyManager",
    "EcdsaVerifyKeyManager",
    "Ed25519VerifyKeyManager",
]
