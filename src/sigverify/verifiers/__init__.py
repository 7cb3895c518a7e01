"""
Verifier primitives produced by key managers.
"""

from .verifier import Verifier
from .ecdsa import EcdsaVerifier
from .ed25519 import Ed25519Verifier

__all__ = [
    "Verifier",
    "EcdsaVerifier",
    "Ed25519Verifier",
]
