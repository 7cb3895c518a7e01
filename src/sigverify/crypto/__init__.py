"""
Cryptographic primitives backing the verifiers.

Thin wrappers over the 'cryptography' library for ECDSA and Ed25519.
"""

from . import ecdsa, ed25519

__all__ = ["ecdsa", "ed25519"]
