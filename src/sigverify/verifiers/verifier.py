r"""
Base verifier interface.

A verifier is bound to one validated public key. It holds no mutable state,
so an instance can be used from any number of threads.
"""

from abc import ABC, abstractmethod
from typing import Any


def ensure_bytes(name: str, value: Any) -> bytes:
    """Return ``value`` as bytes, or raise TypeError for non bytes-like input."""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"{name} must be bytes-like, got {type(value).__name__}")


class Verifier(ABC):
    """
    Base verifier interface for signature verification.

    Verification results follow one rule: a signature that decodes but does
    not match is reported as False, never raised. Only signatures that
    cannot be decoded at all raise MalformedSignatureError.
    """

    @property
    @abstractmethod
    def key_type(self) -> str:
        """Key type identifier of the key this verifier is bound to."""
        pass

    @abstractmethod
    def verify(self, message: bytes, signature: bytes) -> bool:
        """
        Verify a signature over a message.

        Args:
            message: Signed message
            signature: Signature bytes to verify

        Returns:
            True if the signature is valid, False otherwise

        Raises:
            MalformedSignatureError: If the signature bytes cannot be decoded
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(key_type='{self.key_type}')"


__all__ = ["Verifier", "ensure_bytes"]
