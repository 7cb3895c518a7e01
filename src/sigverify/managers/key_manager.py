r"""
Base key manager interface.

A key manager owns exactly one key type identifier. It validates serialized
keys of that type and turns them into verifier primitives.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Type

from ..keys.models import SerializedKey
from ..policy import KeyPolicy
from ..runtime.errors import ErrorCode, InvalidKeyError
from ..verifiers.verifier import Verifier


class KeyManager(ABC):
    """
    Base key manager interface.

    Key managers are stateless beyond their policy. Two managers are equal
    when they are of the same concrete class and carry equal policies; the
    registry treats equal managers as the same registration.
    """

    primitive_class: Type[Verifier] = Verifier

    def __init__(self, policy: Optional[KeyPolicy] = None):
        """
        Initialize key manager.

        Args:
            policy: Key acceptance policy (default: KeyPolicy.default())
        """
        self.policy = policy or KeyPolicy.default()

    @abstractmethod
    def key_type(self) -> str:
        """
        Get the key type identifier this manager owns.

        Returns:
            Key type identifier
        """
        pass

    def does_support(self, type_url: str) -> bool:
        """Check whether this manager handles the given key type."""
        return type_url == self.key_type()

    @abstractmethod
    def validate_key(self, serialized_key: SerializedKey) -> Any:
        """
        Validate a serialized key.

        Args:
            serialized_key: Key to validate

        Returns:
            The decoded key message

        Raises:
            InvalidKeyError: If the key violates a structural or policy constraint
            UnsupportedKeyVersionError: If the key format version is not supported
        """
        pass

    @abstractmethod
    def new_primitive(self, serialized_key: SerializedKey) -> Verifier:
        """
        Validate a serialized key and build a verifier bound to it.

        Args:
            serialized_key: Key to use

        Returns:
            Verifier primitive

        Raises:
            InvalidKeyError: If the key violates a structural or policy constraint
            UnsupportedKeyVersionError: If the key format version is not supported
        """
        pass

    def _check_key_type(self, serialized_key: SerializedKey) -> None:
        if not isinstance(serialized_key, SerializedKey):
            raise InvalidKeyError(
                f"Expected SerializedKey, got {type(serialized_key).__name__}"
            )
        if not self.does_support(serialized_key.type_url):
            raise InvalidKeyError(
                f"Key type {serialized_key.type_url!r} is not handled by {self.__class__.__name__}",
                ErrorCode.KEY_TYPE_MISMATCH,
                {"expected": self.key_type(), "actual": serialized_key.type_url}
            )

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if type(self) is not type(other):
            return NotImplemented
        # Subclasses with their own __init__ may never set a policy
        return getattr(self, "policy", None) == getattr(other, "policy", None)

    def __hash__(self) -> int:
        return hash((type(self), getattr(self, "policy", None)))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(key_type='{self.key_type()}')"


__all__ = ["KeyManager"]
