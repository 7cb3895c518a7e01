r"""
Key manager registry.

Maps key type identifiers to the single KeyManager that handles them and is
the entry point for turning a serialized key into a verifier.

Registrations are permanent: once a manager is installed for a key type it
can never be replaced by a different one, so a weaker manager cannot be
slipped in after a stronger one.
"""

from __future__ import annotations
import logging
import threading
from typing import Dict, List, Optional

from .keys.models import SerializedKey
from .managers.key_manager import KeyManager
from .monitoring.metrics import MetricsRegistry, get_registry
from .runtime.errors import DuplicateKeyTypeError, RegistrationError, UnknownKeyTypeError
from .verifiers.verifier import Verifier


logger = logging.getLogger(__name__)


class Registry:
    """
    Thread-safe mapping from key type identifier to KeyManager.

    A single lock guards the mapping; registration is rare and lookups are
    plain dictionary reads, so contention is negligible.
    """

    def __init__(self, metrics: Optional[MetricsRegistry] = None):
        """
        Initialize an empty registry.

        Args:
            metrics: Metrics registry for counters (default: global registry)
        """
        self._managers: Dict[str, KeyManager] = {}
        self._lock = threading.RLock()

        metrics = metrics or get_registry()
        self._registrations = metrics.counter(
            "key_manager_registrations_total", "Key managers installed"
        )
        self._conflicts = metrics.counter(
            "key_manager_conflicts_total", "Rejected conflicting registrations"
        )
        self._lookups = metrics.counter(
            "key_manager_lookups_total", "Key manager lookups"
        )

    def register_key_manager(self, manager: KeyManager) -> bool:
        """
        Register a key manager for ``manager.key_type()``.

        Args:
            manager: Key manager to install

        Returns:
            True if the manager was installed, False if an equal manager was
            already registered for the key type

        Raises:
            DuplicateKeyTypeError: If a different manager owns the key type
            RegistrationError: If ``manager`` is not a KeyManager or has no key type
        """
        if not isinstance(manager, KeyManager):
            raise RegistrationError(
                f"Expected KeyManager, got {type(manager).__name__}"
            )
        key_type = manager.key_type()
        if not key_type:
            raise RegistrationError(f"{manager.__class__.__name__} has an empty key type")

        with self._lock:
            existing = self._managers.get(key_type)
            if existing is None:
                self._managers[key_type] = manager
                self._registrations.increment(labels={"key_type": key_type})
                logger.debug(f"Registered {manager.__class__.__name__} for {key_type}")
                return True

            if existing == manager:
                logger.debug(f"{manager.__class__.__name__} already registered for {key_type}")
                return False

            self._conflicts.increment(labels={"key_type": key_type})

        logger.warning(
            f"Rejected {manager.__class__.__name__} for {key_type}: "
            f"{existing.__class__.__name__} is already registered"
        )
        raise DuplicateKeyTypeError(
            key_type,
            {"registered": existing.__class__.__name__, "rejected": manager.__class__.__name__}
        )

    def get_key_manager(self, type_url: str) -> KeyManager:
        """
        Get the key manager for a key type.

        Args:
            type_url: Key type identifier

        Returns:
            Registered key manager

        Raises:
            UnknownKeyTypeError: If no manager is registered for ``type_url``
        """
        with self._lock:
            manager = self._managers.get(type_url)

        if manager is None:
            self._lookups.increment(labels={"result": "miss"})
            raise UnknownKeyTypeError(type_url)
        self._lookups.increment(labels={"result": "hit"})
        return manager

    def has_key_manager(self, type_url: str) -> bool:
        """Check whether a manager is registered for a key type."""
        with self._lock:
            return type_url in self._managers

    def key_types(self) -> List[str]:
        """Get a sorted snapshot of the registered key types."""
        with self._lock:
            return sorted(self._managers)

    def get_primitive(self, serialized_key: SerializedKey) -> Verifier:
        """
        Build a verifier for a serialized key.

        Args:
            serialized_key: Key to use

        Returns:
            Verifier bound to the key

        Raises:
            UnknownKeyTypeError: If no manager handles the key's type
            InvalidKeyError: If the key is invalid
            UnsupportedKeyVersionError: If the key version is not supported
        """
        return self.get_key_manager(serialized_key.type_url).new_primitive(serialized_key)

    def __len__(self) -> int:
        with self._lock:
            return len(self._managers)

    def __contains__(self, type_url: object) -> bool:
        with self._lock:
            return type_url in self._managers

    def __repr__(self) -> str:
        return f"Registry(key_types={self.key_types()})"


# Process-wide registry
_default_registry = Registry()


def default_registry() -> Registry:
    """Get the process-wide registry."""
    return _default_registry


__all__ = ["Registry", "default_registry"]
