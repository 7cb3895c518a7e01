r"""
Key type catalogs.

A catalog registers curated sets of key managers with a Registry. Key types
are split into two groups:

    - standard: secure and safe to use in new code. Over time, with new
      developments in cryptanalysis and computing power, some standard key
      types may become legacy.
    - legacy: deprecated, insecure or obsolete; kept only for verifying data
      produced by older systems. Never registered unless explicitly asked for.

The split allows insecure or obsolete key types to be retired gradually.
"""

from __future__ import annotations
import logging
from typing import Callable, List, Optional, Sequence

from .managers.ecdsa_verify import EcdsaVerifyKeyManager
from .managers.ed25519_verify import Ed25519VerifyKeyManager
from .managers.key_manager import KeyManager
from .monitoring.metrics import MetricsRegistry, get_registry
from .policy import KeyPolicy
from .registry import Registry, default_registry
from .runtime.errors import DuplicateKeyTypeError
from .runtime.once import LazyInstance


logger = logging.getLogger(__name__)

ManagerFactory = Callable[[KeyPolicy], KeyManager]


class KeyTypeCatalog:
    """
    Base catalog: a named pair of standard and legacy key manager sets bound
    to one Registry.
    """

    name: str = "catalog"
    standard_managers: Sequence[ManagerFactory] = ()
    legacy_managers: Sequence[ManagerFactory] = ()

    def __init__(self, registry: Optional[Registry] = None, policy: Optional[KeyPolicy] = None,
                 metrics: Optional[MetricsRegistry] = None):
        """
        Initialize catalog.

        Args:
            registry: Registry to populate (default: process-wide registry)
            policy: Policy handed to every manager the catalog creates
            metrics: Metrics registry for counters (default: global registry)
        """
        self.registry = registry if registry is not None else default_registry()
        self.policy = policy or KeyPolicy.default()
        (metrics or get_registry()).counter(
            "catalog_initializations_total", "Catalog instances constructed"
        ).increment(labels={"catalog": self.name})
        logger.debug(f"Created {self.name} catalog")

    def _register_all(self, factories: Sequence[ManagerFactory]) -> bool:
        installed = False
        conflicts: List[DuplicateKeyTypeError] = []
        for factory in factories:
            try:
                if self.register_key_manager(factory(self.policy)):
                    installed = True
            except DuplicateKeyTypeError as e:
                conflicts.append(e)
        if conflicts:
            raise conflicts[0]
        return installed

    def register_standard_key_types(self) -> bool:
        """
        Register the standard key types and their managers with the registry.

        Returns:
            True if at least one manager was newly installed

        Raises:
            DuplicateKeyTypeError: If a different manager already owns one of the
                key types; the remaining key types are still registered
        """
        return self._register_all(self.standard_managers)

    def register_legacy_key_types(self) -> bool:
        """
        Register the legacy key types and their managers with the registry.

        Returns:
            True if at least one manager was newly installed; False when the
            legacy set is empty or already registered

        Raises:
            DuplicateKeyTypeError: If a different manager already owns one of the
                key types; the remaining key types are still registered
        """
        return self._register_all(self.legacy_managers)

    def register_key_manager(self, manager: KeyManager) -> bool:
        """
        Register the given key manager for the key type given in
        ``manager.key_type()``.

        Returns:
            True if registration installed the manager, False if an equal
            manager was already registered
        """
        return self.registry.register_key_manager(manager)

    def standard_key_types(self) -> List[str]:
        """Key types registered by register_standard_key_types."""
        return [factory(self.policy).key_type() for factory in self.standard_managers]

    def legacy_key_types(self) -> List[str]:
        """Key types registered by register_legacy_key_types."""
        return [factory(self.policy).key_type() for factory in self.legacy_managers]


class PublicKeyVerifyConfig(KeyTypeCatalog):
    """
    Catalog of public key signature verification key types.

    The legacy set is empty: no legacy verification algorithms are enabled.
    """

    name = "public_key_verify"
    standard_managers = (EcdsaVerifyKeyManager, Ed25519VerifyKeyManager)
    legacy_managers = ()


def _create_public_key_verify_config(registry: Optional[Registry] = None,
                                     metrics: Optional[MetricsRegistry] = None) -> PublicKeyVerifyConfig:
    config = PublicKeyVerifyConfig(registry=registry, metrics=metrics)
    config.register_standard_key_types()
    return config


_public_key_verify_config: LazyInstance[PublicKeyVerifyConfig] = LazyInstance(
    _create_public_key_verify_config, name="public key verify config"
)


def public_key_verify_config() -> PublicKeyVerifyConfig:
    """
    Get the process-wide public key verify catalog.

    Created on first use, bound to the process-wide registry, with the
    standard key types registered. Every caller receives the same instance.

    Construction runs once for the life of the process. If registering the
    standard key types fails, that DuplicateKeyTypeError is raised to this
    caller and to every later one.
    """
    return _public_key_verify_config.get()


__all__ = [
    "KeyTypeCatalog",
    "PublicKeyVerifyConfig",
    "public_key_verify_config",
]
