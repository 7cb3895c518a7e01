"""
Test the public key verify catalog.

Covers standard/legacy separation, the pass-through registration escape
hatch and exactly-once construction of the process-wide catalog.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from sigverify.config import (
    KeyTypeCatalog,
    PublicKeyVerifyConfig,
    _create_public_key_verify_config,
    public_key_verify_config,
)
from sigverify.keys.models import ECDSA_PUBLIC_KEY_TYPE_URL, ED25519_PUBLIC_KEY_TYPE_URL
from sigverify.managers import EcdsaVerifyKeyManager, Ed25519VerifyKeyManager, KeyManager
from sigverify.monitoring.metrics import MetricsRegistry
from sigverify.policy import KeyPolicy
from sigverify.registry import Registry, default_registry
from sigverify.runtime.errors import DuplicateKeyTypeError, UnknownKeyTypeError
from sigverify.runtime.once import LazyInstance, OnceState
from sigverify.verifiers import Verifier


LEGACY_TYPE_URL = "type.googleapis.com/example.LegacyVerifyKey"


class LegacyKeyManager(KeyManager):
    """Stand-in for a deprecated algorithm."""

    def key_type(self) -> str:
        return LEGACY_TYPE_URL

    def validate_key(self, serialized_key):
        self._check_key_type(serialized_key)

    def new_primitive(self, serialized_key) -> Verifier:
        raise NotImplementedError


class CatalogWithLegacy(KeyTypeCatalog):
    name = "with_legacy"
    standard_managers = (Ed25519VerifyKeyManager,)
    legacy_managers = (LegacyKeyManager,)


@pytest.mark.unit
def test_register_standard_key_types(config, registry):
    assert config.register_standard_key_types() is True

    assert registry.key_types() == sorted([ECDSA_PUBLIC_KEY_TYPE_URL, ED25519_PUBLIC_KEY_TYPE_URL])
    assert config.standard_key_types() == [ECDSA_PUBLIC_KEY_TYPE_URL, ED25519_PUBLIC_KEY_TYPE_URL]


@pytest.mark.unit
def test_register_standard_key_types_is_idempotent(config, registry):
    assert config.register_standard_key_types() is True
    assert config.register_standard_key_types() is False
    assert len(registry) == 2


@pytest.mark.unit
def test_empty_legacy_set_registers_nothing(config, registry):
    assert config.legacy_key_types() == []
    assert config.register_legacy_key_types() is False
    assert len(registry) == 0


@pytest.mark.unit
def test_legacy_types_need_explicit_opt_in(registry, metrics):
    catalog = CatalogWithLegacy(registry=registry, metrics=metrics)
    catalog.register_standard_key_types()

    assert registry.has_key_manager(ED25519_PUBLIC_KEY_TYPE_URL)
    with pytest.raises(UnknownKeyTypeError):
        registry.get_key_manager(LEGACY_TYPE_URL)

    assert catalog.register_legacy_key_types() is True
    assert isinstance(registry.get_key_manager(LEGACY_TYPE_URL), LegacyKeyManager)


@pytest.mark.unit
def test_register_key_manager_passes_through(config, registry):
    manager = LegacyKeyManager()
    assert config.register_key_manager(manager) is True
    assert registry.get_key_manager(LEGACY_TYPE_URL) is manager


@pytest.mark.unit
def test_standard_registration_surfaces_conflicts(config, registry):
    class Impostor(LegacyKeyManager):
        def key_type(self) -> str:
            return ECDSA_PUBLIC_KEY_TYPE_URL

    config.register_key_manager(Impostor())
    with pytest.raises(DuplicateKeyTypeError):
        config.register_standard_key_types()
    assert isinstance(registry.get_key_manager(ECDSA_PUBLIC_KEY_TYPE_URL), Impostor)
    assert registry.has_key_manager(ED25519_PUBLIC_KEY_TYPE_URL)


@pytest.mark.unit
def test_process_wide_config():
    config = public_key_verify_config()

    assert config is public_key_verify_config()
    assert isinstance(config, PublicKeyVerifyConfig)
    assert config.registry is default_registry()
    assert default_registry().has_key_manager(ECDSA_PUBLIC_KEY_TYPE_URL)
    assert default_registry().has_key_manager(ED25519_PUBLIC_KEY_TYPE_URL)


@pytest.mark.concurrency
def test_concurrent_first_access_constructs_once():
    """N concurrent first requests share one instance; registration happens once."""
    metrics = MetricsRegistry()
    registry = Registry(metrics=metrics)
    calls = []

    def factory():
        calls.append(threading.get_ident())
        config = PublicKeyVerifyConfig(registry=registry, metrics=metrics)
        config.register_standard_key_types()
        return config

    holder = LazyInstance(factory, name="test catalog")
    barrier = threading.Barrier(32)

    def get():
        barrier.wait()
        return holder.get()

    with ThreadPoolExecutor(max_workers=32) as pool:
        instances = list(pool.map(lambda _: get(), range(32)))

    assert len(calls) == 1
    assert all(instance is instances[0] for instance in instances)
    assert holder.state is OnceState.INITIALIZED
    assert metrics.get("catalog_initializations_total").get_value({"catalog": "public_key_verify"}) == 1
    assert metrics.get("key_manager_registrations_total").get_total() == 2


@pytest.mark.unit
def test_failed_catalog_initialization_is_not_retried(registry, metrics):
    """A conflict during first construction is raised to every caller; construction never repeats."""
    registry.register_key_manager(EcdsaVerifyKeyManager(KeyPolicy.strict()))
    holder = LazyInstance(
        lambda: _create_public_key_verify_config(registry=registry, metrics=metrics),
        name="test catalog",
    )

    errors = []
    for _ in range(3):
        with pytest.raises(DuplicateKeyTypeError) as exc_info:
            holder.get()
        errors.append(exc_info.value)

    assert all(e is errors[0] for e in errors)
    assert holder.state is OnceState.INITIALIZED
    assert not holder.initialized
    assert metrics.get("catalog_initializations_total").get_value({"catalog": "public_key_verify"}) == 1
    assert registry.get_key_manager(ECDSA_PUBLIC_KEY_TYPE_URL).policy == KeyPolicy.strict()
    assert isinstance(registry.get_key_manager(ED25519_PUBLIC_KEY_TYPE_URL), Ed25519VerifyKeyManager)
