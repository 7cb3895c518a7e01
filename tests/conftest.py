"""
Test bootstrap:
- Make tests/helpers importable
- Provide isolated registries and metrics so tests never touch process-wide state
"""
import sys
import pathlib
import pytest

TESTS_DIR = pathlib.Path(__file__).parent
if str(TESTS_DIR) not in sys.path:
    sys.path.insert(0, str(TESTS_DIR))


@pytest.fixture
def metrics():
    """Provide a fresh metrics registry."""
    from sigverify.monitoring.metrics import MetricsRegistry
    return MetricsRegistry()


@pytest.fixture
def registry(metrics):
    """Provide an empty registry reporting into the test's metrics."""
    from sigverify.registry import Registry
    return Registry(metrics=metrics)


@pytest.fixture
def config(registry, metrics):
    """Provide a public key verify catalog bound to the test registry."""
    from sigverify.config import PublicKeyVerifyConfig
    return PublicKeyVerifyConfig(registry=registry, metrics=metrics)


@pytest.fixture
def p256_key():
    """Provide a deterministic P-256 / SHA-256 / DER key."""
    from helpers import mk_ecdsa_key
    return mk_ecdsa_key(seed=1)


@pytest.fixture
def ed25519_key():
    """Provide a deterministic Ed25519 key."""
    from helpers import mk_ed25519_key
    return mk_ed25519_key(seed=1)
