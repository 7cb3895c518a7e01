"""
Monitoring components for sigverify.

Provides thread-safe counters used by the registry and catalogs.
"""

from .metrics import Counter, MetricsRegistry, get_registry

__all__ = [
    "Counter",
    "MetricsRegistry",
    "get_registry",
]
