"""
Metrics collection for the verification registry.

Provides thread-safe counters and a registry to hold them, used to observe
registrations, conflicts, lookups and catalog initialization.
"""

import threading
from collections import defaultdict
from typing import Dict, Optional


class Counter:
    """
    Counter metric that only increases.

    Thread-safe counter with label support for tracking cumulative values
    such as registration or lookup counts.
    """

    def __init__(self, name: str, description: str = "", labels: Optional[Dict[str, str]] = None):
        """
        Initialize counter.

        Args:
            name: Metric name
            description: Metric description
            labels: Default labels
        """
        self.name = name
        self.description = description
        self.default_labels = labels or {}
        self._lock = threading.RLock()
        self._values: Dict[str, float] = defaultdict(float)

    def increment(self, amount: float = 1.0, labels: Optional[Dict[str, str]] = None) -> None:
        """
        Increment counter.

        Args:
            amount: Amount to increment (must be >= 0)
            labels: Optional labels
        """
        if amount < 0:
            raise ValueError("Counter increment must be >= 0")

        with self._lock:
            label_key = self._labels_to_key(self._merge_labels(labels))
            self._values[label_key] += amount

    def get_value(self, labels: Optional[Dict[str, str]] = None) -> float:
        """Get counter value for a label combination."""
        with self._lock:
            label_key = self._labels_to_key(self._merge_labels(labels))
            return self._values.get(label_key, 0.0)

    def get_total(self) -> float:
        """Get the sum over all label combinations."""
        with self._lock:
            return sum(self._values.values())

    def get_all_values(self) -> Dict[str, float]:
        """Get all counter values by label combination."""
        with self._lock:
            return dict(self._values)

    def reset(self) -> None:
        """Reset counter."""
        with self._lock:
            self._values.clear()

    def _merge_labels(self, labels: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        merged = self.default_labels.copy()
        if labels:
            merged.update(labels)
        return merged

    def _labels_to_key(self, labels: Dict[str, str]) -> str:
        if not labels:
            return ""
        return "|".join(f"{k}={v}" for k, v in sorted(labels.items()))


class MetricsRegistry:
    """
    Registry for managing metrics.

    Thread-safe get-or-create access to named counters.
    """

    def __init__(self):
        self._metrics: Dict[str, Counter] = {}
        self._lock = threading.RLock()

    def counter(self, name: str, description: str = "",
                labels: Optional[Dict[str, str]] = None) -> Counter:
        """
        Get or create a counter metric.

        Args:
            name: Metric name
            description: Metric description
            labels: Default labels

        Returns:
            Counter metric
        """
        with self._lock:
            if name in self._metrics:
                return self._metrics[name]

            counter = Counter(name, description, labels)
            self._metrics[name] = counter
            return counter

    def get(self, name: str) -> Optional[Counter]:
        """Get a metric by name, or None."""
        with self._lock:
            return self._metrics.get(name)

    def snapshot(self) -> Dict[str, Dict[str, float]]:
        """Get all metric values keyed by metric name."""
        with self._lock:
            return {name: metric.get_all_values() for name, metric in self._metrics.items()}

    def reset_all(self) -> None:
        """Reset every metric."""
        with self._lock:
            for metric in self._metrics.values():
                metric.reset()


# Global metrics registry
_global_registry = MetricsRegistry()


def get_registry() -> MetricsRegistry:
    """Get the global metrics registry."""
    return _global_registry


__all__ = ["Counter", "MetricsRegistry", "get_registry"]
