"""conftest.py for benchmarks.

Provides a registry pre-populated with one family of each hot-path kind so
that benchmarks measure lookups and updates, not registration.
"""

from __future__ import annotations

import pytest

from metrics_core.metrics import Counter, Gauge, Histogram
from metrics_core.registry import Registry


@pytest.fixture
def registry() -> Registry:
    """Registry with ``requests_total``, ``in_flight`` and ``latency_seconds``."""
    registry = Registry()
    registry.add_family(Counter, "requests_total", "Handled requests", {"service": "api"})
    registry.add_family(Gauge, "in_flight", "Requests in flight")
    registry.add_family(Histogram, "latency_seconds", "Request latency")
    return registry
