"""Naming validator — decides which metric and label names are acceptable."""
from __future__ import annotations

import re
from typing import Protocol, runtime_checkable

from metrics_core.metrics.types import MetricType

_METRIC_NAME_RE = re.compile(r"[a-zA-Z_:][a-zA-Z0-9_:]*")
_LABEL_NAME_RE = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*")
_RESERVED_PREFIX = "__"
_RESERVED_LABELS: dict[MetricType, frozenset[str]] = {
    MetricType.HISTOGRAM: frozenset({"le"}),
    MetricType.SUMMARY: frozenset({"quantile"}),
}


@runtime_checkable
class NamingValidator(Protocol):
    """Port: predicate pair consulted when a family is constructed."""

    def is_valid_metric_name(self, name: str) -> bool: ...

    def is_valid_label_name(self, name: str, metric_type: MetricType) -> bool: ...


class PrometheusNamingValidator:
    """Prometheus data-model naming rules.

    * metric names match ``[a-zA-Z_:][a-zA-Z0-9_:]*``
    * label names match ``[a-zA-Z_][a-zA-Z0-9_]*``
    * names starting with ``__`` are reserved for internal use
    * ``le`` is reserved on histograms and ``quantile`` on summaries
    """

    def is_valid_metric_name(self, name: str) -> bool:
        if name.startswith(_RESERVED_PREFIX):
            return False
        return bool(_METRIC_NAME_RE.fullmatch(name))

    def is_valid_label_name(self, name: str, metric_type: MetricType) -> bool:
        if name.startswith(_RESERVED_PREFIX):
            return False
        if name in _RESERVED_LABELS.get(metric_type, frozenset()):
            return False
        return bool(_LABEL_NAME_RE.fullmatch(name))


DEFAULT_VALIDATOR = PrometheusNamingValidator()

__all__ = ["DEFAULT_VALIDATOR", "NamingValidator", "PrometheusNamingValidator"]
