"""Metric port — the capability set every metric kind shares."""
from __future__ import annotations

from typing import ClassVar, Protocol, TypeVar, runtime_checkable

from metrics_core.metrics.snapshot import ClientMetric
from metrics_core.metrics.types import MetricType


@runtime_checkable
class Metric(Protocol):
    """Anything a family can own: tagged with a type and collectable."""

    metric_type: ClassVar[MetricType]

    def collect(self) -> ClientMetric: ...


M = TypeVar("M", bound=Metric)

__all__ = ["M", "Metric"]
