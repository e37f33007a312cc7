"""Info — a constant metric whose payload is its labels."""
from __future__ import annotations

from typing import ClassVar

from metrics_core.metrics.snapshot import ClientMetric, InfoValue
from metrics_core.metrics.types import MetricType


class Info:
    """Exposes static key/value information (build version, commit, …) as labels."""

    metric_type: ClassVar[MetricType] = MetricType.INFO

    def collect(self) -> ClientMetric:
        return ClientMetric(info=InfoValue(1.0))

    def __repr__(self) -> str:
        return "Info()"


__all__ = ["Info"]
