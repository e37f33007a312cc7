"""Counter — a monotonically increasing value backed by a gauge."""
from __future__ import annotations

from typing import ClassVar

from metrics_core.metrics.gauge import Gauge
from metrics_core.metrics.snapshot import ClientMetric, CounterValue
from metrics_core.metrics.types import MetricType


class Counter:
    """Monotonically increasing counter.

    Non-positive increments are ignored, so the value never goes down except
    through :meth:`reset`.
    """

    metric_type: ClassVar[MetricType] = MetricType.COUNTER

    def __init__(self) -> None:
        self._gauge = Gauge()

    def increment(self, value: float = 1.0) -> None:
        # NaN fails the comparison as well
        if value > 0:
            self._gauge.increment(value)

    def reset(self) -> None:
        self._gauge.set(0.0)

    @property
    def value(self) -> float:
        return self._gauge.value

    def collect(self) -> ClientMetric:
        return ClientMetric(counter=CounterValue(self.value))

    def __repr__(self) -> str:
        return f"Counter(value={self.value!r})"


__all__ = ["Counter"]
