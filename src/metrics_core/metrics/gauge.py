"""Gauge — a value that can arbitrarily go up and down."""
from __future__ import annotations

import time
from typing import ClassVar

from metrics_core.metrics.atomic import AtomicValue
from metrics_core.metrics.snapshot import ClientMetric, GaugeValue
from metrics_core.metrics.types import MetricType


class Gauge:
    """Up/down gauge.

    Typically used for measured values like temperatures or current memory
    usage, but also "counts" that can go up and down, like the number of
    running workers. Thread-safe: every call is a single atomic update.
    """

    metric_type: ClassVar[MetricType] = MetricType.GAUGE

    def __init__(self, value: float = 0.0) -> None:
        self._value = AtomicValue(value)

    def increment(self, value: float = 1.0) -> None:
        self._value.add(value)

    def decrement(self, value: float = 1.0) -> None:
        self._value.add(-value)

    def set(self, value: float) -> None:
        self._value.store(value)

    def set_to_current_time(self) -> None:
        """Set the gauge to the current unix time in seconds."""
        self.set(time.time())

    @property
    def value(self) -> float:
        return self._value.load()

    def collect(self) -> ClientMetric:
        return ClientMetric(gauge=GaugeValue(self.value))

    def __repr__(self) -> str:
        return f"Gauge(value={self.value!r})"


__all__ = ["Gauge"]
