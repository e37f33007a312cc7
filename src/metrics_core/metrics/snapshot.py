"""Immutable snapshot model produced by ``collect()``.

A metric's ``collect()`` returns a :class:`ClientMetric` without labels; the
owning family attaches constant labels first, then the instance labels, and
groups the samples into a :class:`MetricFamily`.
"""
from __future__ import annotations

import dataclasses

from metrics_core.metrics.types import MetricType


@dataclasses.dataclass(frozen=True)
class Label:
    name: str
    value: str


@dataclasses.dataclass(frozen=True)
class CounterValue:
    value: float


@dataclasses.dataclass(frozen=True)
class GaugeValue:
    value: float


@dataclasses.dataclass(frozen=True)
class InfoValue:
    value: float = 1.0


@dataclasses.dataclass(frozen=True)
class Bucket:
    """One cumulative histogram bucket."""
    cumulative_count: int
    upper_bound: float


@dataclasses.dataclass(frozen=True)
class HistogramValue:
    sample_count: int
    sample_sum: float
    buckets: tuple[Bucket, ...] = ()


@dataclasses.dataclass(frozen=True)
class Quantile:
    quantile: float
    value: float


@dataclasses.dataclass(frozen=True)
class SummaryValue:
    sample_count: int
    sample_sum: float
    quantiles: tuple[Quantile, ...] = ()


@dataclasses.dataclass(frozen=True)
class ClientMetric:
    """A single collected sample; exactly one payload field is populated."""
    labels: tuple[Label, ...] = ()
    counter: CounterValue | None = None
    gauge: GaugeValue | None = None
    histogram: HistogramValue | None = None
    summary: SummaryValue | None = None
    info: InfoValue | None = None

    def with_labels(self, labels: tuple[Label, ...]) -> "ClientMetric":
        return dataclasses.replace(self, labels=labels)

    @property
    def label_pairs(self) -> list[tuple[str, str]]:
        return [(label.name, label.value) for label in self.labels]


@dataclasses.dataclass(frozen=True)
class MetricFamily:
    """Collected output of one family: name, help, type and its samples."""
    name: str
    help: str
    type: MetricType
    metrics: tuple[ClientMetric, ...] = ()


__all__ = [
    "Bucket",
    "ClientMetric",
    "CounterValue",
    "GaugeValue",
    "HistogramValue",
    "InfoValue",
    "Label",
    "MetricFamily",
    "Quantile",
    "SummaryValue",
]
