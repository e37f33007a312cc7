"""Metric primitives and the snapshot model they collect into."""
from metrics_core.metrics.atomic import AtomicValue
from metrics_core.metrics.counter import Counter
from metrics_core.metrics.gauge import Gauge
from metrics_core.metrics.histogram import DEFAULT_BUCKETS, Histogram
from metrics_core.metrics.info import Info
from metrics_core.metrics.ports import Metric
from metrics_core.metrics.snapshot import (
    Bucket,
    ClientMetric,
    CounterValue,
    GaugeValue,
    HistogramValue,
    InfoValue,
    Label,
    MetricFamily,
    Quantile,
    SummaryValue,
)
from metrics_core.metrics.summary import DEFAULT_QUANTILES, Summary
from metrics_core.metrics.types import MetricType

__all__ = [
    "AtomicValue",
    "Bucket",
    "ClientMetric",
    "Counter",
    "CounterValue",
    "DEFAULT_BUCKETS",
    "DEFAULT_QUANTILES",
    "Gauge",
    "GaugeValue",
    "Histogram",
    "HistogramValue",
    "Info",
    "InfoValue",
    "Label",
    "Metric",
    "MetricFamily",
    "MetricType",
    "Quantile",
    "Summary",
    "SummaryValue",
]
