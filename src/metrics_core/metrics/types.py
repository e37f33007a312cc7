"""Metric type tags."""
from __future__ import annotations

import enum


class MetricType(str, enum.Enum):
    COUNTER = "counter"
    GAUGE = "gauge"
    HISTOGRAM = "histogram"
    SUMMARY = "summary"
    INFO = "info"


__all__ = ["MetricType"]
