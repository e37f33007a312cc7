"""Builder — fluent configuration of a family before registering it.

Example::

    registry = Registry()
    requests = (
        build_counter()
        .name("http_requests_total")
        .help("Handled HTTP requests.")
        .labels({"service": "api"})
        .register(registry)
    )
    requests.get_or_add({"route": "/health"}).increment()
"""
from __future__ import annotations

from typing import Generic

from metrics_core.kernel.types import Labels, LabelsLike
from metrics_core.metrics.counter import Counter
from metrics_core.metrics.gauge import Gauge
from metrics_core.metrics.histogram import Histogram
from metrics_core.metrics.info import Info
from metrics_core.metrics.ports import M
from metrics_core.metrics.summary import Summary
from metrics_core.registry.family import Family
from metrics_core.registry.registry import Registry


class Builder(Generic[M]):
    def __init__(self, kind: type[M]) -> None:
        self._kind = kind
        self._name = ""
        self._help = ""
        self._labels = Labels()

    def name(self, name: str) -> "Builder[M]":
        self._name = name
        return self

    def help(self, help: str) -> "Builder[M]":  # noqa: A002
        self._help = help
        return self

    def labels(self, labels: LabelsLike) -> "Builder[M]":
        self._labels = Labels.of(labels)
        return self

    def register(self, registry: Registry) -> Family[M]:
        return registry.add_family(self._kind, self._name, self._help, self._labels)


def build_counter() -> Builder[Counter]:
    return Builder(Counter)


def build_gauge() -> Builder[Gauge]:
    return Builder(Gauge)


def build_histogram() -> Builder[Histogram]:
    return Builder(Histogram)


def build_summary() -> Builder[Summary]:
    return Builder(Summary)


def build_info() -> Builder[Info]:
    return Builder(Info)


__all__ = [
    "Builder",
    "build_counter",
    "build_gauge",
    "build_histogram",
    "build_info",
    "build_summary",
]
