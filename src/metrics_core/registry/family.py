"""Family — a named group of same-type metrics keyed by label set."""
from __future__ import annotations

import threading
from typing import Any, Generic

from metrics_core.kernel.errors import InvalidArgumentError, InvalidLabelNameError, InvalidMetricNameError
from metrics_core.kernel.types import Labels, LabelsLike
from metrics_core.metrics.ports import M
from metrics_core.metrics.snapshot import ClientMetric, Label, MetricFamily
from metrics_core.metrics.types import MetricType
from metrics_core.naming import DEFAULT_VALIDATOR, NamingValidator


class Family(Generic[M]):
    """Owns one metric of kind ``M`` per distinct label set.

    All metrics of a family share the name, the help text and the constant
    labels. Constant labels are attached first to every collected sample,
    followed by the metric's own labels.

    The family is the owner of its metrics until they are removed, but the
    handles it returns are ordinary references: a caller keeps a working
    metric even after :meth:`remove` or a clearing :meth:`collect` dropped it
    from the family.

    Thread-safe: the label map is guarded by a lock, and
    :meth:`get_or_add` is a single insert-or-fetch step.
    """

    def __init__(
        self,
        kind: type[M],
        name: str,
        help: str = "",  # noqa: A002
        constant_labels: LabelsLike = None,
        *,
        validator: NamingValidator | None = None,
    ) -> None:
        self._validator = validator or DEFAULT_VALIDATOR
        self._kind = kind
        self._name = name
        self._help = help
        self._constant_labels = Labels.of(constant_labels)

        if not self._validator.is_valid_metric_name(name):
            raise InvalidMetricNameError(name)
        for label_name in self._constant_labels:
            if not self._validator.is_valid_label_name(label_name, kind.metric_type):
                raise InvalidLabelNameError(label_name, name)

        self._metrics: dict[Labels, M] = {}
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def help(self) -> str:
        return self._help

    @property
    def constant_labels(self) -> Labels:
        return self._constant_labels

    @property
    def kind(self) -> type[M]:
        return self._kind

    @property
    def metric_type(self) -> MetricType:
        return self._kind.metric_type

    def __len__(self) -> int:
        with self._lock:
            return len(self._metrics)

    def __contains__(self, labels: object) -> bool:
        key = Labels.of(labels)  # type: ignore[arg-type]
        with self._lock:
            return key in self._metrics

    def __repr__(self) -> str:
        return f"Family(type={self.metric_type.value!r}, name={self._name!r})"

    # ------------------------------------------------------------------
    # Label-keyed store
    # ------------------------------------------------------------------

    def _check_labels(self, labels: Labels) -> None:
        for label_name in labels:
            if not self._validator.is_valid_label_name(label_name, self.metric_type):
                raise InvalidLabelNameError(label_name, self._name)
            if label_name in self._constant_labels:
                raise InvalidArgumentError(
                    f"Label '{label_name}' is already a constant label of '{self._name}'",
                    detail={"label": label_name, "metric": self._name},
                )

    def get_or_add(self, labels: LabelsLike = None, *args: Any, **kwargs: Any) -> M:
        """Return the metric for *labels*, creating ``kind(*args, **kwargs)`` if absent.

        Constructor arguments are ignored when the metric already exists.
        """
        key = Labels.of(labels)
        with self._lock:
            existing = self._metrics.get(key)
            if existing is not None:
                return existing
            self._check_labels(key)
            metric = self._kind(*args, **kwargs)
            self._metrics[key] = metric
            return metric

    def add(self, labels: LabelsLike, metric: M) -> M:
        """Insert a pre-built *metric*; an existing one for *labels* wins."""
        key = Labels.of(labels)
        with self._lock:
            existing = self._metrics.get(key)
            if existing is not None:
                return existing
            self._check_labels(key)
            self._metrics[key] = metric
            return metric

    def get(self, labels: LabelsLike = None) -> M | None:
        key = Labels.of(labels)
        with self._lock:
            return self._metrics.get(key)

    def remove(self, labels: LabelsLike = None) -> None:
        key = Labels.of(labels)
        with self._lock:
            self._metrics.pop(key, None)

    # ------------------------------------------------------------------
    # Collection
    # ------------------------------------------------------------------

    def _collect_metric(self, labels: Labels, metric: M) -> ClientMetric:
        attached = tuple(Label(name, value) for name, value in self._constant_labels.pairs)
        attached += tuple(Label(name, value) for name, value in labels.pairs)
        return metric.collect().with_labels(attached)

    def collect(self, clear: bool = False) -> list[MetricFamily]:
        """Snapshot every metric; an empty family yields no entry at all."""
        with self._lock:
            if not self._metrics:
                return []
            samples = tuple(self._collect_metric(labels, metric) for labels, metric in self._metrics.items())
            if clear:
                self._metrics.clear()
        return [MetricFamily(name=self._name, help=self._help, type=self.metric_type, metrics=samples)]


__all__ = ["Family"]
