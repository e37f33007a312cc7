"""Registry — owns the metric families of a process and collects them."""
from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Any

from metrics_core.kernel.errors import (
    DuplicateFamilyError,
    FamilyNotRegisteredError,
    InvalidArgumentError,
    NameConflictError,
    UnsupportedOperationError,
)
from metrics_core.kernel.types import Labels, LabelsLike
from metrics_core.metrics.counter import Counter
from metrics_core.metrics.gauge import Gauge
from metrics_core.metrics.histogram import Histogram
from metrics_core.metrics.info import Info
from metrics_core.metrics.ports import M
from metrics_core.metrics.snapshot import MetricFamily
from metrics_core.metrics.summary import Summary
from metrics_core.metrics.types import MetricType
from metrics_core.naming import NamingValidator
from metrics_core.observability.logging import get_logger
from metrics_core.registry.family import Family
from metrics_core.registry.locking import ReadWriteLock

if TYPE_CHECKING:
    from metrics_core.config import RegistrySettings

logger = get_logger(__name__)

# Collection order is part of the output contract.
COLLECT_ORDER: tuple[MetricType, ...] = (
    MetricType.COUNTER,
    MetricType.GAUGE,
    MetricType.HISTOGRAM,
    MetricType.SUMMARY,
    MetricType.INFO,
)

_BUILTIN_KINDS: dict[MetricType, type] = {
    MetricType.COUNTER: Counter,
    MetricType.GAUGE: Gauge,
    MetricType.HISTOGRAM: Histogram,
    MetricType.SUMMARY: Summary,
    MetricType.INFO: Info,
}


class InsertBehavior(str, enum.Enum):
    """How to treat a second registration of the same (type, name).

    Re-using a name with a *different* type is always an error.
    """

    MERGE = "merge"
    """Return the family already registered under that name."""
    THROW = "throw"
    """Reject the duplicate with :class:`DuplicateFamilyError`."""


class Registry:
    """Manages the families of counters, gauges, histograms, summaries and infos.

    Keeps one family map per metric type and guarantees that a name is used
    by at most one family across all of them.

    Registration uses double-checked locking: a shared read lock serves the
    common "already registered" case, and only a miss takes the exclusive
    lock, re-checks and inserts. Concurrent registrations of the same family
    under :attr:`InsertBehavior.MERGE` therefore converge on one object; the
    first insert fixes its help text and constant labels.

    :meth:`collect` holds the exclusive lock for its whole run, so a scrape
    never sees a family half-registered. Families are collected by type in
    the order counters, gauges, histograms, summaries, infos, and in
    registration order within a type.

    Thread-safe: no concurrent call to any method causes a data race.
    """

    def __init__(
        self,
        insert_behavior: InsertBehavior = InsertBehavior.MERGE,
        *,
        validator: NamingValidator | None = None,
        settings: RegistrySettings | None = None,
    ) -> None:
        self._insert_behavior = InsertBehavior(insert_behavior)
        self._validator = validator
        self._settings = settings
        self._families: dict[MetricType, dict[str, Family[Any]]] = {t: {} for t in COLLECT_ORDER}
        self._lock = ReadWriteLock()

    @classmethod
    def from_settings(cls, settings: RegistrySettings, *, validator: NamingValidator | None = None) -> "Registry":
        return cls(InsertBehavior(settings.insert_behavior), validator=validator, settings=settings)

    @property
    def insert_behavior(self) -> InsertBehavior:
        return self._insert_behavior

    # ------------------------------------------------------------------
    # Families
    # ------------------------------------------------------------------

    @staticmethod
    def _metric_type_of(kind: type) -> MetricType:
        metric_type = getattr(kind, "metric_type", None)
        builtin = _BUILTIN_KINDS.get(metric_type) if isinstance(metric_type, MetricType) else None
        if builtin is None or not isinstance(kind, type) or not issubclass(kind, builtin):
            raise InvalidArgumentError(
                f"Unsupported metric kind {kind!r}",
                detail={"kind": getattr(kind, "__name__", repr(kind))},
            )
        return metric_type

    def _name_taken_by_other_type(self, metric_type: MetricType, name: str) -> bool:
        return any(name in families for t, families in self._families.items() if t is not metric_type)

    def add_family(
        self,
        kind: type[M],
        name: str,
        help: str = "",  # noqa: A002
        labels: LabelsLike = None,
    ) -> Family[M]:
        """Return the family *name* of *kind*, creating it on first use.

        Raises:
            NameConflictError: *name* belongs to a family of another type.
            DuplicateFamilyError: *name* exists and the policy is THROW.
            InvalidMetricNameError, InvalidLabelNameError: naming rules.
        """
        metric_type = self._metric_type_of(kind)

        if self._insert_behavior is InsertBehavior.MERGE:
            with self._lock.read():
                existing = self._families[metric_type].get(name)
                if existing is not None:
                    return existing

        with self._lock.write():
            families = self._families[metric_type]
            existing = families.get(name)
            if existing is not None:
                if self._insert_behavior is InsertBehavior.THROW:
                    raise DuplicateFamilyError(name, metric_type.value)
                return existing
            if self._name_taken_by_other_type(metric_type, name):
                raise NameConflictError(name, metric_type.value)

            family: Family[M] = Family(kind, name, help, labels, validator=self._validator)
            families[name] = family

        logger.debug("metrics.family_registered", name=name, type=metric_type.value)
        return family

    def get_family(self, kind: type[M], name: str) -> Family[M] | None:
        metric_type = self._metric_type_of(kind)
        with self._lock.read():
            return self._families[metric_type].get(name)

    def remove_family(self, kind: type[M], name: str) -> bool:
        """Drop a whole family. Metrics already handed out keep working."""
        metric_type = self._metric_type_of(kind)
        with self._lock.write():
            removed = self._families[metric_type].pop(name, None)
        if removed is None:
            return False
        logger.debug("metrics.family_removed", name=name, type=metric_type.value)
        return True

    # ------------------------------------------------------------------
    # Metrics
    # ------------------------------------------------------------------

    def _default_metric_kwargs(self, metric_type: MetricType) -> dict[str, Any]:
        if self._settings is None:
            return {}
        if metric_type is MetricType.HISTOGRAM:
            return {"boundaries": tuple(self._settings.default_buckets)}
        if metric_type is MetricType.SUMMARY:
            return {
                "max_age": self._settings.summary_max_age_seconds,
                "age_buckets": self._settings.summary_age_buckets,
            }
        return {}

    def get_or_add_metric(self, kind: type[M], name: str, labels: LabelsLike = None, *args: Any, **kwargs: Any) -> M:
        """Return the metric of family *name* for *labels*, creating it if needed.

        The family must have been registered with :meth:`add_family` first;
        a metric cannot be created without its family's configuration.
        """
        metric_type = self._metric_type_of(kind)
        if not args and not kwargs:
            kwargs = self._default_metric_kwargs(metric_type)
        key = Labels.of(labels)

        with self._lock.read():
            family = self._families[metric_type].get(name)
            if family is None:
                raise FamilyNotRegisteredError(name, metric_type.value)
            # the family lock makes insert-or-fetch a single step; holding the
            # read side keeps a clearing collect from interleaving
            return family.get_or_add(key, *args, **kwargs)

    def remove(self, kind: type[M], name: str, labels: LabelsLike = None) -> bool:
        """Remove the metric for *labels* from family *name*.

        Returns ``True`` when the family exists, whether or not it held a
        metric for *labels*; ``False`` only when the family is unknown.
        """
        metric_type = self._metric_type_of(kind)
        with self._lock.read():
            family = self._families[metric_type].get(name)
        if family is None:
            return False
        family.remove(labels)
        return True

    def _apply(
        self,
        operation: str,
        kind: type[M],
        name: str,
        labels: LabelsLike,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
        *values: float,
    ) -> None:
        if not callable(getattr(kind, operation, None)):
            raise UnsupportedOperationError(operation, getattr(kind, "__name__", repr(kind)))
        metric = self.get_or_add_metric(kind, name, labels, *args, **kwargs)
        getattr(metric, operation)(*values)

    def increment(self, kind: type[M], name: str, labels: LabelsLike = None, value: float = 1.0, *args: Any, **kwargs: Any) -> None:
        self._apply("increment", kind, name, labels, args, kwargs, value)

    def decrement(self, kind: type[M], name: str, labels: LabelsLike = None, value: float = 1.0, *args: Any, **kwargs: Any) -> None:
        self._apply("decrement", kind, name, labels, args, kwargs, value)

    def set(self, kind: type[M], name: str, labels: LabelsLike, value: float, *args: Any, **kwargs: Any) -> None:
        self._apply("set", kind, name, labels, args, kwargs, value)

    def observe(self, kind: type[M], name: str, labels: LabelsLike, value: float, *args: Any, **kwargs: Any) -> None:
        """Observe *value* on a histogram or summary; extra args build a new metric."""
        self._apply("observe", kind, name, labels, args, kwargs, value)

    # ------------------------------------------------------------------
    # Collection
    # ------------------------------------------------------------------

    def collect(self, clear: bool = False) -> list[MetricFamily]:
        """Return every non-empty family, optionally clearing them afterwards."""
        results: list[MetricFamily] = []
        with self._lock.write():
            for metric_type in COLLECT_ORDER:
                for family in self._families[metric_type].values():
                    results.extend(family.collect(clear))
        return results

    def __repr__(self) -> str:
        return f"Registry(insert_behavior={self._insert_behavior.value!r})"


__all__ = ["COLLECT_ORDER", "InsertBehavior", "Registry"]
