"""Histogram — counts observations into configurable buckets."""
from __future__ import annotations

import bisect
import contextlib
import math
import threading
import time
from typing import ClassVar, Iterator, Sequence

from metrics_core.kernel.errors import InvalidArgumentError, InvalidBucketBoundariesError, LengthMismatchError
from metrics_core.metrics.atomic import AtomicValue
from metrics_core.metrics.snapshot import Bucket, ClientMetric, HistogramValue
from metrics_core.metrics.types import MetricType

# Default histogram buckets (latency in seconds)
DEFAULT_BUCKETS: tuple[float, ...] = (
    0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0,
)


def is_strictly_sorted(boundaries: Sequence[float]) -> bool:
    if any(math.isnan(b) for b in boundaries):
        return False
    return all(a < b for a, b in zip(boundaries, boundaries[1:]))


def _is_bucket_increment(value: float) -> bool:
    return math.isfinite(value) and value >= 0 and float(value).is_integer()


class Histogram:
    """Histogram with strictly increasing bucket boundaries.

    ``len(boundaries) + 1`` buckets are kept; the last one has an implicit
    ``+Inf`` upper bound. A value equal to a boundary is counted in that
    boundary's bucket.

    :meth:`observe` touches only one bucket counter and the sum, each
    atomically, and never takes the histogram lock. :meth:`observe_multiple`,
    :meth:`reset` and :meth:`collect` run under the lock so that they see and
    leave the buckets and the sum as one consistent unit.
    """

    metric_type: ClassVar[MetricType] = MetricType.HISTOGRAM

    def __init__(self, boundaries: Sequence[float] = DEFAULT_BUCKETS) -> None:
        bounds = tuple(float(b) for b in boundaries)
        if not is_strictly_sorted(bounds):
            raise InvalidBucketBoundariesError(bounds)
        self._boundaries = bounds
        self._bucket_counts = [AtomicValue() for _ in range(len(bounds) + 1)]
        self._sum = AtomicValue()
        self._lock = threading.Lock()

    @property
    def boundaries(self) -> tuple[float, ...]:
        return self._boundaries

    @property
    def bucket_count(self) -> int:
        """Number of buckets, including the ``+Inf`` one."""
        return len(self._bucket_counts)

    def observe(self, value: float) -> None:
        index = bisect.bisect_left(self._boundaries, value)
        self._sum.add(value)
        self._bucket_counts[index].add(1)

    def observe_multiple(self, bucket_increments: Sequence[float], sum_of_values: float) -> None:
        """Add pre-aggregated per-bucket counts and their sum in one step.

        Every increment must be a finite, non-negative whole number; a bad
        batch is rejected before anything is applied.
        """
        if len(bucket_increments) != len(self._bucket_counts):
            raise LengthMismatchError(len(self._bucket_counts), len(bucket_increments))
        for index, increment in enumerate(bucket_increments):
            if not _is_bucket_increment(increment):
                raise InvalidArgumentError(
                    f"Bucket increment {increment!r} must be a non-negative whole number",
                    detail={"bucket": index, "increment": increment},
                )

        with self._lock:
            self._sum.add(sum_of_values)
            for counter, increment in zip(self._bucket_counts, bucket_increments):
                counter.add(increment)

    def reset(self) -> None:
        with self._lock:
            for counter in self._bucket_counts:
                counter.store(0.0)
            self._sum.store(0.0)

    @contextlib.contextmanager
    def time(self) -> Iterator[None]:
        """Observe the wall time spent in the ``with`` block, in seconds."""
        start = time.perf_counter()
        try:
            yield
        finally:
            self.observe(time.perf_counter() - start)

    def collect(self) -> ClientMetric:
        with self._lock:
            buckets: list[Bucket] = []
            cumulative = 0.0
            for i, counter in enumerate(self._bucket_counts):
                cumulative += counter.load()
                upper = self._boundaries[i] if i < len(self._boundaries) else math.inf
                buckets.append(Bucket(cumulative_count=int(cumulative), upper_bound=upper))
            return ClientMetric(
                histogram=HistogramValue(
                    sample_count=int(cumulative),
                    sample_sum=self._sum.load(),
                    buckets=tuple(buckets),
                )
            )

    def __repr__(self) -> str:
        return f"Histogram(boundaries={self._boundaries!r})"


__all__ = ["DEFAULT_BUCKETS", "Histogram"]
