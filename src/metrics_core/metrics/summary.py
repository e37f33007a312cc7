"""Summary — streaming quantiles over a sliding time window."""
from __future__ import annotations

import collections
import contextlib
import math
import threading
import time
from typing import Callable, ClassVar, Iterator, Sequence

from metrics_core.kernel.errors import InvalidArgumentError
from metrics_core.metrics.snapshot import ClientMetric, Quantile, SummaryValue
from metrics_core.metrics.types import MetricType

# (quantile, allowed error) pairs
DEFAULT_QUANTILES: tuple[tuple[float, float], ...] = ((0.5, 0.05), (0.9, 0.01), (0.99, 0.001))
DEFAULT_MAX_AGE = 60.0
DEFAULT_AGE_BUCKETS = 5
DEFAULT_MAX_SAMPLES = 1000


class Summary:
    """Summary with client-side quantiles.

    Observations are kept in ``age_buckets`` rotating sample windows, each
    covering ``max_age`` seconds and staggered by ``max_age / age_buckets``.
    Quantiles are read from the oldest live window, so a sample stays visible
    for at most ``max_age`` seconds. Quantiles use the nearest-rank method over
    the samples a window still holds.

    Each window keeps only the latest ``max_samples`` values. Once more than
    that many observations arrive within one window, older ones are dropped
    before they age out, and the quantiles describe just the most recent
    ``max_samples`` observations rather than the whole ``max_age`` span.

    Count and sum are cumulative and never expire.
    """

    metric_type: ClassVar[MetricType] = MetricType.SUMMARY

    def __init__(
        self,
        quantiles: Sequence[tuple[float, float]] = DEFAULT_QUANTILES,
        max_age: float = DEFAULT_MAX_AGE,
        age_buckets: int = DEFAULT_AGE_BUCKETS,
        *,
        max_samples: int = DEFAULT_MAX_SAMPLES,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        objectives = tuple((float(q), float(e)) for q, e in quantiles)
        for q, e in objectives:
            if not 0.0 <= q <= 1.0:
                raise InvalidArgumentError(f"Quantile {q} must be in [0, 1]", detail={"quantile": q})
            if not 0.0 <= e <= 1.0:
                raise InvalidArgumentError(f"Quantile error {e} must be in [0, 1]", detail={"error": e})
        if max_age <= 0:
            raise InvalidArgumentError("max_age must be positive", detail={"max_age": max_age})
        if age_buckets < 1:
            raise InvalidArgumentError("age_buckets must be at least 1", detail={"age_buckets": age_buckets})
        if max_samples < 1:
            raise InvalidArgumentError("max_samples must be at least 1", detail={"max_samples": max_samples})

        self._quantiles = objectives
        self._max_age = float(max_age)
        self._rotation_interval = self._max_age / age_buckets
        self._clock = clock
        self._windows: list[collections.deque[float]] = [
            collections.deque(maxlen=max_samples) for _ in range(age_buckets)
        ]
        self._head = 0
        self._last_rotation = clock()
        self._count = 0
        self._sum = 0.0
        self._lock = threading.Lock()

    @property
    def quantiles(self) -> tuple[tuple[float, float], ...]:
        return self._quantiles

    def observe(self, value: float) -> None:
        with self._lock:
            self._rotate()
            self._count += 1
            self._sum += value
            for window in self._windows:
                window.append(value)

    @contextlib.contextmanager
    def time(self) -> Iterator[None]:
        """Observe the wall time spent in the ``with`` block, in seconds."""
        start = time.perf_counter()
        try:
            yield
        finally:
            self.observe(time.perf_counter() - start)

    def _rotate(self) -> None:
        # caller holds the lock
        rotations = int((self._clock() - self._last_rotation) // self._rotation_interval)
        if rotations <= 0:
            return
        for _ in range(min(rotations, len(self._windows))):
            self._windows[self._head].clear()
            self._head = (self._head + 1) % len(self._windows)
        self._last_rotation += rotations * self._rotation_interval

    @staticmethod
    def _nearest_rank(ordered: list[float], q: float) -> float:
        if not ordered:
            return math.nan
        rank = max(0, math.ceil(q * len(ordered)) - 1)
        return ordered[min(rank, len(ordered) - 1)]

    def collect(self) -> ClientMetric:
        with self._lock:
            self._rotate()
            ordered = sorted(self._windows[self._head])
            quantiles = tuple(
                Quantile(quantile=q, value=self._nearest_rank(ordered, q)) for q, _ in self._quantiles
            )
            return ClientMetric(
                summary=SummaryValue(sample_count=self._count, sample_sum=self._sum, quantiles=quantiles)
            )

    def __repr__(self) -> str:
        return f"Summary(quantiles={self._quantiles!r}, max_age={self._max_age!r})"


__all__ = ["DEFAULT_AGE_BUCKETS", "DEFAULT_MAX_AGE", "DEFAULT_QUANTILES", "Summary"]
