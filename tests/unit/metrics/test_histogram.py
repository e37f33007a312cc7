"""Unit tests for the Histogram bucketing algorithm."""

from __future__ import annotations

import math
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from metrics_core.kernel.errors import InvalidArgumentError, InvalidBucketBoundariesError, LengthMismatchError
from metrics_core.metrics import DEFAULT_BUCKETS, Histogram, MetricType
from metrics_core.registry import Registry


def _cumulative(h: Histogram) -> list[int]:
    return [b.cumulative_count for b in h.collect().histogram.buckets]


def _bounds(h: Histogram) -> list[float]:
    return [b.upper_bound for b in h.collect().histogram.buckets]


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestHistogramConstruction:
    def test_default_buckets(self) -> None:
        h = Histogram()
        assert h.boundaries == DEFAULT_BUCKETS
        assert h.bucket_count == len(DEFAULT_BUCKETS) + 1

    def test_custom_boundaries(self) -> None:
        h = Histogram([1, 2, 5])
        assert h.boundaries == (1.0, 2.0, 5.0)
        assert h.bucket_count == 4

    def test_empty_boundaries_single_inf_bucket(self) -> None:
        h = Histogram([])
        h.observe(42.0)
        assert _bounds(h) == [math.inf]
        assert _cumulative(h) == [1]

    @pytest.mark.parametrize(
        "boundaries",
        [[1.0, 1.0], [2.0, 1.0], [0.1, 0.5, 0.5, 1.0], [1.0, math.nan]],
    )
    def test_rejects_not_strictly_increasing(self, boundaries: list[float]) -> None:
        with pytest.raises(InvalidBucketBoundariesError):
            Histogram(boundaries)

    def test_rejection_is_invalid_argument(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Histogram([3, 2, 1])

    def test_metric_type(self) -> None:
        assert Histogram.metric_type is MetricType.HISTOGRAM


# ---------------------------------------------------------------------------
# Observe
# ---------------------------------------------------------------------------


class TestHistogramObserve:
    def test_reference_example(self) -> None:
        h = Histogram([0.1, 0.5, 1.0])
        for v in (0.05, 0.1, 0.3, 2.0):
            h.observe(v)
        collected = h.collect().histogram
        assert [b.cumulative_count for b in collected.buckets] == [2, 3, 3, 4]
        assert [b.upper_bound for b in collected.buckets] == [0.1, 0.5, 1.0, math.inf]
        assert collected.sample_count == 4
        assert collected.sample_sum == pytest.approx(2.45)

    def test_value_equal_to_boundary_goes_to_that_bucket(self) -> None:
        h = Histogram([1.0, 2.0])
        h.observe(1.0)
        assert _cumulative(h) == [1, 1, 1]

    def test_value_just_above_boundary_goes_to_next(self) -> None:
        h = Histogram([1.0, 2.0])
        h.observe(1.0000001)
        assert _cumulative(h) == [0, 1, 1]

    def test_value_above_last_boundary_goes_to_inf(self) -> None:
        h = Histogram([1.0])
        h.observe(1000.0)
        assert _cumulative(h) == [0, 1]

    def test_negative_value_goes_to_first_bucket(self) -> None:
        h = Histogram([0.0, 1.0])
        h.observe(-5.0)
        collected = h.collect().histogram
        assert _cumulative(h) == [1, 1, 1]
        assert collected.sample_sum == -5.0

    def test_empty_collect(self) -> None:
        collected = Histogram([1.0]).collect().histogram
        assert collected.sample_count == 0
        assert collected.sample_sum == 0.0
        assert [b.cumulative_count for b in collected.buckets] == [0, 0]

    def test_time_context_manager_observes(self) -> None:
        h = Histogram([10.0])
        with h.time():
            pass
        collected = h.collect().histogram
        assert collected.sample_count == 1
        assert 0.0 <= collected.sample_sum < 10.0

    def test_time_observes_on_exception(self) -> None:
        h = Histogram([10.0])
        with pytest.raises(RuntimeError):
            with h.time():
                raise RuntimeError("boom")
        assert h.collect().histogram.sample_count == 1

    def test_concurrent_observe_counts_all(self) -> None:
        h = Histogram([1.0, 2.0])
        threads = 8
        barrier = threading.Barrier(threads)

        def worker() -> None:
            barrier.wait()
            for _ in range(500):
                h.observe(1.5)

        with ThreadPoolExecutor(max_workers=threads) as pool:
            for f in [pool.submit(worker) for _ in range(threads)]:
                f.result()

        collected = h.collect().histogram
        assert collected.sample_count == threads * 500
        assert _cumulative(h) == [0, threads * 500, threads * 500]
        assert collected.sample_sum == pytest.approx(threads * 500 * 1.5)


# ---------------------------------------------------------------------------
# ObserveMultiple / Reset
# ---------------------------------------------------------------------------


class TestHistogramObserveMultiple:
    def test_adds_per_bucket_and_sum(self) -> None:
        h = Histogram([1.0, 2.0])
        h.observe_multiple([1, 2, 3], 12.5)
        collected = h.collect().histogram
        assert [b.cumulative_count for b in collected.buckets] == [1, 3, 6]
        assert collected.sample_count == 6
        assert collected.sample_sum == 12.5

    def test_combines_with_observe(self) -> None:
        h = Histogram([1.0])
        h.observe(0.5)
        h.observe_multiple([0, 2], 7.0)
        assert _cumulative(h) == [1, 3]
        assert h.collect().histogram.sample_sum == 7.5

    @pytest.mark.parametrize("increments", [[], [1, 1], [1, 1, 1, 1]])
    def test_length_mismatch_raises(self, increments: list[float]) -> None:
        h = Histogram([1.0, 2.0])
        with pytest.raises(LengthMismatchError):
            h.observe_multiple(increments, 1.0)

    def test_length_mismatch_leaves_state_unchanged(self) -> None:
        h = Histogram([1.0, 2.0])
        h.observe(1.5)
        before = h.collect()
        with pytest.raises(LengthMismatchError):
            h.observe_multiple([5, 5], 100.0)
        assert h.collect() == before

    @pytest.mark.parametrize("bad", [-3.0, math.nan, math.inf, 0.5])
    def test_rejects_bad_increment_without_side_effect(self, bad: float) -> None:
        h = Histogram([1.0, 2.0])
        h.observe(1.5)
        before = h.collect()
        with pytest.raises(InvalidArgumentError):
            h.observe_multiple([1.0, bad, 0.0], 3.0)
        assert h.collect() == before

    def test_zero_increments_accepted(self) -> None:
        h = Histogram([1.0])
        h.observe_multiple([0, 0], 0.0)
        assert _cumulative(h) == [0, 0]

    def test_rejected_batch_keeps_registry_scrape_working(self) -> None:
        registry = Registry()
        registry.add_family(Histogram, "batch_seconds")
        h = registry.get_or_add_metric(Histogram, "batch_seconds", None, [1.0])
        with pytest.raises(InvalidArgumentError):
            h.observe_multiple([math.nan, 0.0], 0.0)
        [family] = registry.collect()
        assert [b.cumulative_count for b in family.metrics[0].histogram.buckets] == [0, 0]


class TestHistogramReset:
    def test_reset_zeroes_everything(self) -> None:
        h = Histogram([1.0])
        h.observe(0.5)
        h.observe_multiple([3, 4], 10.0)
        h.reset()
        collected = h.collect().histogram
        assert collected.sample_count == 0
        assert collected.sample_sum == 0.0
        assert [b.cumulative_count for b in collected.buckets] == [0, 0]

    def test_usable_after_reset(self) -> None:
        h = Histogram([1.0])
        h.observe(0.5)
        h.reset()
        h.observe(2.0)
        assert _cumulative(h) == [0, 1]
