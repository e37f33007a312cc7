"""Collectable protocol and fan-in helper."""
from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable

from metrics_core.metrics.snapshot import MetricFamily


@runtime_checkable
class Collectable(Protocol):
    """Anything that can produce a snapshot of metric families.

    ``clear=True`` asks the collectable to drop the collected metrics once the
    snapshot is taken ("scrape resets state").
    """

    def collect(self, clear: bool = False) -> list[MetricFamily]: ...


def collect_all(collectables: Iterable[Collectable], clear: bool = False) -> list[MetricFamily]:
    """Concatenate the snapshots of several collectables, in the given order."""
    results: list[MetricFamily] = []
    for collectable in collectables:
        results.extend(collectable.collect(clear))
    return results


__all__ = ["Collectable", "collect_all"]
