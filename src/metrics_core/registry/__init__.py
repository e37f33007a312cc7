"""Registry, families and the collectable protocol."""
from metrics_core.registry.builder import (
    Builder,
    build_counter,
    build_gauge,
    build_histogram,
    build_info,
    build_summary,
)
from metrics_core.registry.collectable import Collectable, collect_all
from metrics_core.registry.family import Family
from metrics_core.registry.locking import ReadWriteLock
from metrics_core.registry.registry import COLLECT_ORDER, InsertBehavior, Registry

__all__ = [
    "Builder",
    "COLLECT_ORDER",
    "Collectable",
    "Family",
    "InsertBehavior",
    "ReadWriteLock",
    "Registry",
    "build_counter",
    "build_gauge",
    "build_histogram",
    "build_info",
    "build_summary",
    "collect_all",
]
