"""Unit tests for the Collectable protocol and collect_all."""

from __future__ import annotations

from metrics_core.metrics import Counter, Gauge, MetricFamily, MetricType
from metrics_core.registry import Collectable, Family, Registry, collect_all


class _StaticCollectable:
    def __init__(self, name: str) -> None:
        self.name = name
        self.cleared = False

    def collect(self, clear: bool = False) -> list[MetricFamily]:
        self.cleared = clear
        return [MetricFamily(name=self.name, help="", type=MetricType.GAUGE, metrics=())]


class TestCollectable:
    def test_protocol_conformance(self) -> None:
        assert isinstance(Registry(), Collectable)
        assert isinstance(Family(Counter, "c_total"), Collectable)
        assert isinstance(_StaticCollectable("x"), Collectable)
        assert not isinstance(object(), Collectable)

    def test_collect_all_preserves_order(self) -> None:
        first, second = _StaticCollectable("a"), _StaticCollectable("b")
        assert [f.name for f in collect_all([first, second])] == ["a", "b"]

    def test_collect_all_forwards_clear(self) -> None:
        source = _StaticCollectable("a")
        collect_all([source], clear=True)
        assert source.cleared is True

    def test_collect_all_mixes_registries(self) -> None:
        left, right = Registry(), Registry()
        left.add_family(Counter, "left_total").get_or_add().increment()
        right.add_family(Gauge, "right").get_or_add().set(2.0)
        assert [f.name for f in collect_all([left, right])] == ["left_total", "right"]

    def test_collect_all_empty(self) -> None:
        assert collect_all([]) == []
