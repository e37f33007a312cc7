"""Labels — immutable, hashable label set used as a metric key."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Union

from metrics_core.kernel.errors import InvalidArgumentError

LabelsLike = Union["Labels", Mapping[str, str], Iterable[tuple[str, str]], None]


class Labels(Mapping[str, str]):
    """An unordered set of ``name -> value`` string pairs.

    Equality and hashing ignore insertion order, so ``Labels(a="1", b="2")``
    and ``Labels(b="2", a="1")`` address the same metric. Iteration is in
    ascending name order, which keeps collected output reproducible.
    A ``Labels`` also compares equal to a plain mapping with the same pairs.
    """

    __slots__ = ("_items", "_pairs", "_hash")

    def __init__(self, labels: LabelsLike = None, **kwargs: str) -> None:
        items: dict[str, str] = dict(labels or {})
        items.update(kwargs)
        for name, value in items.items():
            if not isinstance(name, str) or not isinstance(value, str):
                raise InvalidArgumentError(
                    f"Label names and values must be strings, got {name!r}={value!r}",
                    detail={"label": repr(name), "value": repr(value)},
                )
        self._pairs: tuple[tuple[str, str], ...] = tuple(sorted(items.items()))
        self._items: dict[str, str] = dict(self._pairs)
        self._hash = hash(self._pairs)

    @classmethod
    def of(cls, labels: LabelsLike) -> "Labels":
        """Return *labels* unchanged if it already is a ``Labels``."""
        if isinstance(labels, Labels):
            return labels
        return cls(labels)

    def __getitem__(self, name: str) -> str:
        return self._items[name]

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Labels):
            return self._pairs == other._pairs
        if isinstance(other, Mapping):
            return self._items == dict(other.items())
        return NotImplemented

    def __hash__(self) -> int:
        return self._hash

    def __repr__(self) -> str:
        return f"Labels({self._items!r})"

    @property
    def pairs(self) -> tuple[tuple[str, str], ...]:
        """Name/value pairs in ascending name order."""
        return self._pairs

    def merge(self, other: LabelsLike) -> "Labels":
        """Return a new label set; pairs from *other* win on name clashes."""
        merged = dict(self._items)
        merged.update(Labels.of(other)._items)
        return Labels(merged)


__all__ = ["Labels", "LabelsLike"]
