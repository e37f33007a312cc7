"""Registration conflicts — a family name clashes with one already registered."""

from __future__ import annotations

from typing import Any

from metrics_core.kernel.errors.base import BaseError


class ConflictError(BaseError):
    """A family registration collides with the registry's current state."""

    default_code = "conflict"


class NameConflictError(ConflictError):
    """The name is already held by a family of a different metric type."""

    default_code = "name_conflict"

    def __init__(self, name: str, requested_type: str, **kwargs: Any) -> None:
        super().__init__(
            f"Family name '{name}' already registered with a different type than {requested_type}",
            detail={"name": name, "requested_type": requested_type},
            **kwargs,
        )
        self.name = name
        self.requested_type = requested_type


class DuplicateFamilyError(ConflictError):
    """A family of the same type and name exists and duplicates are rejected."""

    default_code = "duplicate_family"

    def __init__(self, name: str, metric_type: str, **kwargs: Any) -> None:
        super().__init__(
            f"{metric_type} family '{name}' is already registered",
            detail={"name": name, "type": metric_type},
            **kwargs,
        )
        self.name = name
        self.metric_type = metric_type


__all__ = ["ConflictError", "DuplicateFamilyError", "NameConflictError"]
