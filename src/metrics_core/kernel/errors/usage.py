"""Usage errors — programming mistakes in the instrumented application."""

from __future__ import annotations

from typing import Any

from metrics_core.kernel.errors.base import BaseError


class UsageError(BaseError):
    """The caller used the API in a way it does not support."""

    default_code = "usage_error"


class FamilyNotRegisteredError(UsageError, LookupError):
    """A metric was requested from a family that was never registered."""

    default_code = "family_not_registered"

    def __init__(self, name: str, metric_type: str, **kwargs: Any) -> None:
        super().__init__(
            f"Family {name} not initialized before using it",
            detail={"name": name, "type": metric_type},
            **kwargs,
        )
        self.name = name
        self.metric_type = metric_type


class LengthMismatchError(UsageError, ValueError):
    """A bulk observation does not cover every histogram bucket."""

    default_code = "length_mismatch"

    def __init__(self, expected: int, actual: int, **kwargs: Any) -> None:
        super().__init__(
            "The size of bucket_increments was not equal to the number of buckets in the histogram",
            detail={"expected": expected, "actual": actual},
            **kwargs,
        )
        self.expected = expected
        self.actual = actual


class UnsupportedOperationError(UsageError):
    """The metric kind does not offer the requested mutation."""

    default_code = "unsupported_operation"

    def __init__(self, operation: str, metric_type: str, **kwargs: Any) -> None:
        super().__init__(
            f"{metric_type} does not support '{operation}'",
            detail={"operation": operation, "type": metric_type},
            **kwargs,
        )
        self.operation = operation
        self.metric_type = metric_type


__all__ = [
    "FamilyNotRegisteredError",
    "LengthMismatchError",
    "UnsupportedOperationError",
    "UsageError",
]
