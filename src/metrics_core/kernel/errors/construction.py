"""Construction errors — a metric, family or histogram was built with bad input."""

from __future__ import annotations

from typing import Any, Sequence

from metrics_core.kernel.errors.base import BaseError


class ConstructionError(BaseError):
    """Raised synchronously when an object cannot be constructed."""

    default_code = "construction_error"


class InvalidArgumentError(ConstructionError, ValueError):
    """An argument does not satisfy the constructor's contract."""

    default_code = "invalid_argument"


class InvalidMetricNameError(InvalidArgumentError):
    """The metric name was rejected by the naming validator."""

    default_code = "invalid_metric_name"

    def __init__(self, name: str, **kwargs: Any) -> None:
        super().__init__(
            f"Invalid metric name '{name}'",
            detail={"name": name},
            **kwargs,
        )
        self.name = name


class InvalidLabelNameError(InvalidArgumentError):
    """A label name was rejected by the naming validator."""

    default_code = "invalid_label_name"

    def __init__(self, label_name: str, metric_name: str, **kwargs: Any) -> None:
        super().__init__(
            f"Invalid label name '{label_name}' for metric '{metric_name}'",
            detail={"label": label_name, "metric": metric_name},
            **kwargs,
        )
        self.label_name = label_name
        self.metric_name = metric_name


class InvalidBucketBoundariesError(InvalidArgumentError):
    """Histogram bucket boundaries are not strictly increasing."""

    default_code = "invalid_bucket_boundaries"

    def __init__(self, boundaries: Sequence[float], **kwargs: Any) -> None:
        super().__init__(
            "Bucket boundaries must be strictly sorted",
            detail={"boundaries": list(boundaries)},
            **kwargs,
        )
        self.boundaries = tuple(boundaries)


__all__ = [
    "ConstructionError",
    "InvalidArgumentError",
    "InvalidBucketBoundariesError",
    "InvalidLabelNameError",
    "InvalidMetricNameError",
]
