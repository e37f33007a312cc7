"""Kernel – framework-agnostic building blocks shared by every layer."""

from metrics_core.kernel.errors import (
    BaseError,
    ConflictError,
    ConstructionError,
    InvalidArgumentError,
    UsageError,
)
from metrics_core.kernel.types import Labels

__all__ = [
    "BaseError",
    "ConflictError",
    "ConstructionError",
    "InvalidArgumentError",
    "Labels",
    "UsageError",
]
