"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ConstructionError             (construction.py)
    │   └── InvalidArgumentError
    │       ├── InvalidMetricNameError
    │       ├── InvalidLabelNameError
    │       └── InvalidBucketBoundariesError
    ├── ConflictError                 (registration.py)
    │   ├── NameConflictError
    │   └── DuplicateFamilyError
    └── UsageError                    (usage.py)
        ├── FamilyNotRegisteredError
        ├── LengthMismatchError
        └── UnsupportedOperationError

Configuration errors live in :mod:`metrics_core.config.validation`.
"""

from metrics_core.kernel.errors.base import BaseError
from metrics_core.kernel.errors.construction import (
    ConstructionError,
    InvalidArgumentError,
    InvalidBucketBoundariesError,
    InvalidLabelNameError,
    InvalidMetricNameError,
)
from metrics_core.kernel.errors.registration import (
    ConflictError,
    DuplicateFamilyError,
    NameConflictError,
)
from metrics_core.kernel.errors.usage import (
    FamilyNotRegisteredError,
    LengthMismatchError,
    UnsupportedOperationError,
    UsageError,
)

__all__ = [
    "BaseError",
    "ConflictError",
    "ConstructionError",
    "DuplicateFamilyError",
    "FamilyNotRegisteredError",
    "InvalidArgumentError",
    "InvalidBucketBoundariesError",
    "InvalidLabelNameError",
    "InvalidMetricNameError",
    "LengthMismatchError",
    "NameConflictError",
    "UnsupportedOperationError",
    "UsageError",
]
