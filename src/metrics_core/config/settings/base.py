"""Config settings – Settings base class and RegistrySettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from metrics_core.config.validation import InvalidSettingValueError
from metrics_core.metrics.histogram import DEFAULT_BUCKETS, is_strictly_sorted


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class RegistrySettings(Settings):
    """Registry defaults, read from ``METRICS_*`` environment variables."""

    _prefix: ClassVar[str] = "METRICS"

    insert_behavior: str = "merge"
    default_buckets: list[float] = dataclasses.field(default_factory=lambda: list(DEFAULT_BUCKETS))
    summary_max_age_seconds: float = 60.0
    summary_age_buckets: int = 5
    log_level: str = "INFO"

    def _validate(self) -> None:
        self.insert_behavior = self.insert_behavior.lower()
        if self.insert_behavior not in ("merge", "throw"):
            raise InvalidSettingValueError("insert_behavior", self.insert_behavior, "expected 'merge' or 'throw'")
        if not is_strictly_sorted(self.default_buckets):
            raise InvalidSettingValueError(
                "default_buckets", self.default_buckets, "must be strictly increasing and not NaN"
            )
        if self.summary_max_age_seconds <= 0:
            raise InvalidSettingValueError("summary_max_age_seconds", self.summary_max_age_seconds, "must be positive")
        if self.summary_age_buckets < 1:
            raise InvalidSettingValueError("summary_age_buckets", self.summary_age_buckets, "must be at least 1")
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["RegistrySettings", "Settings"]
