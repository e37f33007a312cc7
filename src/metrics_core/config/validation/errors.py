"""Configuration errors — registry settings could not be loaded or validated."""

from __future__ import annotations

from typing import Any

from metrics_core.kernel.errors import BaseError


class ConfigError(BaseError):
    """Loading or validating :class:`RegistrySettings` failed."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """An environment variable without a default is not set."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str, **kwargs: Any) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            detail={"setting": setting_name},
            **kwargs,
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting parsed fine but its value is out of range."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: Any, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "value": value, "reason": reason},
            **kwargs,
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
