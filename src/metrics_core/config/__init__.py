"""Config – 12-factor settings and loaders."""

from metrics_core.config.settings import EnvSettingsLoader, RegistrySettings, Settings, SettingsLoader
from metrics_core.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "RegistrySettings",
    "Settings",
    "SettingsLoader",
]
