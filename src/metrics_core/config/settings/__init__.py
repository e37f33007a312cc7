"""Config settings – 12-factor env-based configuration."""
from metrics_core.config.settings.base import RegistrySettings, Settings
from metrics_core.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "RegistrySettings", "Settings", "SettingsLoader"]
