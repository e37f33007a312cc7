"""Unit tests for RegistrySettings and EnvSettingsLoader."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import ClassVar

import pytest

from metrics_core.config import (
    ConfigError,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    RegistrySettings,
    Settings,
)
from metrics_core.metrics import DEFAULT_BUCKETS


@dataclass
class ExporterSettings(Settings):
    _prefix: ClassVar[str] = "EXPORTER"

    endpoint: str
    port: int = 9100
    enabled: bool = False
    tags: list[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# RegistrySettings
# ---------------------------------------------------------------------------


class TestRegistrySettings:
    def test_defaults(self) -> None:
        settings = RegistrySettings()
        assert settings.insert_behavior == "merge"
        assert settings.default_buckets == list(DEFAULT_BUCKETS)
        assert settings.summary_max_age_seconds == 60.0
        assert settings.summary_age_buckets == 5
        assert settings.log_level == "INFO"
        assert settings.log_level_number == logging.INFO

    def test_insert_behavior_is_normalised(self) -> None:
        assert RegistrySettings(insert_behavior="THROW").insert_behavior == "throw"

    def test_unknown_insert_behavior(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            RegistrySettings(insert_behavior="replace")
        assert exc_info.value.setting_name == "insert_behavior"

    def test_unsorted_buckets(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            RegistrySettings(default_buckets=[1.0, 1.0, 2.0])

    def test_nan_bucket(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            RegistrySettings(default_buckets=[1.0, float("nan")])
        assert exc_info.value.setting_name == "default_buckets"

    def test_non_positive_max_age(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            RegistrySettings(summary_max_age_seconds=0)

    def test_zero_age_buckets(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            RegistrySettings(summary_age_buckets=0)

    def test_log_level_normalised(self) -> None:
        settings = RegistrySettings(log_level="debug")
        assert settings.log_level == "DEBUG"
        assert settings.log_level_number == logging.DEBUG

    def test_unknown_log_level(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            RegistrySettings(log_level="chatty")

    def test_validation_error_is_config_error(self) -> None:
        with pytest.raises(ConfigError):
            RegistrySettings(summary_age_buckets=-1)

    def test_default_buckets_not_shared(self) -> None:
        a = RegistrySettings()
        a.default_buckets.append(100.0)
        assert RegistrySettings().default_buckets == list(DEFAULT_BUCKETS)


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_empty_environment_gives_defaults(self) -> None:
        assert EnvSettingsLoader({}).load(RegistrySettings) == RegistrySettings()

    def test_reads_prefixed_variables(self) -> None:
        environ = {
            "METRICS_INSERT_BEHAVIOR": "throw",
            "METRICS_DEFAULT_BUCKETS": "0.1, 0.5, 1",
            "METRICS_SUMMARY_MAX_AGE_SECONDS": "30",
            "METRICS_SUMMARY_AGE_BUCKETS": "3",
            "METRICS_LOG_LEVEL": "warning",
        }
        settings = EnvSettingsLoader(environ).load(RegistrySettings)
        assert settings.insert_behavior == "throw"
        assert settings.default_buckets == [0.1, 0.5, 1.0]
        assert settings.summary_max_age_seconds == 30.0
        assert settings.summary_age_buckets == 3
        assert settings.log_level == "WARNING"

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("METRICS_SUMMARY_AGE_BUCKETS", "7")
        assert EnvSettingsLoader().load(RegistrySettings).summary_age_buckets == 7

    def test_unparseable_value(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            EnvSettingsLoader({"METRICS_SUMMARY_AGE_BUCKETS": "many"}).load(RegistrySettings)
        assert isinstance(exc_info.value.cause, ValueError)

    def test_invalid_value_keeps_specific_error(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"METRICS_DEFAULT_BUCKETS": "2,1"}).load(RegistrySettings)

    def test_nan_bucket_fails_at_load(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"METRICS_DEFAULT_BUCKETS": "1,nan"}).load(RegistrySettings)

    def test_missing_required(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader({}).load(ExporterSettings)
        assert exc_info.value.setting_name == "EXPORTER_ENDPOINT"

    def test_coerces_bool_int_and_str_list(self) -> None:
        environ = {
            "EXPORTER_ENDPOINT": "localhost",
            "EXPORTER_PORT": "9200",
            "EXPORTER_ENABLED": "yes",
            "EXPORTER_TAGS": "a, b,,c",
        }
        settings = EnvSettingsLoader(environ).load(ExporterSettings)
        assert settings.endpoint == "localhost"
        assert settings.port == 9200
        assert settings.enabled is True
        assert settings.tags == ["a", "b", "c"]
