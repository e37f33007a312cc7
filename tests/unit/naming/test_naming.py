"""Unit tests for the Prometheus naming validator."""

from __future__ import annotations

import pytest

from metrics_core.metrics import MetricType
from metrics_core.naming import DEFAULT_VALIDATOR, NamingValidator, PrometheusNamingValidator


@pytest.fixture
def validator() -> PrometheusNamingValidator:
    return PrometheusNamingValidator()


class TestMetricNames:
    @pytest.mark.parametrize("name", ["requests_total", "_private", "ns:sub:metric", "a1"])
    def test_valid(self, validator: PrometheusNamingValidator, name: str) -> None:
        assert validator.is_valid_metric_name(name)

    @pytest.mark.parametrize("name", ["", "1abc", "with-dash", "has space", "__reserved", "é"])
    def test_invalid(self, validator: PrometheusNamingValidator, name: str) -> None:
        assert not validator.is_valid_metric_name(name)


class TestLabelNames:
    @pytest.mark.parametrize("name", ["route", "_x", "code2"])
    def test_valid(self, validator: PrometheusNamingValidator, name: str) -> None:
        assert validator.is_valid_label_name(name, MetricType.COUNTER)

    @pytest.mark.parametrize("name", ["", "2xx", "a:b", "__name__", "with-dash"])
    def test_invalid(self, validator: PrometheusNamingValidator, name: str) -> None:
        assert not validator.is_valid_label_name(name, MetricType.GAUGE)

    def test_le_reserved_for_histograms_only(self, validator: PrometheusNamingValidator) -> None:
        assert not validator.is_valid_label_name("le", MetricType.HISTOGRAM)
        assert validator.is_valid_label_name("le", MetricType.GAUGE)

    def test_quantile_reserved_for_summaries_only(self, validator: PrometheusNamingValidator) -> None:
        assert not validator.is_valid_label_name("quantile", MetricType.SUMMARY)
        assert validator.is_valid_label_name("quantile", MetricType.HISTOGRAM)


class TestProtocol:
    def test_default_satisfies_protocol(self) -> None:
        assert isinstance(DEFAULT_VALIDATOR, NamingValidator)
