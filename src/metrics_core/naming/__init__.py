"""Metric and label naming rules."""
from metrics_core.naming.validator import DEFAULT_VALIDATOR, NamingValidator, PrometheusNamingValidator

__all__ = ["DEFAULT_VALIDATOR", "NamingValidator", "PrometheusNamingValidator"]
