"""Kernel value types."""

from metrics_core.kernel.types.labels import Labels, LabelsLike

__all__ = ["Labels", "LabelsLike"]
