"""
metrics_core – in-process metrics registry and collection model.

Import path convention::

    from metrics_core.registry import Registry, InsertBehavior
    from metrics_core.metrics import Counter, Gauge, Histogram
    from metrics_core.kernel.errors import NameConflictError
    from metrics_core.config import EnvSettingsLoader, RegistrySettings
"""

from metrics_core.kernel.types import Labels
from metrics_core.metrics import Counter, Gauge, Histogram, Info, MetricFamily, MetricType, Summary
from metrics_core.registry import Collectable, Family, InsertBehavior, Registry, collect_all

__version__ = "0.1.0"
__all__ = [
    "Collectable",
    "Counter",
    "Family",
    "Gauge",
    "Histogram",
    "Info",
    "InsertBehavior",
    "Labels",
    "MetricFamily",
    "MetricType",
    "Registry",
    "Summary",
    "__version__",
    "collect_all",
]
