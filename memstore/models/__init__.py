from memstore.models.stats import CacheStats
from memstore.models.version import Version

__all__ = [
    "CacheStats",
    "Version",
]
