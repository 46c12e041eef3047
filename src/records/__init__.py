"""
Floral formula database: loading, indexing and name lookup.
"""

from .flower_type import FlowerType
from .lookup import LookupConfig, LookupResult, did_you_mean, levenshtein_distance, resolve_name
from .store import (
    DEFAULT_DATA_PATH,
    RECORD_COLUMNS,
    FloralRecord,
    RecordStore,
    RecordStoreConfig,
)

__all__ = [
    "FlowerType",
    "LookupConfig",
    "LookupResult",
    "did_you_mean",
    "levenshtein_distance",
    "resolve_name",
    "DEFAULT_DATA_PATH",
    "RECORD_COLUMNS",
    "FloralRecord",
    "RecordStore",
    "RecordStoreConfig",
]
