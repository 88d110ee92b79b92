"""Filesystem-backed JSON record store addressed by hierarchical keys."""

from __future__ import annotations

from .config import StoreSettings
from .errors import (
    FinderNotFoundError,
    InvalidKeyError,
    InvalidMergeStrategyError,
    RecordEncodingError,
    RecordNotFoundError,
    StoreError,
)
from .keys import ComKey, Key, LocKey, PriKey, is_com_key, key_from_dict, key_from_record, key_to_dict
from .models import (
    CreateOptions,
    FindResult,
    ListResult,
    MergeStrategy,
    PaginationOptions,
    Query,
    Record,
    UpdateOptions,
)
from .operations import Operations
from .paths import PathMapper
from .store import (
    RecordStore,
    create_contained_store,
    create_primary_store,
    create_store,
    is_record_store,
)

__all__ = [
    "ComKey",
    "CreateOptions",
    "FindResult",
    "FinderNotFoundError",
    "InvalidKeyError",
    "InvalidMergeStrategyError",
    "Key",
    "ListResult",
    "LocKey",
    "MergeStrategy",
    "Operations",
    "PaginationOptions",
    "PathMapper",
    "PriKey",
    "Query",
    "Record",
    "RecordEncodingError",
    "RecordNotFoundError",
    "RecordStore",
    "StoreError",
    "StoreSettings",
    "UpdateOptions",
    "create_contained_store",
    "create_primary_store",
    "create_store",
    "is_com_key",
    "is_record_store",
    "key_from_dict",
    "key_from_record",
    "key_to_dict",
]
