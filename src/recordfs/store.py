"""Record store facade and factory helpers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Sequence

from .config import StoreSettings
from .keys import Key
from .models import CreateOptions, ListResult, PaginationOptions, Query, Record, UpdateOptions
from .operations import (
    Finder,
    FinderRegistry,
    OperationContext,
    create_record,
    find_first,
    get_record,
    list_records,
    remove_record,
    update_record,
    upsert_record,
)
from .paths import PathMapper

LOGGER = logging.getLogger(__name__)


class RecordStore:
    """JSON records on disk, addressed by primary or composite keys.

    No locking is performed: concurrent writers to the same key race and the
    last completed write wins. Several stores may share one root directory.
    """

    def __init__(
        self,
        settings: StoreSettings,
        *,
        finders: Mapping[str, Finder] | None = None,
    ) -> None:
        self._settings = settings
        self._context = OperationContext.from_settings(settings)
        self._finders = FinderRegistry(finders)
        LOGGER.debug(
            "Record store for %s at %s (directories=%s)",
            "/".join(settings.key_types),
            settings.root_directory,
            list(settings.directory_names),
        )

    @property
    def settings(self) -> StoreSettings:
        return self._settings

    @property
    def root_directory(self) -> Path:
        return self._settings.root_directory

    @property
    def key_types(self) -> tuple[str, ...]:
        return self._settings.key_types

    @property
    def mapper(self) -> PathMapper:
        return self._context.mapper

    @property
    def finders(self) -> FinderRegistry:
        return self._finders

    async def get(self, key: Key) -> Record | None:
        return await get_record(self._context, key)

    async def create(self, data: Mapping[str, Any], options: CreateOptions | None = None) -> Record:
        return await create_record(self._context, data, options)

    async def update(
        self,
        key: Key,
        data: Mapping[str, Any],
        options: UpdateOptions | None = None,
    ) -> Record:
        return await update_record(self._context, key, data, options)

    async def upsert(
        self,
        key: Key,
        data: Mapping[str, Any],
        locations: Sequence[Any] | None = None,
        options: UpdateOptions | None = None,
    ) -> Record:
        return await upsert_record(self._context, key, data, locations, options)

    async def remove(self, key: Key) -> Record | None:
        return await remove_record(self._context, key)

    async def all(
        self,
        query: Query | None = None,
        locations: Sequence[Any] | None = None,
        pagination: PaginationOptions | None = None,
    ) -> ListResult:
        return await list_records(self._context, query, locations, pagination)

    async def one(
        self,
        query: Query | None = None,
        locations: Sequence[Any] | None = None,
    ) -> Record | None:
        return await find_first(self._context, query, locations)

    async def find(
        self,
        name: str,
        params: Mapping[str, Any] | None = None,
        locations: Sequence[Any] | None = None,
        options: PaginationOptions | None = None,
    ) -> Any:
        return await self._finders.find(name, params, locations, options)

    async def find_one(
        self,
        name: str,
        params: Mapping[str, Any] | None = None,
        locations: Sequence[Any] | None = None,
    ) -> Record | None:
        return await self._finders.find_one(name, params, locations)


def create_store(settings: StoreSettings, *, finders: Mapping[str, Finder] | None = None) -> RecordStore:
    return RecordStore(settings, finders=finders)


def create_primary_store(
    key_type: str,
    directory: str,
    root_directory: str | Path,
    *,
    finders: Mapping[str, Finder] | None = None,
    **options: Any,
) -> RecordStore:
    """Store for top-level records of ``key_type`` kept in ``<root>/<directory>``."""

    settings = StoreSettings(
        root_directory=root_directory,
        key_types=(key_type,),
        directory_names=(directory,),
        **options,
    )
    return RecordStore(settings, finders=finders)


def create_contained_store(
    key_types: Sequence[str],
    directories: Sequence[str],
    root_directory: str | Path,
    *,
    finders: Mapping[str, Finder] | None = None,
    **options: Any,
) -> RecordStore:
    """Store for records nested under ancestors.

    ``key_types`` lists the store's own type first, then its ancestors;
    ``directories`` gives the directory name for each entry.
    """

    settings = StoreSettings(
        root_directory=root_directory,
        key_types=tuple(key_types),
        directory_names=tuple(directories),
        **options,
    )
    return RecordStore(settings, finders=finders)


def is_record_store(candidate: Any) -> bool:
    """Duck-typed check for objects exposing the store surface."""

    if candidate is None:
        return False
    return all(
        hasattr(candidate, attribute)
        for attribute in ("root_directory", "key_types", "get", "create", "all")
    )


__all__ = [
    "RecordStore",
    "create_contained_store",
    "create_primary_store",
    "create_store",
    "is_record_store",
]
