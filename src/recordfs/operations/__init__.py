"""Store operations and the contract they expose to wrapping layers."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence, runtime_checkable

from ..keys import Key
from ..models import CreateOptions, ListResult, PaginationOptions, Query, Record, UpdateOptions
from .context import OperationContext
from .create import create_record, resolve_create_key
from .finders import Finder, FinderRegistry
from .get import get_record
from .listing import find_first, list_records, paginate, resolve_pagination
from .remove import remove_record
from .update import update_record
from .upsert import upsert_record


@runtime_checkable
class Operations(Protocol):
    """Named operations a plugin or registry layer wraps with hooks."""

    async def get(self, key: Key) -> Record | None: ...

    async def create(self, data: Mapping[str, Any], options: CreateOptions | None = None) -> Record: ...

    async def update(
        self, key: Key, data: Mapping[str, Any], options: UpdateOptions | None = None
    ) -> Record: ...

    async def upsert(
        self,
        key: Key,
        data: Mapping[str, Any],
        locations: Sequence[Any] | None = None,
        options: UpdateOptions | None = None,
    ) -> Record: ...

    async def remove(self, key: Key) -> Record | None: ...

    async def all(
        self,
        query: Query | None = None,
        locations: Sequence[Any] | None = None,
        pagination: PaginationOptions | None = None,
    ) -> ListResult: ...

    async def one(self, query: Query | None = None, locations: Sequence[Any] | None = None) -> Record | None: ...

    async def find(
        self,
        name: str,
        params: Mapping[str, Any] | None = None,
        locations: Sequence[Any] | None = None,
        options: PaginationOptions | None = None,
    ) -> Any: ...

    async def find_one(
        self,
        name: str,
        params: Mapping[str, Any] | None = None,
        locations: Sequence[Any] | None = None,
    ) -> Record | None: ...


__all__ = [
    "Finder",
    "FinderRegistry",
    "OperationContext",
    "Operations",
    "create_record",
    "find_first",
    "get_record",
    "list_records",
    "paginate",
    "remove_record",
    "resolve_create_key",
    "resolve_pagination",
    "update_record",
    "upsert_record",
]
