"""Collection listing with filtering, sorting and pagination."""

from __future__ import annotations

import asyncio
import dataclasses
import logging
from functools import cmp_to_key
from typing import Any, Mapping, Sequence, Union

from ..keys import LocKey
from ..models import ListResult, PaginationOptions, Query, Record
from .context import OperationContext

LOGGER = logging.getLogger(__name__)

Locations = Sequence[Union[LocKey, Mapping[str, Any]]]


def resolve_pagination(
    query: Query | None, pagination: PaginationOptions | None
) -> tuple[int | None, int]:
    """Effective ``(limit, offset)``; call-level options win over the query."""

    limit = pagination.limit if pagination is not None and pagination.limit is not None else None
    if limit is None and query is not None:
        limit = query.limit

    offset = pagination.offset if pagination is not None and pagination.offset is not None else None
    if offset is None and query is not None:
        offset = query.offset
    return limit, max(offset or 0, 0)


def paginate(items: list[Record], limit: int | None, offset: int) -> list[Record]:
    """Apply ``offset`` then ``limit``; a negative limit means no limit."""

    page = items[offset:] if offset > 0 else items
    if limit is not None and limit >= 0:
        page = page[:limit]
    return page


async def list_records(
    context: OperationContext,
    query: Query | None = None,
    locations: Locations | None = None,
    pagination: PaginationOptions | None = None,
) -> ListResult:
    """List the store's records under ``locations`` (top level when empty)."""

    directory = context.mapper.listing_directory(locations)
    extension = context.mapper.extension or None
    files = await asyncio.to_thread(context.walker.list_files, directory, extension)
    LOGGER.debug("Found %d candidate files in %s", len(files), directory)

    decoded = await asyncio.gather(*(context.read_record(path) for path in files))
    items = [record for record in decoded if record is not None]
    if len(items) != len(files):
        LOGGER.debug("Skipped %d unreadable files in %s", len(files) - len(items), directory)

    if query is not None and query.filter is not None:
        items = [record for record in items if query.filter(record)]
    if query is not None and query.sort is not None:
        items.sort(key=cmp_to_key(query.sort))

    total = len(items)
    limit, offset = resolve_pagination(query, pagination)
    page = paginate(items, limit, offset)
    LOGGER.debug("Returning %d of %d records (limit=%s, offset=%s)", len(page), total, limit, offset)

    return ListResult(
        items=page,
        total=total,
        returned=len(page),
        limit=limit,
        offset=offset,
        has_more=offset + len(page) < total,
    )


async def find_first(
    context: OperationContext,
    query: Query | None = None,
    locations: Locations | None = None,
) -> Record | None:
    """First record of :func:`list_records` with the limit forced to one."""

    limited = dataclasses.replace(query, limit=1) if query is not None else Query(limit=1)
    result = await list_records(context, limited, locations)
    return result.items[0] if result.items else None


__all__ = ["find_first", "list_records", "paginate", "resolve_pagination"]
