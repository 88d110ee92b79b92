"""Fetch a single record by key."""

from __future__ import annotations

import asyncio
import logging

from ..keys import Key
from ..models import Record
from .context import OperationContext

LOGGER = logging.getLogger(__name__)


async def get_record(context: OperationContext, key: Key) -> Record | None:
    """Return the record stored under ``key`` or ``None`` when absent or unreadable."""

    path = context.mapper.path_for_key(key)
    LOGGER.debug("Built path %s for %s", path, key)

    record = await context.read_record(path)
    if record is None:
        if await asyncio.to_thread(path.exists):
            LOGGER.warning("Record file %s is unreadable; treating %s as missing", path, key)
        else:
            LOGGER.debug("Record file %s not found", path)
    return record


__all__ = ["get_record"]
