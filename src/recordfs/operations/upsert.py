"""Update a record when present, create it otherwise."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from ..keys import Key, LocKey
from ..models import CreateOptions, Record, UpdateOptions
from .context import OperationContext
from .create import create_record
from .get import get_record
from .update import update_record

LOGGER = logging.getLogger(__name__)


async def upsert_record(
    context: OperationContext,
    key: Key,
    data: Mapping[str, Any],
    locations: Sequence[LocKey | Mapping[str, Any]] | None = None,
    options: UpdateOptions | None = None,
) -> Record:
    """Create under ``key`` when absent (merge options ignored), else update."""

    existing = await get_record(context, key)
    if existing is None:
        LOGGER.debug("%s does not exist, creating", key)
        return await create_record(context, data, CreateOptions(key=key, locations=locations))

    LOGGER.debug("%s exists, updating", key)
    return await update_record(context, key, data, options)


__all__ = ["upsert_record"]
