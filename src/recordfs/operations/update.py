"""Update an existing record using a merge strategy."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ..errors import RecordNotFoundError
from ..keys import Key
from ..logging_config import operation_payload
from ..merge import apply_merge, resolve_merge_strategy
from ..models import Record, UpdateOptions
from .context import OperationContext
from .get import get_record

LOGGER = logging.getLogger(__name__)


async def update_record(
    context: OperationContext,
    key: Key,
    data: Mapping[str, Any],
    options: UpdateOptions | None = None,
) -> Record:
    """Merge ``data`` into the record at ``key`` and rewrite the file.

    Raises :class:`RecordNotFoundError` when nothing is stored under ``key``.
    """

    existing = await get_record(context, key)
    if existing is None:
        raise RecordNotFoundError(key, operation="update")

    strategy = resolve_merge_strategy(options)
    updated = apply_merge(strategy, existing, data, key)
    path = await context.write_record(key, updated)
    LOGGER.info(
        "Updated %s at %s using %s merge",
        key,
        path,
        strategy.value,
        extra=operation_payload("update", key, path, strategy=strategy.value),
    )
    return updated


__all__ = ["update_record"]
