"""Delete a record and, best effort, its side-storage directory."""

from __future__ import annotations

import asyncio
import logging
import shutil
from pathlib import Path

from ..errors import RecordNotFoundError
from ..keys import Key
from ..logging_config import operation_payload
from ..models import Record
from .context import OperationContext
from .get import get_record

LOGGER = logging.getLogger(__name__)


def _remove_tree(directory: Path) -> None:
    try:
        shutil.rmtree(directory)
    except FileNotFoundError:
        return


async def remove_record(context: OperationContext, key: Key) -> Record | None:
    """Delete the file backing ``key`` and return what it held.

    Raises :class:`RecordNotFoundError` when no file exists. A file whose
    content is unreadable is still deleted and ``None`` is returned.
    """

    existing = await get_record(context, key)
    path = context.mapper.path_for_key(key)

    try:
        await asyncio.to_thread(path.unlink)
    except FileNotFoundError as exc:
        raise RecordNotFoundError(key, operation="remove") from exc
    LOGGER.info("Deleted %s at %s", key, path, extra=operation_payload("remove", key, path))

    if context.settings.files_enabled:
        files_directory = context.mapper.side_storage_directory(key)
        try:
            await asyncio.to_thread(_remove_tree, files_directory)
        except OSError:
            LOGGER.warning(
                "Could not delete files directory %s",
                files_directory,
                exc_info=True,
                extra=operation_payload("remove", key, files_directory),
            )
        else:
            LOGGER.debug("Removed files directory %s", files_directory)

    return existing


__all__ = ["remove_record"]
