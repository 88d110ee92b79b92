"""Create a record, generating an identifier when needed."""

from __future__ import annotations

import logging
from typing import Any, Mapping
from uuid import uuid4

from ..keys import IDENTIFIER_FIELD, ComKey, Key, PriKey, key_to_dict, to_locations
from ..logging_config import operation_payload
from ..models import CreateOptions, Record
from .context import OperationContext

LOGGER = logging.getLogger(__name__)


def resolve_create_key(
    context: OperationContext,
    data: Mapping[str, Any],
    options: CreateOptions | None,
) -> Key:
    """Key for a new record: ``options.key`` verbatim, else one built from the store type."""

    if options is not None and options.key is not None:
        return options.key

    identifier = data.get(IDENTIFIER_FIELD) or str(uuid4())
    if not isinstance(identifier, str):
        identifier = str(identifier)
    own_type = context.settings.own_type

    locations = to_locations(options.locations if options is not None else None)
    if locations:
        return ComKey(type=own_type, identifier=identifier, locations=locations)
    return PriKey(type=own_type, identifier=identifier)


async def create_record(
    context: OperationContext,
    data: Mapping[str, Any],
    options: CreateOptions | None = None,
) -> Record:
    """Write a new record and return it with its identity fields applied.

    An existing file at the resolved path is overwritten.
    """

    key = resolve_create_key(context, data, options)
    record: Record = {**data, **key_to_dict(key)}
    path = await context.write_record(key, record)
    LOGGER.info("Created %s at %s", key, path, extra=operation_payload("create", key, path))
    return record


__all__ = ["create_record", "resolve_create_key"]
