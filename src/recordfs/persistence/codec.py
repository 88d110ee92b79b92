"""JSON encoding and tolerant decoding of records."""

from __future__ import annotations

import json
import logging
from datetime import date, datetime
from typing import Any, Mapping

from ..errors import RecordEncodingError
from ..keys import IDENTIFIER_FIELD, TYPE_FIELD

LOGGER = logging.getLogger(__name__)

_COMPACT_SEPARATORS = (",", ":")


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    raise TypeError(f"Object of type {value.__class__.__name__} is not JSON serializable")


def validate_structure(payload: Any) -> bool:
    """Minimal shape check: an object with string ``type`` and ``identifier``."""

    if not isinstance(payload, dict):
        return False
    for field in (TYPE_FIELD, IDENTIFIER_FIELD):
        value = payload.get(field)
        if not isinstance(value, str) or not value:
            LOGGER.warning("Record missing or invalid %s: %r", field, value)
            return False
    return True


class RecordCodec:
    """Convert records to and from their on-disk JSON text."""

    def __init__(self, *, pretty_print: bool = False, encoding: str = "utf-8") -> None:
        self._pretty_print = pretty_print
        self._encoding = encoding

    @property
    def pretty_print(self) -> bool:
        return self._pretty_print

    def encode(self, record: Mapping[str, Any]) -> str:
        """JSON text for ``record``, guaranteed representable in the file encoding."""

        try:
            if self._pretty_print:
                text = json.dumps(record, indent=2, ensure_ascii=False, default=_json_default)
            else:
                text = json.dumps(
                    record,
                    separators=_COMPACT_SEPARATORS,
                    ensure_ascii=False,
                    default=_json_default,
                )
            text.encode(self._encoding)
        except (TypeError, ValueError) as exc:
            record_type = record.get(TYPE_FIELD) if isinstance(record, Mapping) else None
            identifier = record.get(IDENTIFIER_FIELD) if isinstance(record, Mapping) else None
            LOGGER.error("Failed to serialise record %s/%s: %s", record_type, identifier, exc)
            raise RecordEncodingError(
                record_type=record_type,
                identifier=identifier,
                reason=str(exc),
            ) from exc
        return text

    def decode(self, content: str | bytes) -> dict[str, Any] | None:
        """Parse ``content``; corrupt or structurally invalid input yields ``None``."""

        try:
            text = content.decode(self._encoding) if isinstance(content, bytes) else content
            payload = json.loads(text)
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            LOGGER.warning("Failed to deserialise record: %s", exc)
            return None

        if not validate_structure(payload):
            return None
        return payload


__all__ = ["RecordCodec", "validate_structure"]
