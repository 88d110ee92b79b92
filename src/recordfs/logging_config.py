"""Structured logging for record store activity."""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from pathlib import PurePath
from typing import Any, Dict, Mapping

PACKAGE_LOGGER = "recordfs"
PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def operation_payload(operation: str, key: Any = None, path: PurePath | None = None, **fields: Any) -> dict:
    """``extra=`` mapping that attaches store context to a log call."""

    payload: dict[str, Any] = {"operation": operation}
    if key is not None:
        payload["key"] = str(key)
    if path is not None:
        payload["path"] = str(path)
    payload.update(fields)
    return {"extra_payload": payload}


def _jsonable(value: Any) -> Any:
    if isinstance(value, PurePath):
        return str(value)
    if isinstance(value, Mapping):
        return {str(name): _jsonable(item) for name, item in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_jsonable(item) for item in value]
    return value


class JsonFormatter(logging.Formatter):
    """One JSON object per line, with any ``extra_payload`` fields merged in."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        extra = getattr(record, "extra_payload", None)
        if isinstance(extra, Mapping):
            for name, value in extra.items():
                payload.setdefault(str(name), _jsonable(value))
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def build_logging_config(level: str = "INFO", *, json_output: bool = True) -> dict[str, Any]:
    """``dictConfig`` mapping routing the ``recordfs`` logger to stderr."""

    formatter = "json" if json_output else "plain"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {"()": f"{PACKAGE_LOGGER}.logging_config.JsonFormatter"},
            "plain": {"format": PLAIN_FORMAT},
        },
        "handlers": {
            "recordfs_console": {
                "class": "logging.StreamHandler",
                "formatter": formatter,
            }
        },
        "loggers": {
            PACKAGE_LOGGER: {
                "handlers": ["recordfs_console"],
                "level": level.upper(),
                "propagate": False,
            },
        },
    }


def configure_logging(level: str = "INFO", *, json_output: bool = True) -> None:
    """Apply the store logging configuration."""

    logging.config.dictConfig(build_logging_config(level, json_output=json_output))


__all__ = [
    "JsonFormatter",
    "PACKAGE_LOGGER",
    "build_logging_config",
    "configure_logging",
    "operation_payload",
]
