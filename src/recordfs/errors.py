"""Central store error definitions and helper exception types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable


@dataclass(frozen=True)
class ErrorDefinition:
    code: str
    message: str


ERROR_DEFINITIONS: Dict[str, ErrorDefinition] = {
    "NOT_FOUND": ErrorDefinition("NOT_FOUND", "Record not found."),
    "INVALID_MERGE_STRATEGY": ErrorDefinition("INVALID_MERGE_STRATEGY", "Unknown merge strategy."),
    "FINDER_NOT_FOUND": ErrorDefinition("FINDER_NOT_FOUND", "Finder is not registered."),
    "ENCODING_FAILED": ErrorDefinition("ENCODING_FAILED", "Record could not be serialised."),
    "INVALID_KEY": ErrorDefinition("INVALID_KEY", "Key is malformed."),
}

DEFAULT_ERROR_DEFINITION = ErrorDefinition("UNEXPECTED_ERROR", "Unexpected error occurred.")


def lookup_error(code: str) -> ErrorDefinition:
    """Return the registered definition for ``code`` or the default one."""

    return ERROR_DEFINITIONS.get(code, DEFAULT_ERROR_DEFINITION)


class StoreError(Exception):
    """Structured error raised by store operations."""

    def __init__(
        self,
        *,
        code: str,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        resolved = message or lookup_error(code).message
        super().__init__(resolved)
        self.code = code
        self.message = resolved
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "details": dict(self.details)}


class RecordNotFoundError(StoreError, LookupError):
    """Raised when an operation requires a record that is not on disk."""

    def __init__(self, key: Any, *, operation: str) -> None:
        record_type = getattr(key, "type", None)
        identifier = getattr(key, "identifier", None)
        super().__init__(
            code="NOT_FOUND",
            message=f"Record not found for {operation}: {record_type}/{identifier}",
            details={"operation": operation, "type": record_type, "identifier": identifier},
        )
        self.key = key
        self.operation = operation


class InvalidMergeStrategyError(StoreError, ValueError):
    """Raised when an update names a merge strategy that does not exist."""

    def __init__(self, strategy: Any, *, allowed: Iterable[str]) -> None:
        allowed_list = list(allowed)
        super().__init__(
            code="INVALID_MERGE_STRATEGY",
            message=f"Invalid merge strategy: {strategy!r} (expected one of: {', '.join(allowed_list)})",
            details={"strategy": strategy, "allowed": allowed_list},
        )
        self.strategy = strategy


class FinderNotFoundError(StoreError, LookupError):
    """Raised when ``find``/``find_one`` names an unregistered finder."""

    def __init__(self, finder: str, *, available: Iterable[str], operation: str = "find") -> None:
        available_list = sorted(available)
        if available_list:
            hint = f"Available finders: {', '.join(available_list)}"
        else:
            hint = "No finders defined."
        super().__init__(
            code="FINDER_NOT_FOUND",
            message=f"Finder '{finder}' not found. {hint}",
            details={"finder": finder, "available": available_list, "operation": operation},
        )
        self.finder = finder
        self.available = available_list


class RecordEncodingError(StoreError, TypeError):
    """Raised when a record cannot be serialised to JSON."""

    def __init__(self, *, record_type: Any, identifier: Any, reason: str) -> None:
        super().__init__(
            code="ENCODING_FAILED",
            message=f"Failed to serialise record {record_type}/{identifier}: {reason}",
            details={"type": record_type, "identifier": identifier, "reason": reason},
        )
        self.record_type = record_type
        self.identifier = identifier


class InvalidKeyError(StoreError, ValueError):
    """Raised when a key or location segment is malformed."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(code="INVALID_KEY", message=message, details=details)


__all__ = [
    "DEFAULT_ERROR_DEFINITION",
    "ERROR_DEFINITIONS",
    "ErrorDefinition",
    "FinderNotFoundError",
    "InvalidKeyError",
    "InvalidMergeStrategyError",
    "RecordEncodingError",
    "RecordNotFoundError",
    "StoreError",
    "lookup_error",
]
