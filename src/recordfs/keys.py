"""Structured keys addressing records inside a store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Union

from .errors import InvalidKeyError

TYPE_FIELD = "type"
IDENTIFIER_FIELD = "identifier"
LOCATIONS_FIELD = "locations"


def _require_token(value: Any, *, field: str) -> str:
    if not isinstance(value, str) or not value:
        raise InvalidKeyError(
            f"Key {field} must be a non-empty string, got {value!r}",
            details={"field": field, "value": repr(value)},
        )
    return value


@dataclass(frozen=True, slots=True)
class LocKey:
    """One ancestor segment of a composite key."""

    type: str
    identifier: str

    def __post_init__(self) -> None:
        _require_token(self.type, field=TYPE_FIELD)
        _require_token(self.identifier, field=IDENTIFIER_FIELD)

    @classmethod
    def from_value(cls, value: "LocKey | Mapping[str, Any]") -> "LocKey":
        """Coerce a ``LocKey`` or a ``{"type", "identifier"}`` mapping."""

        if isinstance(value, LocKey):
            return value
        if isinstance(value, Mapping):
            return cls(type=value.get(TYPE_FIELD), identifier=value.get(IDENTIFIER_FIELD))
        raise InvalidKeyError(f"Location segment must be a mapping, got {type(value).__name__}")

    def to_dict(self) -> dict[str, str]:
        return {TYPE_FIELD: self.type, IDENTIFIER_FIELD: self.identifier}


@dataclass(frozen=True, slots=True)
class PriKey:
    """Key of a top-level record."""

    type: str
    identifier: str

    def __post_init__(self) -> None:
        _require_token(self.type, field=TYPE_FIELD)
        _require_token(self.identifier, field=IDENTIFIER_FIELD)

    def __str__(self) -> str:
        return f"{self.type}/{self.identifier}"


@dataclass(frozen=True, slots=True)
class ComKey:
    """Key of a record nested under ancestors, outermost ancestor first."""

    type: str
    identifier: str
    locations: tuple[LocKey, ...]

    def __post_init__(self) -> None:
        _require_token(self.type, field=TYPE_FIELD)
        _require_token(self.identifier, field=IDENTIFIER_FIELD)
        object.__setattr__(self, "locations", to_locations(self.locations))

    def __str__(self) -> str:
        trail = "/".join(f"{loc.type}/{loc.identifier}" for loc in self.locations)
        return f"{trail}/{self.type}/{self.identifier}" if trail else f"{self.type}/{self.identifier}"


Key = Union[PriKey, ComKey]


def to_locations(values: Iterable["LocKey | Mapping[str, Any]"] | None) -> tuple[LocKey, ...]:
    """Normalise a location chain into a tuple of ``LocKey``."""

    if values is None:
        return ()
    if isinstance(values, (str, bytes, Mapping)):
        raise InvalidKeyError("Locations must be a sequence of location segments")
    return tuple(LocKey.from_value(value) for value in values)


def is_com_key(key: Any) -> bool:
    return isinstance(key, ComKey)


def key_to_dict(key: Key) -> dict[str, Any]:
    """Return the identity fields a record stored under ``key`` carries."""

    payload: dict[str, Any] = {TYPE_FIELD: key.type, IDENTIFIER_FIELD: key.identifier}
    if isinstance(key, ComKey):
        payload[LOCATIONS_FIELD] = [location.to_dict() for location in key.locations]
    return payload


def key_from_dict(data: Mapping[str, Any]) -> Key:
    """Build a key from a mapping with ``type``/``identifier``/``locations``."""

    locations = data.get(LOCATIONS_FIELD)
    if locations:
        return ComKey(
            type=data.get(TYPE_FIELD),
            identifier=data.get(IDENTIFIER_FIELD),
            locations=to_locations(locations),
        )
    return PriKey(type=data.get(TYPE_FIELD), identifier=data.get(IDENTIFIER_FIELD))


key_from_record = key_from_dict


__all__ = [
    "ComKey",
    "IDENTIFIER_FIELD",
    "Key",
    "LOCATIONS_FIELD",
    "LocKey",
    "PriKey",
    "TYPE_FIELD",
    "is_com_key",
    "key_from_dict",
    "key_from_record",
    "key_to_dict",
    "to_locations",
]
