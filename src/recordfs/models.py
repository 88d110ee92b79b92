"""Query, option and result models shared by store operations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from .keys import Key, LocKey

Record = Dict[str, Any]
RecordFilter = Callable[[Record], bool]
RecordComparator = Callable[[Record, Record], int]


class MergeStrategy(str, Enum):
    """How an update payload is combined with the stored record."""

    DEEP = "deep"
    SHALLOW = "shallow"
    REPLACE = "replace"


@dataclass(slots=True)
class Query:
    """Optional filter, sort comparator and pagination for listings."""

    filter: Optional[RecordFilter] = None
    sort: Optional[RecordComparator] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


@dataclass(slots=True)
class PaginationOptions:
    """Call-level pagination; wins over the values carried by a ``Query``."""

    limit: Optional[int] = None
    offset: Optional[int] = None


@dataclass(slots=True)
class CreateOptions:
    key: Optional[Key] = None
    locations: Optional[Sequence[LocKey | dict[str, Any]]] = None


@dataclass(slots=True)
class UpdateOptions:
    merge_strategy: MergeStrategy | str = MergeStrategy.DEEP
    replace_all: bool = False


class ListResult(BaseModel):
    """A page of records plus the counts needed to fetch the next one."""

    model_config = ConfigDict(extra="forbid")

    items: list[dict[str, Any]] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)
    returned: int = Field(default=0, ge=0)
    limit: Optional[int] = None
    offset: int = Field(default=0, ge=0)
    has_more: bool = False


class FindResult(BaseModel):
    """Optional richer return type for finders that paginate themselves."""

    model_config = ConfigDict(extra="forbid")

    items: list[dict[str, Any]] = Field(default_factory=list)
    total: Optional[int] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
    has_more: Optional[bool] = None


__all__ = [
    "CreateOptions",
    "FindResult",
    "ListResult",
    "MergeStrategy",
    "PaginationOptions",
    "Query",
    "Record",
    "RecordComparator",
    "RecordFilter",
    "UpdateOptions",
]
