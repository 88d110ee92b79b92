"""Dispatch to caller-registered named queries."""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Iterator, Mapping, Sequence

from ..errors import FinderNotFoundError
from ..logging_config import operation_payload
from ..models import FindResult, PaginationOptions, Record

LOGGER = logging.getLogger(__name__)

Finder = Callable[..., Any]


class FinderRegistry:
    """Named finder callables invoked as ``finder(params, locations, options)``.

    A finder may be a plain function or a coroutine function and may return
    a list of records or a :class:`FindResult`.
    """

    def __init__(self, finders: Mapping[str, Finder] | None = None) -> None:
        self._finders: dict[str, Finder] = dict(finders or {})

    def __contains__(self, name: object) -> bool:
        return name in self._finders

    def __iter__(self) -> Iterator[str]:
        return iter(self._finders)

    def names(self) -> list[str]:
        return sorted(self._finders)

    def register(self, name: str, finder: Finder) -> None:
        if not callable(finder):
            raise TypeError(f"Finder {name!r} must be callable")
        self._finders[name] = finder

    def resolve(self, name: str, *, operation: str = "find") -> Finder:
        finder = self._finders.get(name)
        if finder is None:
            LOGGER.error(
                "Finder %s not found for %s; available: %s",
                name,
                operation,
                ", ".join(self.names()) or "none",
                extra=operation_payload(operation, finder=name),
            )
            raise FinderNotFoundError(name, available=self._finders.keys(), operation=operation)
        return finder

    async def _invoke(self, finder: Finder, *args: Any) -> Any:
        result = finder(*args)
        if inspect.isawaitable(result):
            result = await result
        return result

    async def find(
        self,
        name: str,
        params: Mapping[str, Any] | None = None,
        locations: Sequence[Any] | None = None,
        options: PaginationOptions | None = None,
    ) -> Any:
        """Run finder ``name`` and return its result unchanged."""

        finder = self.resolve(name, operation="find")
        return await self._invoke(finder, dict(params or {}), locations, options)

    async def find_one(
        self,
        name: str,
        params: Mapping[str, Any] | None = None,
        locations: Sequence[Any] | None = None,
    ) -> Record | None:
        """Run finder ``name`` asking for one item and return the first, if any."""

        finder = self.resolve(name, operation="find_one")
        result = await self._invoke(finder, dict(params or {}), locations, PaginationOptions(limit=1))
        items = result.items if isinstance(result, FindResult) else result
        if not items:
            return None
        return items[0]


__all__ = ["Finder", "FinderRegistry"]
