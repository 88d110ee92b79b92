"""Dispatch of named finders registered on a store."""

from __future__ import annotations

from typing import Any

import pytest

from recordfs import FinderNotFoundError, FindResult, PaginationOptions, RecordStore, StoreSettings

pytestmark = pytest.mark.anyio("asyncio")

PEOPLE = [
    {"type": "user", "identifier": "u-1", "name": "Ada"},
    {"type": "user", "identifier": "u-2", "name": "Grace"},
    {"type": "user", "identifier": "u-3", "name": "Ada"},
]


class RecordingFinder:
    def __init__(self) -> None:
        self.calls: list[tuple[dict, Any, Any]] = []

    def __call__(self, params: dict, locations: Any, options: PaginationOptions | None) -> list[dict]:
        self.calls.append((params, locations, options))
        matches = [person for person in PEOPLE if person["name"] == params.get("name")]
        if options is not None and options.limit is not None:
            matches = matches[: options.limit]
        return matches


async def _paged_finder(params: dict, locations: Any, options: PaginationOptions | None) -> FindResult:
    return FindResult(items=PEOPLE[1:], total=2, has_more=False)


@pytest.fixture()
def finder() -> RecordingFinder:
    return RecordingFinder()


@pytest.fixture()
def store(primary_settings: StoreSettings, finder: RecordingFinder) -> RecordStore:
    return RecordStore(primary_settings, finders={"byName": finder, "paged": _paged_finder})


async def test_find_passes_arguments_and_returns_result(store: RecordStore, finder: RecordingFinder) -> None:
    options = PaginationOptions(limit=5, offset=0)

    result = await store.find("byName", {"name": "Ada"}, None, options)

    assert [item["identifier"] for item in result] == ["u-1", "u-3"]
    assert finder.calls == [({"name": "Ada"}, None, options)]


async def test_find_supports_async_finders(store: RecordStore) -> None:
    result = await store.find("paged")

    assert isinstance(result, FindResult)
    assert result.total == 2


async def test_find_one_requests_single_item(store: RecordStore, finder: RecordingFinder) -> None:
    record = await store.find_one("byName", {"name": "Ada"})

    assert record == PEOPLE[0]
    _, _, options = finder.calls[-1]
    assert options == PaginationOptions(limit=1)


async def test_find_one_unwraps_find_result(store: RecordStore) -> None:
    assert await store.find_one("paged") == PEOPLE[1]


async def test_find_one_without_matches_returns_none(store: RecordStore) -> None:
    assert await store.find_one("byName", {"name": "Nobody"}) is None


async def test_unknown_finder_lists_available(store: RecordStore) -> None:
    with pytest.raises(FinderNotFoundError) as excinfo:
        await store.find("doesNotExist")

    assert "doesNotExist" in str(excinfo.value)
    assert "Available finders: byName, paged" in str(excinfo.value)


async def test_store_without_finders(primary_store: RecordStore) -> None:
    with pytest.raises(FinderNotFoundError) as excinfo:
        await primary_store.find_one("byName")

    assert str(excinfo.value) == "Finder 'byName' not found. No finders defined."
    assert excinfo.value.details["operation"] == "find_one"


async def test_registering_a_finder(primary_store: RecordStore) -> None:
    primary_store.finders.register("everyone", lambda params, locations, options: PEOPLE)

    assert "everyone" in primary_store.finders
    assert await primary_store.find_one("everyone") == PEOPLE[0]
    with pytest.raises(TypeError):
        primary_store.finders.register("broken", "not callable")  # type: ignore[arg-type]
