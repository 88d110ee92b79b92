"""Pytest configuration for the recordfs test suite."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_src_on_path() -> None:
    """Add the src directory to ``sys.path`` for imports."""

    src_dir = Path(__file__).resolve().parent.parent / "src"
    src_path = str(src_dir)
    if src_dir.is_dir() and src_path not in sys.path:
        sys.path.insert(0, src_path)


_ensure_src_on_path()

from recordfs import RecordStore, StoreSettings  # noqa: E402


@pytest.fixture()
def anyio_backend() -> str:
    """Ensure AnyIO uses the asyncio event loop backend."""

    return "asyncio"


@pytest.fixture()
def store_root(tmp_path: Path) -> Path:
    root = tmp_path / "data"
    root.mkdir()
    return root


@pytest.fixture()
def primary_settings(store_root: Path) -> StoreSettings:
    return StoreSettings(root_directory=store_root, key_types=("user",), directory_names=("users",))


@pytest.fixture()
def primary_store(primary_settings: StoreSettings) -> RecordStore:
    return RecordStore(primary_settings)


@pytest.fixture()
def contained_settings(store_root: Path) -> StoreSettings:
    return StoreSettings(
        root_directory=store_root,
        key_types=("comment", "post"),
        directory_names=("comments", "posts"),
    )


@pytest.fixture()
def contained_store(contained_settings: StoreSettings) -> RecordStore:
    return RecordStore(contained_settings)
