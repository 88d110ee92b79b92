"""Unit tests for atomic record writes."""

from __future__ import annotations

import stat
from pathlib import Path

import pytest

from recordfs.persistence import write_text_atomic
from recordfs.persistence.atomic import is_temporary_name, temporary_sibling

pytestmark = pytest.mark.unit


def test_write_text_atomic_sets_mode_and_leaves_no_temp_files(tmp_path: Path) -> None:
    target = tmp_path / "u-1.json"

    write_text_atomic(target, '{"a":1}', mode=0o600)

    assert target.read_text(encoding="utf-8") == '{"a":1}'
    assert stat.S_IMODE(target.stat().st_mode) == 0o600
    assert [path.name for path in tmp_path.iterdir()] == ["u-1.json"]


def test_write_text_atomic_replaces_existing_content(tmp_path: Path) -> None:
    target = tmp_path / "u-1.json"
    target.write_text("old content that is longer", encoding="utf-8")

    write_text_atomic(target, "new", durable=True)

    assert target.read_text(encoding="utf-8") == "new"


def test_write_text_atomic_cleans_up_on_failure(tmp_path: Path) -> None:
    target = tmp_path / "u-1.json"

    with pytest.raises(UnicodeEncodeError):
        write_text_atomic(target, "Zoë", encoding="ascii")

    assert list(tmp_path.iterdir()) == []


def test_write_text_atomic_requires_parent(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        write_text_atomic(tmp_path / "missing" / "u-1.json", "{}")


def test_temporary_sibling_is_recognised_as_scratch(tmp_path: Path) -> None:
    scratch = temporary_sibling(tmp_path / "u-1")

    assert scratch.parent == tmp_path
    assert is_temporary_name(scratch.name)
    assert not is_temporary_name("u-1")
    assert not is_temporary_name("u-1.json")
