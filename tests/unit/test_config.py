"""Tests for store configuration loading."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from recordfs import StoreSettings

pytestmark = pytest.mark.unit

_ENV_KEYS = (
    "RECORDFS_ROOT_DIRECTORY",
    "RECORDFS_KEY_TYPES",
    "RECORDFS_DIRECTORY_NAMES",
    "RECORDFS_PRETTY_PRINT",
    "RECORDFS_FILE_MODE",
)


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


def test_defaults(tmp_path: Path) -> None:
    settings = StoreSettings(root_directory=tmp_path, key_types=["user"], directory_names=["users"])

    assert settings.root_directory == tmp_path.resolve()
    assert settings.use_json_extension is True
    assert settings.auto_create_directories is True
    assert settings.pretty_print is False
    assert settings.encoding == "utf-8"
    assert settings.file_mode == 0o644
    assert settings.directory_mode == 0o755
    assert settings.files_directory == "_files"
    assert settings.own_type == "user"
    assert not settings.is_contained


def test_relative_root_is_made_absolute(tmp_path: Path) -> None:
    settings = StoreSettings(root_directory="relative/data", key_types=["user"], directory_names=["users"])

    assert settings.root_directory.is_absolute()
    assert settings.root_directory == (tmp_path / "relative" / "data").resolve()


def test_directory_names_must_match_key_types(tmp_path: Path) -> None:
    with pytest.raises(ValidationError) as excinfo:
        StoreSettings(root_directory=tmp_path, key_types=["comment", "post"], directory_names=["comments"])

    assert "directory_names length (1) must match key_types length (2)" in str(excinfo.value)


@pytest.mark.parametrize(
    "overrides",
    [
        {"root_directory": ""},
        {"key_types": []},
        {"directory_names": ["users/nested"]},
        {"files_directory": ".."},
        {"encoding": "not-a-codec"},
        {"file_mode": "rwx"},
    ],
)
def test_invalid_values_are_rejected(tmp_path: Path, overrides: dict) -> None:
    values = {"root_directory": tmp_path, "key_types": ["user"], "directory_names": ["users"]}
    values.update(overrides)

    with pytest.raises(ValidationError):
        StoreSettings(**values)


def test_modes_accept_octal_strings(tmp_path: Path) -> None:
    settings = StoreSettings(
        root_directory=tmp_path,
        key_types=["user"],
        directory_names=["users"],
        file_mode="0o600",
        directory_mode="700",
    )

    assert settings.file_mode == 0o600
    assert settings.directory_mode == 0o700


def test_settings_are_immutable(tmp_path: Path) -> None:
    settings = StoreSettings(root_directory=tmp_path, key_types=["user"], directory_names=["users"])

    with pytest.raises(ValidationError):
        settings.pretty_print = True  # type: ignore[misc]


def test_from_environment_reads_prefixed_variables(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RECORDFS_ROOT_DIRECTORY", str(tmp_path / "store"))
    monkeypatch.setenv("RECORDFS_KEY_TYPES", '["comment", "post"]')
    monkeypatch.setenv("RECORDFS_PRETTY_PRINT", "true")
    monkeypatch.setenv("RECORDFS_FILE_MODE", "0o600")

    settings = StoreSettings.from_environment()

    assert settings.root_directory == (tmp_path / "store").resolve()
    assert settings.key_types == ("comment", "post")
    assert settings.directory_names == ("comment", "post")
    assert settings.pretty_print is True
    assert settings.file_mode == 0o600


def test_from_environment_supports_env_file_and_overrides(tmp_path: Path) -> None:
    env_content = textwrap.dedent(
        f"""
        # comment line
        export RECORDFS_ROOT_DIRECTORY="{tmp_path / 'from env'}"
        RECORDFS_KEY_TYPES='["user"]'
        RECORDFS_DIRECTORY_NAMES='["people"]'
        """
    ).strip()
    (tmp_path / ".env").write_text(env_content, encoding="utf-8")

    settings = StoreSettings.from_environment(pretty_print=True)

    assert settings.root_directory == (tmp_path / "from env").resolve()
    assert settings.directory_names == ("people",)
    assert settings.pretty_print is True


def test_from_environment_requires_root(tmp_path: Path) -> None:
    with pytest.raises(ValidationError):
        StoreSettings.from_environment(key_types=["user"])
