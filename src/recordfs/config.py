"""Store configuration utilities."""

from __future__ import annotations

import codecs
import os
from pathlib import Path
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_FILE_MODE = 0o644
DEFAULT_DIRECTORY_MODE = 0o755
DEFAULT_FILES_DIRECTORY = "_files"


def _parse_mode(value: Any) -> Any:
    """Accept ``0o644``, ``"0o644"`` and ``"644"`` as the same permission bits."""

    if isinstance(value, str):
        text = value.strip().lower()
        if text.startswith("0o"):
            text = text[2:]
        try:
            return int(text, 8)
        except ValueError as exc:
            raise ValueError(f"Invalid octal permission value: {value!r}") from exc
    return value


def _validate_segment(value: str, *, label: str) -> str:
    """Ensure ``value`` is a safe single path segment."""

    if value in {".", ".."}:
        raise ValueError(f"{label} is invalid.")
    separators = {os.sep}
    if os.altsep:
        separators.add(os.altsep)
    if any(sep in value for sep in separators):
        raise ValueError(f"{label} must not contain path separators.")
    if any(ord(char) < 32 for char in value):
        raise ValueError(f"{label} contains invalid control characters.")
    return value


class StoreSettings(BaseModel):
    """Resolved, immutable configuration for a single record store."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    root_directory: Path = Field(
        description="Directory under which every record of the store lives.",
    )
    key_types: tuple[str, ...] = Field(
        min_length=1,
        description="Key type chain: the store's own type first, then ancestors nearest-first.",
    )
    directory_names: tuple[str, ...] = Field(
        description="Directory name per key type, position-aligned with key_types.",
    )
    use_json_extension: bool = Field(
        default=True,
        description="Append '.json' to record file names.",
    )
    encoding: str = Field(default="utf-8", description="Text encoding for record files.")
    pretty_print: bool = Field(default=False, description="Indent serialised JSON.")
    file_mode: int = Field(default=DEFAULT_FILE_MODE, ge=0, le=0o7777)
    directory_mode: int = Field(default=DEFAULT_DIRECTORY_MODE, ge=0, le=0o7777)
    auto_create_directories: bool = Field(
        default=True,
        description="Create missing parent directories before writing a record.",
    )
    files_enabled: bool = Field(
        default=True,
        description="Remove the side-storage directory of a record when it is deleted.",
    )
    files_directory: str = Field(
        default=DEFAULT_FILES_DIRECTORY,
        min_length=1,
        description="Name of the side-storage sub-directory for attachments.",
    )

    @field_validator("root_directory", mode="before")
    @classmethod
    def _require_root(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValueError("root_directory is required")
        return value

    @field_validator("root_directory")
    @classmethod
    def _resolve_root(cls, value: Path) -> Path:
        return value.expanduser().resolve()

    @field_validator("key_types")
    @classmethod
    def _validate_key_types(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for key_type in value:
            if not key_type:
                raise ValueError("key_types entries must be non-empty strings")
        return value

    @field_validator("directory_names")
    @classmethod
    def _validate_directory_names(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for name in value:
            if name:
                _validate_segment(name, label=f"Directory name {name!r}")
        return value

    @field_validator("file_mode", "directory_mode", mode="before")
    @classmethod
    def _coerce_mode(cls, value: Any) -> Any:
        return _parse_mode(value)

    @field_validator("encoding")
    @classmethod
    def _validate_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding: {value}") from exc
        return value

    @field_validator("files_directory")
    @classmethod
    def _validate_files_directory(cls, value: str) -> str:
        return _validate_segment(value, label="files_directory")

    @model_validator(mode="after")
    def _check_chain_lengths(self) -> "StoreSettings":
        if len(self.directory_names) != len(self.key_types):
            raise ValueError(
                f"directory_names length ({len(self.directory_names)}) "
                f"must match key_types length ({len(self.key_types)})"
            )
        return self

    @property
    def own_type(self) -> str:
        """The key type of records held by this store."""

        return self.key_types[0]

    @property
    def is_contained(self) -> bool:
        return len(self.key_types) > 1

    @classmethod
    def from_environment(cls, **overrides: Any) -> "StoreSettings":
        """Load settings from ``RECORDFS_*`` variables or a ``.env`` file.

        Keyword overrides win over the environment. When no directory names
        are configured the key type names are used verbatim.
        """

        values: dict[str, Any] = EnvironmentSettings().model_dump(exclude_none=True)
        values.update({key: value for key, value in overrides.items() if value is not None})
        if "directory_names" not in values and "key_types" in values:
            values["directory_names"] = list(values["key_types"])
        return cls(**values)


class EnvironmentSettings(BaseSettings):
    """Raw store values read from the process environment."""

    ENV_PREFIX: ClassVar[str] = "RECORDFS_"

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    root_directory: Optional[Path] = None
    key_types: Optional[list[str]] = None
    directory_names: Optional[list[str]] = None
    use_json_extension: Optional[bool] = None
    encoding: Optional[str] = None
    pretty_print: Optional[bool] = None
    file_mode: Optional[str] = None
    directory_mode: Optional[str] = None
    auto_create_directories: Optional[bool] = None
    files_enabled: Optional[bool] = None
    files_directory: Optional[str] = None


__all__: list[str] = [
    "DEFAULT_DIRECTORY_MODE",
    "DEFAULT_FILES_DIRECTORY",
    "DEFAULT_FILE_MODE",
    "EnvironmentSettings",
    "StoreSettings",
]
