"""Translate record keys and location chains into filesystem paths.

Layout produced for a store with ``key_types=("comment", "post")`` and
``directory_names=("comments", "posts")``::

    <root>/comments/<id>.json                        primary key
    <root>/posts/<post-id>/comments/<id>.json        composite key
    <root>/posts/<post-id>/comments/<id>/_files/     side storage

Nothing in this module touches the disk.
"""

from __future__ import annotations

import logging
from pathlib import Path, PurePath
from typing import Any, Iterable, Mapping

from .config import StoreSettings
from .errors import InvalidKeyError
from .keys import ComKey, Key, LocKey, PriKey, to_locations

LOGGER = logging.getLogger(__name__)

JSON_EXTENSION = ".json"


class PathMapper:
    """Deterministic mapping between keys and on-disk locations."""

    def __init__(self, settings: StoreSettings) -> None:
        self._root = settings.root_directory
        self._key_types = tuple(settings.key_types)
        self._directory_names = tuple(settings.directory_names)
        self._extension = JSON_EXTENSION if settings.use_json_extension else ""
        self._files_directory = settings.files_directory

    @property
    def root(self) -> Path:
        return self._root

    @property
    def extension(self) -> str:
        """The file suffix appended to identifiers, or ``""`` when disabled."""

        return self._extension

    def _name_at(self, index: int, fallback: str) -> str:
        if 0 <= index < len(self._directory_names) and self._directory_names[index]:
            return self._directory_names[index]
        return fallback

    def directory_name_for_type(self, key_type: str) -> str:
        """Mapped directory name for ``key_type``; the type name itself when unmapped."""

        try:
            index = self._key_types.index(key_type)
        except ValueError:
            return key_type
        return self._name_at(index, key_type)

    def directory_for(self, key_type: str, index: int) -> Path:
        """Top-level directory for the key type at ``index`` of the chain."""

        return self._root / self._name_at(index, key_type)

    def _filename(self, identifier: str) -> str:
        return f"{identifier}{self._extension}"

    def path_for_key(self, key: Key) -> Path:
        """Absolute path of the file backing ``key``."""

        if isinstance(key, ComKey):
            directory = self.directory_for_locations(key.locations)
            return directory / self.directory_name_for_type(key.type) / self._filename(key.identifier)
        if isinstance(key, PriKey):
            return self.directory_for(key.type, 0) / self._filename(key.identifier)
        raise InvalidKeyError(f"Unsupported key object: {type(key).__name__}")

    def directory_for_locations(
        self, locations: Iterable[LocKey | Mapping[str, Any]] | None
    ) -> Path:
        """Directory reached by walking ``locations``, outermost ancestor first."""

        current = self._root
        for location in to_locations(locations):
            current = current / self.directory_name_for_type(location.type) / location.identifier
        return current

    def listing_directory(
        self, locations: Iterable[LocKey | Mapping[str, Any]] | None = None
    ) -> Path:
        """Directory holding the store's records for the given ancestors."""

        own_type = self._key_types[0]
        chain = to_locations(locations)
        if chain:
            return self.directory_for_locations(chain) / self._name_at(0, own_type)
        return self.directory_for(own_type, 0)

    def side_storage_directory(self, key: Key) -> Path:
        """Attachment directory for ``key``: ``<.../identifier>/<files_directory>``."""

        record_path = self.path_for_key(key)
        stem = record_path.name
        if self._extension and stem.endswith(self._extension):
            stem = stem[: -len(self._extension)]
        return record_path.with_name(stem) / self._files_directory

    def label_directory(self, key: Key, label: str) -> Path:
        return self.side_storage_directory(key) / label

    def attachment_path(self, key: Key, label: str, filename: str) -> Path:
        return self.label_directory(key, label) / filename

    def _type_for_directory(self, directory: str) -> str:
        for index, name in enumerate(self._directory_names):
            if name == directory and index < len(self._key_types):
                return self._key_types[index]
        return directory

    def path_to_key(self, path: str | PurePath | None) -> PriKey | None:
        """Best-effort reverse mapping; only primary-key paths are understood."""

        if path is None or str(path).strip() in {"", "."}:
            return None
        candidate = Path(path)
        if candidate.is_absolute():
            try:
                relative = candidate.relative_to(self._root)
            except ValueError:
                LOGGER.debug("Path %s is outside store root %s", candidate, self._root)
                return None
        else:
            relative = candidate

        parts = relative.parts
        if len(parts) != 2:
            if len(parts) > 2:
                LOGGER.debug("Reverse mapping of composite path %s is not supported", candidate)
            return None

        directory, filename = parts
        if self._extension and filename.endswith(self._extension):
            filename = filename[: -len(self._extension)]
        if not filename or directory in {".", ".."} or filename in {".", ".."}:
            return None
        return PriKey(type=self._type_for_directory(directory), identifier=filename)


__all__ = ["JSON_EXTENSION", "PathMapper"]
