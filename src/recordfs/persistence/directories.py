"""Directory enumeration and creation for record storage."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..config import DEFAULT_DIRECTORY_MODE
from .atomic import is_temporary_name

LOGGER = logging.getLogger(__name__)


def _wanted(name: str, extension: str | None) -> bool:
    if is_temporary_name(name):
        return False
    return not extension or name.endswith(extension)


class DirectoryWalker:
    """Bridge between path mapping and the filesystem.

    A directory that does not exist is reported as empty. Every other OS
    error propagates to the caller.
    """

    def __init__(self, directory_mode: int = DEFAULT_DIRECTORY_MODE) -> None:
        self._directory_mode = directory_mode

    @property
    def directory_mode(self) -> int:
        return self._directory_mode

    def exists(self, path: Path) -> bool:
        """True only for an existing directory."""

        return Path(path).is_dir()

    def ensure_directory(self, path: Path) -> None:
        """Create ``path`` and any missing ancestors with the configured mode."""

        target = Path(path)
        if target.is_dir():
            LOGGER.debug("Directory exists: %s", target)
            return

        missing: list[Path] = []
        current = target
        while not current.exists():
            missing.append(current)
            if current.parent == current:
                break
            current = current.parent

        LOGGER.info("Creating directory %s", target)
        for directory in reversed(missing):
            try:
                directory.mkdir(mode=self._directory_mode)
            except FileExistsError:
                if not directory.is_dir():
                    raise
                continue
            os.chmod(directory, self._directory_mode)

    def ensure_ancestors(self, file_path: Path) -> None:
        """Ensure the parent directory of ``file_path`` exists."""

        self.ensure_directory(Path(file_path).parent)

    def list_files(self, directory: Path, extension: str | None = None) -> list[Path]:
        """Files directly inside ``directory``, in enumeration order.

        Scratch files of unfinished atomic writes are never reported.
        """

        try:
            with os.scandir(directory) as entries:
                files = [
                    Path(entry.path)
                    for entry in entries
                    if entry.is_file() and _wanted(entry.name, extension)
                ]
        except (FileNotFoundError, NotADirectoryError):
            LOGGER.debug("Directory does not exist: %s", directory)
            return []
        return files

    def list_files_recursive(self, directory: Path, extension: str | None = None) -> list[Path]:
        """Files under ``directory`` and all descendants, depth-first."""

        try:
            with os.scandir(directory) as iterator:
                entries = list(iterator)
        except (FileNotFoundError, NotADirectoryError):
            return []

        files: list[Path] = []
        for entry in entries:
            if entry.is_dir():
                files.extend(self.list_files_recursive(Path(entry.path), extension))
            elif entry.is_file() and _wanted(entry.name, extension):
                files.append(Path(entry.path))
        return files

    list_nested_files = list_files_recursive

    def subdirectories(self, directory: Path) -> list[Path]:
        """Immediate child directories of ``directory``."""

        try:
            with os.scandir(directory) as entries:
                return [Path(entry.path) for entry in entries if entry.is_dir()]
        except (FileNotFoundError, NotADirectoryError):
            return []


__all__ = ["DirectoryWalker"]
