"""Components shared by every store operation."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path

from ..config import StoreSettings
from ..keys import Key
from ..models import Record
from ..paths import PathMapper
from ..persistence import DirectoryWalker, RecordCodec, write_text_atomic


@dataclass(frozen=True, slots=True)
class OperationContext:
    """Immutable bundle of settings, path mapper, directory walker and codec."""

    settings: StoreSettings
    mapper: PathMapper
    walker: DirectoryWalker
    codec: RecordCodec

    @classmethod
    def from_settings(cls, settings: StoreSettings) -> "OperationContext":
        return cls(
            settings=settings,
            mapper=PathMapper(settings),
            walker=DirectoryWalker(settings.directory_mode),
            codec=RecordCodec(pretty_print=settings.pretty_print, encoding=settings.encoding),
        )

    async def read_record(self, path: Path) -> Record | None:
        """Read and decode ``path``; a missing file or corrupt content yields ``None``."""

        try:
            content = await asyncio.to_thread(path.read_bytes)
        except FileNotFoundError:
            return None
        return self.codec.decode(content)

    async def write_record(self, key: Key, record: Record) -> Path:
        """Encode ``record`` and write it over the file backing ``key``."""

        content = self.codec.encode(record)
        path = self.mapper.path_for_key(key)
        if self.settings.auto_create_directories:
            await asyncio.to_thread(self.walker.ensure_ancestors, path)
        await asyncio.to_thread(
            write_text_atomic,
            path,
            content,
            encoding=self.settings.encoding,
            mode=self.settings.file_mode,
        )
        return path


__all__ = ["OperationContext"]
