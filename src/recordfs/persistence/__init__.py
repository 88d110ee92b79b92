"""Convenience exports for persistence helpers."""

from __future__ import annotations

from .atomic import flush_handle, write_text_atomic
from .codec import RecordCodec, validate_structure
from .directories import DirectoryWalker

__all__ = [
    "DirectoryWalker",
    "RecordCodec",
    "flush_handle",
    "validate_structure",
    "write_text_atomic",
]
