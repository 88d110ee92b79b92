"""Whole-file write helpers for record persistence."""

from __future__ import annotations

import os
from pathlib import Path
from typing import IO, Any
from uuid import uuid4

TEMPORARY_PREFIX = "."
TEMPORARY_SUFFIX = ".tmp"


def flush_handle(handle: IO[Any], *, durable: bool) -> None:
    """Flush file buffers and optionally fsync for durability."""

    handle.flush()
    if durable:
        os.fsync(handle.fileno())


def temporary_sibling(path: Path) -> Path:
    """Hidden scratch path next to ``path``; directory listings skip it."""

    return path.parent / f"{TEMPORARY_PREFIX}{path.name}.{uuid4().hex}{TEMPORARY_SUFFIX}"


def is_temporary_name(name: str) -> bool:
    """True for scratch files left by an in-flight or interrupted write."""

    return name.startswith(TEMPORARY_PREFIX) and name.endswith(TEMPORARY_SUFFIX)


def write_text_atomic(
    path: Path,
    content: str,
    *,
    encoding: str = "utf-8",
    mode: int = 0o644,
    durable: bool = False,
) -> None:
    """Write ``content`` to ``path`` through a temporary file and a rename.

    The parent directory must already exist. Readers see either the previous
    file or the complete new one. Concurrent writers are not coordinated; the
    last rename wins.
    """

    temp_path = temporary_sibling(path)
    descriptor = os.open(temp_path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, mode)
    try:
        with os.fdopen(descriptor, "w", encoding=encoding, newline="") as handle:
            handle.write(content)
            flush_handle(handle, durable=durable)
        os.chmod(temp_path, mode)
        temp_path.replace(path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise


__all__ = ["flush_handle", "is_temporary_name", "temporary_sibling", "write_text_atomic"]
