"""Detect whether a compiled artifact is older than its source."""

import asyncio
import logging
from pathlib import Path

log = logging.getLogger(__name__)


class SourceNotFoundError(FileNotFoundError):
    """Raised when the source file to compile does not exist."""


async def is_stale(source: Path, executable: Path) -> bool:
    """Check whether the executable needs to be rebuilt.

    Args:
        source: Source file path
        executable: Compiled artifact path

    Returns:
        True if the executable is missing or older than the source.

    Raises:
        SourceNotFoundError: If the source file does not exist

    """
    source_mtime = await modification_time(source)
    if source_mtime is None:
        raise SourceNotFoundError(f"Source file not found: {source}")

    executable_mtime = await modification_time(executable)
    if executable_mtime is None:
        log.debug("Executable %s does not exist", executable)
        return True

    return source_mtime > executable_mtime


async def modification_time(path: Path) -> int | None:
    """Return the modification time in nanoseconds, or None if missing."""
    try:
        stat = await asyncio.to_thread(path.stat)
    except FileNotFoundError:
        return None
    return stat.st_mtime_ns
