"""Single-file copy with an optional completion callback."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import TYPE_CHECKING

from .config import DIR_MODE
from .errors import CopyError, DirectoryCreationError, SourceNotFoundError
from .logger import logger

if TYPE_CHECKING:
    from .types import CopyCallback


def ensure_dir(path: Path) -> None:
    """Create path and its parents, raising DirectoryCreationError on failure."""
    try:
        path.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
    except OSError as err:
        logger.error("Failed to create directory", path=path, error=str(err))
        raise DirectoryCreationError(path) from err


def copy_bytes(source: Path, target: Path) -> None:
    """Copy file contents byte-for-byte. Not atomic."""
    try:
        shutil.copyfile(source, target)
    except OSError as err:
        logger.error("Failed to copy file", source=source, target=target, error=str(err))
        raise CopyError(source, target) from err


def copy_file(
    source_file: str | Path,
    target_dir: str | Path | None = None,
    on_copy: CopyCallback | None = None,
) -> str:
    """Copy source_file into target_dir, defaulting to the working directory.

    Returns the destination path. on_copy, when given, is called with the
    source and destination paths after the copy succeeds; anything it raises
    propagates to the caller.
    """
    source = Path(source_file)
    if not source.is_file():
        logger.error("Source file not found", source=str(source_file))
        raise SourceNotFoundError(source_file)

    directory = Path(target_dir) if target_dir is not None else Path.cwd()
    ensure_dir(directory)

    target = directory / source.name
    copy_bytes(source, target)
    logger.debug("Copied file", source=str(source), target=str(target))

    if on_copy is not None:
        on_copy(str(source), str(target))

    return str(target)
