"""Publish a package's source tree into a consumer project."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from .config import FILE_ENCODING
from .constants import NAMESPACE_DECLARATION, NAMESPACE_SEPARATOR
from .copier import copy_bytes, ensure_dir
from .errors import ReadError, SourceNotFoundError, WriteError
from .logger import logger

if TYPE_CHECKING:
    from .types import CopyCallback


def update_namespace(file_path: str | Path, namespace: str) -> bool:
    """Rewrite the first namespace declaration in file_path to namespace.

    Files without a declaration are left untouched, so binary files pass
    through unchanged. Returns True when the file was rewritten.
    """
    path = Path(file_path)
    try:
        content = path.read_bytes()
    except OSError as err:
        logger.error("Failed to read file", path=path, error=str(err))
        raise ReadError(path) from err

    try:
        # Directory names decoded with surrogate escapes go back to their original bytes.
        declaration = f"namespace {namespace};".encode(FILE_ENCODING, errors="surrogateescape")
    except UnicodeEncodeError as err:
        logger.error("Namespace not representable in file encoding", path=path, encoding=FILE_ENCODING)
        raise WriteError(path) from err

    updated, count = NAMESPACE_DECLARATION.subn(lambda _match: declaration, content, count=1)
    if count == 0:
        return False

    try:
        path.write_bytes(updated)
    except OSError as err:
        logger.error("Failed to update file", path=path, error=str(err))
        raise WriteError(path) from err

    return True


def _dir_key(path: Path) -> tuple[int, int]:
    stat = path.stat()
    return stat.st_dev, stat.st_ino


def _list_entries(directory: Path) -> list[Path]:
    try:
        return sorted(directory.iterdir(), key=lambda entry: entry.name)
    except OSError as err:
        logger.error("Failed to list directory", path=directory, error=str(err))
        raise ReadError(directory) from err


def _publish_dir(
    source: Path,
    dest: Path,
    namespace: str,
    on_copy: CopyCallback | None,
    ancestors: set[tuple[int, int]],
) -> int:
    key = _dir_key(source)
    if key in ancestors:
        # Symlink pointing back up the tree.
        logger.warning("Skipping directory cycle", path=source)
        return 0

    ensure_dir(dest)
    ancestors.add(key)
    copied = 0

    for entry in _list_entries(source):
        target = dest / entry.name
        if entry.is_dir():
            copied += _publish_dir(
                entry,
                target,
                f"{namespace}{NAMESPACE_SEPARATOR}{entry.name}",
                on_copy,
                ancestors,
            )
            continue

        copy_bytes(entry, target)
        rewritten = update_namespace(target, namespace)
        logger.debug("Published file", source=entry, target=target, rewritten=rewritten)
        if on_copy is not None:
            on_copy(str(entry), str(target))
        copied += 1

    ancestors.discard(key)
    return copied


def publish(
    source_dir: str | Path,
    dest_dir: str | Path,
    namespace: str,
    on_copy: CopyCallback | None = None,
) -> None:
    """Copy source_dir into dest_dir, rewriting namespace declarations.

    Each directory level below source_dir appends its name as a namespace
    segment. Entries are processed in name order. A failure aborts the walk
    and leaves already-copied files in place.
    """
    source = Path(source_dir)
    if not source.is_dir():
        logger.error("Source directory not found", source=str(source_dir))
        raise SourceNotFoundError(source_dir)

    copied = _publish_dir(source, Path(dest_dir), namespace, on_copy, set())
    logger.info("Published package files", source=str(source_dir), dest=str(dest_dir), namespace=namespace, files=copied)
