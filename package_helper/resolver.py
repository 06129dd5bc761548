"""Resolve a directory's namespace from a PSR-4 mapping table."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from .config import DIR_MODE
from .constants import NAMESPACE_SEPARATOR
from .errors import DirectoryCreationError, NamespaceMappingNotFoundError
from .logger import logger

if TYPE_CHECKING:
    from .types import NamespaceMapping


def _relative_to(path: str, base: str, sep: str) -> str | None:
    """Return the part of path below base, or None when base is not an ancestor.

    Matching stops at a path-segment boundary: "/var/www/applib" is not
    below "/var/www/app".
    """
    if path == base:
        return ""
    prefix = base if base.endswith(sep) else base + sep
    if not path.startswith(prefix):
        return None
    return path[len(prefix) :].lstrip(sep)


def _join_namespace(prefix: str, relative: str, sep: str) -> str:
    segments = [segment for segment in relative.split(sep) if segment]
    namespace = prefix.rstrip(NAMESPACE_SEPARATOR)
    if segments:
        namespace += NAMESPACE_SEPARATOR + NAMESPACE_SEPARATOR.join(segments)
    return namespace


def find_namespace_mapping(mapping: NamespaceMapping, target_path: str) -> str:
    """Match target_path against the mapping lexically, without touching the filesystem.

    Mapping paths have trailing slashes trimmed. The first entry whose path
    contains target_path wins.
    """
    for namespace, path in mapping.items():
        base = path.rstrip("/") or "/"
        relative = _relative_to(target_path, base, "/")
        if relative is not None:
            return _join_namespace(namespace, relative, "/")

    logger.error("No PSR-4 mapping matched", target=target_path, candidates=len(mapping))
    raise NamespaceMappingNotFoundError(target_path)


def determine_namespace(mapping: NamespaceMapping, target_path: str | Path) -> str:
    """Determine the namespace of target_path from a PSR-4 mapping.

    The target directory is created when it does not exist yet so that its
    canonical form can be computed. Mapping entries whose path does not exist
    are skipped. Entries are tried in insertion order and the first one whose
    canonical path contains the target wins, even when a later entry is more
    specific.
    """
    if not mapping:
        logger.error("No PSR-4 mapping matched", target=str(target_path), candidates=0)
        raise NamespaceMappingNotFoundError(target_path)

    target = Path(target_path)
    try:
        target.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
    except OSError as err:
        logger.error("Failed to create target directory", target=str(target_path), error=str(err))
        raise DirectoryCreationError(target_path) from err

    try:
        canonical = str(target.resolve(strict=True))
    except OSError as err:
        logger.error("Failed to resolve target directory", target=str(target_path), error=str(err))
        raise NamespaceMappingNotFoundError(target_path) from err

    for namespace, path in mapping.items():
        try:
            base = str(Path(path).resolve(strict=True))
        except OSError:
            logger.debug("Skipping mapping entry with missing path", namespace=namespace, path=path)
            continue

        relative = _relative_to(canonical, base, os.sep)
        if relative is not None:
            return _join_namespace(namespace, relative, os.sep)

    logger.error("No PSR-4 mapping matched", target=str(target_path), candidates=len(mapping))
    raise NamespaceMappingNotFoundError(target_path)
