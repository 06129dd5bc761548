"""Publish package source trees into consumer projects with rewritten namespaces."""

from __future__ import annotations

from .copier import copy_file
from .errors import (
    CopyError,
    DirectoryCreationError,
    NamespaceMappingNotFoundError,
    PackageHelperError,
    ReadError,
    SourceNotFoundError,
    WriteError,
)
from .manifest import read_autoload_mapping, read_publish_plan
from .plan import run_publish_plan
from .publisher import publish, update_namespace
from .resolver import determine_namespace, find_namespace_mapping
from .types import CopyCallback, NamespaceMapping, PublishPlan, PublishRequest

__all__ = [
    # copier
    "copy_file",
    # errors
    "CopyError",
    "DirectoryCreationError",
    "NamespaceMappingNotFoundError",
    "PackageHelperError",
    "ReadError",
    "SourceNotFoundError",
    "WriteError",
    # manifest
    "read_autoload_mapping",
    "read_publish_plan",
    # plan
    "run_publish_plan",
    # publisher
    "publish",
    "update_namespace",
    # resolver
    "determine_namespace",
    "find_namespace_mapping",
    # types
    "CopyCallback",
    "NamespaceMapping",
    "PublishPlan",
    "PublishRequest",
]
