"""Reading PSR-4 autoload tables and publish plans from disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .constants import COMPOSER_MANIFEST, PUBLISH_PLAN_FILE
from .errors import SourceNotFoundError
from .logger import logger
from .types import NamespaceMapping, PublishPlan


def _locate(path: str | Path, default_name: str) -> Path:
    located = Path(path)
    if located.is_dir():
        located = located / default_name
    if not located.is_file():
        logger.error("Manifest not found", path=str(located))
        raise SourceNotFoundError(located)
    return located


def _anchor(base: Path, path: str) -> str:
    candidate = Path(path)
    if candidate.is_absolute():
        return str(candidate)
    return str(base / candidate)


def _invalid(path: Path, message: str) -> ValueError:
    logger.error("Invalid manifest", path=str(path), reason=message)
    return ValueError(message)


def _psr4_section(path: Path, raw: dict[str, Any], section: str) -> NamespaceMapping:
    section_table = raw.get(section) or {}
    if not isinstance(section_table, dict):
        raise _invalid(path, f"{section} must be an object, got {type(section_table).__name__}")
    table = section_table.get("psr-4") or {}
    if not isinstance(table, dict):
        raise _invalid(path, f"{section}.psr-4 must be an object, got {type(table).__name__}")

    mapping: NamespaceMapping = {}
    for namespace, paths in table.items():
        # PSR-4 allows a list of base directories per prefix; the first one is used.
        if isinstance(paths, list):
            if not paths:
                continue
            paths = paths[0]
        mapping[namespace] = str(paths)
    return mapping


def read_autoload_mapping(manifest_path: str | Path, *, dev: bool = False) -> NamespaceMapping:
    """Read the PSR-4 table from a composer.json file or the directory holding one.

    Relative paths are resolved against the manifest's directory. With
    dev=True, autoload-dev entries follow the autoload ones.
    """
    path = _locate(manifest_path, COMPOSER_MANIFEST)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as err:
        raise _invalid(path, f"Invalid JSON in {path}: {err}") from err
    if not isinstance(raw, dict):
        raise _invalid(path, f"Manifest {path} must contain a JSON object")

    mapping = _psr4_section(path, raw, "autoload")
    if dev:
        for namespace, base in _psr4_section(path, raw, "autoload-dev").items():
            mapping.setdefault(namespace, base)

    return {namespace: _anchor(path.parent, base) for namespace, base in mapping.items()}


def read_publish_plan(plan_path: str | Path) -> PublishPlan:
    """Read and validate a YAML publish plan.

    Relative paths are resolved against the plan's directory. When the plan
    names a composer manifest, its PSR-4 entries are appended after the
    plan's own autoload entries.
    """
    path = _locate(plan_path, PUBLISH_PLAN_FILE)
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as err:
        raise _invalid(path, f"Invalid YAML in {path}: {err}") from err
    if not isinstance(raw, dict):
        raise _invalid(path, f"Publish plan {path} must be a mapping")

    try:
        plan = PublishPlan.model_validate(raw)
    except ValidationError as err:
        raise _invalid(path, f"Invalid publish plan {path}: {err}") from err
    base = path.parent

    autoload = {namespace: _anchor(base, target) for namespace, target in plan.autoload.items()}
    if plan.composer:
        plan.composer = _anchor(base, plan.composer)
        for namespace, target in read_autoload_mapping(plan.composer).items():
            autoload.setdefault(namespace, target)
    plan.autoload = autoload

    for request in plan.publish:
        request.source_dir = _anchor(base, request.source_dir)
        request.dest_dir = _anchor(base, request.dest_dir)

    return plan
