"""Settings read from the environment and an optional .env file."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def _env_pairs(content: str) -> Iterator[tuple[str, str]]:
    """Yield KEY=value pairs from .env text, honouring an optional "export " prefix."""
    for raw_line in content.splitlines():
        line = raw_line.strip()
        if line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            continue
        key = key.strip().removeprefix("export ").strip()
        yield key, _unquote(value.strip())


def read_env_file(keys: list[str]) -> dict[str, str]:
    """Return the requested keys from .env in the working directory.

    Values are never exported to os.environ. Empty values count as unset.
    """
    try:
        content = (Path.cwd() / ".env").read_text()
    except OSError:
        return {}

    wanted = set(keys)
    return {key: value for key, value in _env_pairs(content) if key in wanted and value}


def _setting(key: str, default: str, env_config: dict[str, str]) -> str:
    return os.environ.get(key) or env_config.get(key, default)


def parse_dir_mode(raw: str) -> int:
    """Parse an octal permission string such as "755" or "0o755"."""
    try:
        return int(raw, 8)
    except ValueError as err:
        raise ValueError(f"Invalid directory mode: {raw!r} (expected octal digits)") from err


_env_config = read_env_file(["LOG_LEVEL", "PACKAGE_HELPER_DIR_MODE", "PACKAGE_HELPER_ENCODING"])

LOG_LEVEL: str = _setting("LOG_LEVEL", "INFO", _env_config).upper()
DIR_MODE: int = parse_dir_mode(_setting("PACKAGE_HELPER_DIR_MODE", "777", _env_config))
FILE_ENCODING: str = _setting("PACKAGE_HELPER_ENCODING", "utf-8", _env_config)
