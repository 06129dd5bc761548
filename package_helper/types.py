"""Package helper domain types."""

from __future__ import annotations

from collections.abc import Callable

from pydantic import BaseModel, Field

# Namespace prefix ("App\\") -> base directory. Insertion order is match order.
NamespaceMapping = dict[str, str]

# Invoked with (source_path, dest_path) after each file is copied.
CopyCallback = Callable[[str, str], None]


class PublishRequest(BaseModel):
    source_dir: str
    dest_dir: str
    namespace: str | None = None


class PublishPlan(BaseModel):
    composer: str | None = None
    autoload: NamespaceMapping = Field(default_factory=dict)
    publish: list[PublishRequest] = Field(default_factory=list)
