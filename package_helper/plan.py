"""Run every entry of a publish plan."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .logger import logger
from .publisher import publish
from .resolver import determine_namespace

if TYPE_CHECKING:
    from .types import CopyCallback, PublishPlan


def run_publish_plan(plan: PublishPlan, on_copy: CopyCallback | None = None) -> list[str]:
    """Publish each request in order and return the namespaces used.

    Requests without an explicit namespace get one resolved from the plan's
    autoload table and their destination directory.
    """
    namespaces: list[str] = []
    for request in plan.publish:
        namespace = request.namespace
        if namespace is None:
            namespace = determine_namespace(plan.autoload, request.dest_dir)
            logger.debug("Resolved namespace", dest=request.dest_dir, namespace=namespace)
        publish(request.source_dir, request.dest_dir, namespace, on_copy)
        namespaces.append(namespace)
    return namespaces
