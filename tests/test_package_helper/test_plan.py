"""Tests for running publish plans end to end."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from package_helper.errors import NamespaceMappingNotFoundError
from package_helper.plan import run_publish_plan
from package_helper.types import PublishPlan, PublishRequest

from .conftest import write_tree

if TYPE_CHECKING:
    from pathlib import Path


class TestRunPublishPlan:
    @pytest.fixture(autouse=True)
    def _setup(self, helper_tmp: Path) -> None:
        self.tmp_dir = helper_tmp
        (helper_tmp / "app").mkdir()
        self.stubs = write_tree(
            helper_tmp / "stubs",
            {
                "Model.php": "<?php\nnamespace Stub;\n",
                "Casts/Money.php": "<?php\nnamespace Stub\\Casts;\n",
            },
        )

    def test_resolves_namespace_from_autoload_table(self) -> None:
        plan = PublishPlan(
            autoload={"App\\": str(self.tmp_dir / "app")},
            publish=[PublishRequest(source_dir=str(self.stubs), dest_dir=str(self.tmp_dir / "app" / "Models"))],
        )

        assert run_publish_plan(plan) == ["App\\Models"]
        assert "namespace App\\Models;" in (self.tmp_dir / "app" / "Models" / "Model.php").read_text()
        assert "namespace App\\Models\\Casts;" in (
            self.tmp_dir / "app" / "Models" / "Casts" / "Money.php"
        ).read_text()

    def test_explicit_namespace_skips_resolution(self) -> None:
        plan = PublishPlan(
            publish=[
                PublishRequest(source_dir=str(self.stubs), dest_dir=str(self.tmp_dir / "out"), namespace="Custom"),
            ],
        )
        assert run_publish_plan(plan) == ["Custom"]
        assert "namespace Custom;" in (self.tmp_dir / "out" / "Model.php").read_text()

    def test_callback_is_passed_through(self) -> None:
        copied: list[str] = []
        plan = PublishPlan(
            publish=[PublishRequest(source_dir=str(self.stubs), dest_dir=str(self.tmp_dir / "out"), namespace="X")],
        )
        run_publish_plan(plan, lambda source, target: copied.append(target))
        assert copied == [
            str(self.tmp_dir / "out" / "Casts" / "Money.php"),
            str(self.tmp_dir / "out" / "Model.php"),
        ]

    def test_unresolvable_destination_raises(self) -> None:
        plan = PublishPlan(
            autoload={"App\\": str(self.tmp_dir / "app")},
            publish=[PublishRequest(source_dir=str(self.stubs), dest_dir=str(self.tmp_dir / "elsewhere"))],
        )
        with pytest.raises(NamespaceMappingNotFoundError):
            run_publish_plan(plan)
