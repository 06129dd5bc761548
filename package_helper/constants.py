"""Package helper constants."""

from __future__ import annotations

import re

NAMESPACE_SEPARATOR = "\\"
COMPOSER_MANIFEST = "composer.json"
PUBLISH_PLAN_FILE = "package-helper.yaml"

# First "namespace Foo\Bar;" line, anchored at line start. Matched on raw bytes.
NAMESPACE_DECLARATION: re.Pattern[bytes] = re.compile(rb"^namespace\s+.*;", re.MULTILINE)
