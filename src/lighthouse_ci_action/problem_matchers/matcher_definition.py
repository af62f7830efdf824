"""Problem-matcher definition file helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

MATCHER_OWNER = "lighthouse-ci-action"
MATCHER_RELATIVE_PATH = Path(".github") / "matchers.json"
DIAGNOSTIC_LINE_REGEXP = r"^(.*)\|(error|warning)\|(.*)\|(.*)$"


def build_matcher_definition() -> dict[str, Any]:
    """Build the problem matcher that parses `<url>|<level>|<auditId>|<message>` lines."""
    return {
        "problemMatcher": [
            {
                "owner": MATCHER_OWNER,
                "pattern": [
                    {
                        "regexp": DIAGNOSTIC_LINE_REGEXP,
                        "file": 1,
                        "severity": 2,
                        "code": 3,
                        "message": 4,
                    }
                ],
            }
        ]
    }


def write_matcher_definition(output_path: Path | str) -> Path:
    """Write the matcher definition to the requested path.

    Args:
      output_path: Destination file path, usually `.github/matchers.json`.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the definition fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Matcher definition already exists: {destination.resolve()}")
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(
        json.dumps(build_matcher_definition(), indent=2) + "\n", encoding="utf-8"
    )
    return destination.resolve()
