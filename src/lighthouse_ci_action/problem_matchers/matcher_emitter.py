"""Problem-matcher emission service."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from .assertion_records import load_assertions_by_url
from .diagnostic_lines import format_diagnostic_line
from .matcher_definition import MATCHER_OWNER, MATCHER_RELATIVE_PATH

Echo = Callable[[str], None]


def add_matcher_command(cwd: Path) -> str:
    return f"::add-matcher::{cwd / MATCHER_RELATIVE_PATH}"


def remove_matcher_command() -> str:
    return f"::remove-matcher owner={MATCHER_OWNER}::"


def emit_problem_matchers(
    results_path: Path | str,
    *,
    echo: Echo = print,
    cwd: Path | None = None,
) -> int:
    """Emit one annotation line per assertion between matcher control lines.

    LHCI assertion output is written for humans; this re-renders each record as
    a single `<url>|<level>|<auditId>|<message>` line the registered matcher can
    parse. The remove-matcher line is written even when loading the results
    fails; the loading error then propagates to the caller.

    Returns:
      The number of diagnostic lines written.
    """
    working_dir = cwd if cwd is not None else Path.cwd()
    echo(add_matcher_command(working_dir))
    emitted = 0
    try:
        assertions_by_url = load_assertions_by_url(results_path)
        for assertions in assertions_by_url.values():
            for record in assertions:
                echo(format_diagnostic_line(record))
                emitted += 1
    finally:
        echo(remove_matcher_command())
    return emitted
