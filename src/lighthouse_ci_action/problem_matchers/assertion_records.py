"""Lighthouse CI assertion results reader."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

ASSERTION_RESULTS_FILENAME = "assertion-results.json"
_REQUIRED_KEYS = ("url", "auditId", "name", "level", "operator")


class AssertionResultsError(Exception):
    """Raised when the assertion results artifact is missing or malformed."""


@dataclass(frozen=True)
class AssertionRecord:
    """One failed or warned assertion for one audited url."""

    url: str
    audit_id: str
    name: str
    level: str
    operator: str
    expected: object
    actual: object


def resolve_results_file(results_path: Path | str) -> Path:
    """Accept either the LHCI results directory or the results file itself."""
    path = Path(results_path)
    if path.is_dir():
        return path / ASSERTION_RESULTS_FILENAME
    return path


def load_assertions_by_url(results_path: Path | str) -> dict[str, list[AssertionRecord]]:
    """Load assertion results and group them by url in first-seen order."""
    results_file = resolve_results_file(results_path)
    if not results_file.exists():
        raise AssertionResultsError(f"Assertion results not found: {results_file}")

    try:
        payload = json.loads(results_file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise AssertionResultsError(
            f"Failed to parse assertion results {results_file}: {exc}"
        ) from exc
    if not isinstance(payload, list):
        raise AssertionResultsError("Assertion results must be a JSON array.")

    assertions_by_url: dict[str, list[AssertionRecord]] = {}
    for index, item in enumerate(payload):
        record = _to_record(item, index)
        assertions_by_url.setdefault(record.url, []).append(record)
    return assertions_by_url


def _to_record(item: Any, index: int) -> AssertionRecord:
    if not isinstance(item, Mapping):
        raise AssertionResultsError(f"Assertion result #{index} must be an object.")
    for key in _REQUIRED_KEYS:
        if not isinstance(item.get(key), str):
            raise AssertionResultsError(f"Assertion result #{index} is missing '{key}'.")
    return AssertionRecord(
        url=item["url"],
        audit_id=item["auditId"],
        name=item["name"],
        level=item["level"],
        operator=item["operator"],
        expected=item.get("expected"),
        actual=item.get("actual"),
    )
