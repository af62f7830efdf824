"""Lighthouserc file reader."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .execution_plan import RcFileSettings

MISSING_CI_SECTION_MESSAGE = "Config missing top level 'ci' property"


class RcFileError(Exception):
    """Raised when the lighthouserc file cannot be used."""


def read_rc_document(config_path: Path | str) -> Mapping[str, Any]:
    """Read a JSON or YAML lighthouserc file and return its root mapping."""
    path = Path(config_path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RcFileError(f"Unable to read config file {path}: {exc}") from exc
    try:
        parsed = _parse_text(text, path)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise RcFileError(f"Failed to parse config file {path}: {exc}") from exc

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, Mapping):
        raise RcFileError(f"Config file {path} must contain an object at the root.")
    return parsed


def _parse_text(text: str, path: Path) -> Any:
    # JSON allows tab indentation, which YAML rejects.
    if path.suffix.lower() == ".json":
        return json.loads(text)
    return yaml.safe_load(text)


def parse_rc_settings(document: Mapping[str, Any]) -> RcFileSettings:
    """Extract collect/assert presence and the static dist dir from a parsed rc file."""
    if "ci" not in document:
        raise RcFileError(MISSING_CI_SECTION_MESSAGE)
    ci_section = _optional_mapping(document["ci"], "ci")

    has_collect = "collect" in ci_section
    has_assert = "assert" in ci_section
    static_dist_dir = None
    if has_collect:
        collect_section = _optional_mapping(ci_section["collect"], "ci.collect")
        if "staticDistDir" in collect_section:
            static_dist_dir = _optional_string(
                collect_section["staticDistDir"], "ci.collect.staticDistDir"
            )
    return RcFileSettings(
        has_collect=has_collect,
        has_assert=has_assert,
        static_dist_dir=static_dist_dir,
    )


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise RcFileError(f"Config section '{section_name}' must be an object.")
    return value


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise RcFileError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
