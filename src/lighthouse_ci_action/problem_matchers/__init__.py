"""Problem matcher domain exports."""

from .assertion_records import (
    ASSERTION_RESULTS_FILENAME,
    AssertionRecord,
    AssertionResultsError,
    load_assertions_by_url,
)
from .diagnostic_lines import format_diagnostic_line
from .matcher_definition import (
    MATCHER_OWNER,
    MATCHER_RELATIVE_PATH,
    build_matcher_definition,
    write_matcher_definition,
)
from .matcher_emitter import emit_problem_matchers

__all__ = [
    "ASSERTION_RESULTS_FILENAME",
    "AssertionRecord",
    "AssertionResultsError",
    "MATCHER_OWNER",
    "MATCHER_RELATIVE_PATH",
    "build_matcher_definition",
    "emit_problem_matchers",
    "format_diagnostic_line",
    "load_assertions_by_url",
    "write_matcher_definition",
]
