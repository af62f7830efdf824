"""Input resolution domain exports."""

from .action_inputs import get_input, load_execution_plan, read_raw_inputs
from .execution_plan import (
    ExecutionPlan,
    FatalInputError,
    InputResolution,
    RawInputs,
    RcFileSettings,
)
from .plan_resolver import DEFAULT_LOG_LEVEL, parse_run_count, resolve_execution_plan
from .rc_file import RcFileError, parse_rc_settings, read_rc_document
from .url_interpolation import interpolate_urls, split_url_list

__all__ = [
    "ExecutionPlan",
    "FatalInputError",
    "InputResolution",
    "RawInputs",
    "RcFileSettings",
    "RcFileError",
    "DEFAULT_LOG_LEVEL",
    "get_input",
    "interpolate_urls",
    "load_execution_plan",
    "parse_rc_settings",
    "parse_run_count",
    "read_raw_inputs",
    "read_rc_document",
    "resolve_execution_plan",
    "split_url_list",
]
