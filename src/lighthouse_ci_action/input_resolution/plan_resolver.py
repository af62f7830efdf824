"""Execution plan resolution service."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from .execution_plan import (
    ExecutionPlan,
    FatalInputError,
    InputResolution,
    RawInputs,
    RcFileSettings,
)
from .rc_file import RcFileError, parse_rc_settings
from .url_interpolation import interpolate_urls, split_url_list

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "info"
_LEADING_INTEGER = re.compile(r"\s*[+-]?\d+")
SERVER_TOKEN_MISMATCH_MESSAGE = "Need both a LHCI server url and an API token"
NO_TARGETS_MESSAGE = (
    "Need either 'urls' in action parameters or a 'static_dist_dir' in lighthouserc file"
)
STATIC_DIR_PRECEDENCE_WARNING = (
    "Setting both 'url' and 'static_dist_dir' will ignore urls in 'url' "
    "since 'static_dist_dir' has higher priority"
)


def resolve_execution_plan(
    raw_inputs: RawInputs,
    *,
    environ: Mapping[str, str],
    rc_document: Mapping[str, Any] | None = None,
) -> InputResolution:
    """Validate raw inputs and derive the execution plan.

    Args:
      raw_inputs: Action inputs with blank values already normalized to None.
      environ: Environment used for `$NAME` url interpolation.
      rc_document: Parsed lighthouserc root mapping; only consulted when
        `raw_inputs.config_path` is set.

    Returns:
      The ExecutionPlan, or a FatalInputError describing the first violated
      constraint.
    """
    pairing_error = check_server_token_pairing(raw_inputs)
    if pairing_error is not None:
        return pairing_error

    rc_settings = RcFileSettings(has_collect=False, has_assert=False, static_dist_dir=None)
    if raw_inputs.config_path:
        try:
            rc_settings = parse_rc_settings(rc_document if rc_document is not None else {})
        except RcFileError as exc:
            return FatalInputError(str(exc))

    urls = interpolate_urls(
        split_url_list(raw_inputs.urls),
        environ=environ,
        ref=raw_inputs.ref,
        netlify_site=raw_inputs.netlify_site,
    )
    static_dist_dir = rc_settings.static_dist_dir

    if not urls and not static_dist_dir:
        return FatalInputError(NO_TARGETS_MESSAGE)

    warnings: tuple[str, ...] = ()
    if urls and static_dist_dir:
        logger.debug("Static dist dir %s overrides %d url(s)", static_dist_dir, len(urls))
        warnings = (STATIC_DIR_PRECEDENCE_WARNING,)

    return ExecutionPlan(
        urls=tuple(urls),
        static_dist_dir=static_dist_dir,
        can_upload=raw_inputs.temporary_public_storage is not None,
        budget_path=raw_inputs.budget_path,
        slack_webhook_url=raw_inputs.slack_webhook_url,
        log_level=raw_inputs.log_level or DEFAULT_LOG_LEVEL,
        number_of_runs=parse_run_count(raw_inputs.runs),
        application_github_token=raw_inputs.application_github_token,
        personal_github_token=raw_inputs.personal_github_token,
        server_base_url=raw_inputs.server_base_url,
        token=raw_inputs.token,
        rc_collect=rc_settings.has_collect,
        rc_assert=rc_settings.has_assert,
        config_path=raw_inputs.config_path,
        warnings=warnings,
    )


def check_server_token_pairing(raw_inputs: RawInputs) -> FatalInputError | None:
    """Return a fatal result when only one of server url and token is set."""
    if (raw_inputs.server_base_url is None) != (raw_inputs.token is None):
        return FatalInputError(SERVER_TOKEN_MISMATCH_MESSAGE)
    return None


def parse_run_count(value: str | None) -> int | None:
    """Parse the leading integer of the run count, like `parseInt`.

    Absent values, values without leading digits and zero all mean unset.
    """
    if value is None:
        return None
    match = _LEADING_INTEGER.match(value)
    if match is None:
        return None
    return int(match.group(0)) or None
