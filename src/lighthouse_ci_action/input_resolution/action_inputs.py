"""GitHub Actions input boundary."""

from __future__ import annotations

from collections.abc import Mapping

from .execution_plan import FatalInputError, InputResolution, RawInputs
from .plan_resolver import check_server_token_pairing, resolve_execution_plan
from .rc_file import RcFileError, read_rc_document

# RawInputs field -> action input name as declared in action.yml.
ACTION_INPUT_NAMES = {
    "server_base_url": "upload.serverBaseUrl",
    "token": "upload.token",
    "config_path": "configPath",
    "urls": "urls",
    "temporary_public_storage": "temporaryPublicStorage",
    "budget_path": "budgetPath",
    "slack_webhook_url": "slackWebhookUrl",
    "log_level": "logLevel",
    "runs": "runs",
    "application_github_token": "applicationGithubToken",
    "personal_github_token": "personalGithubToken",
    "netlify_site": "netlifySite",
}


def input_variable_name(input_name: str) -> str:
    """Return the environment variable the runner uses for an action input."""
    return f"INPUT_{input_name.replace(' ', '_').upper()}"


def get_input(environ: Mapping[str, str], input_name: str) -> str | None:
    """Read one action input; blank values count as absent."""
    value = environ.get(input_variable_name(input_name), "").strip()
    return value or None


def read_raw_inputs(environ: Mapping[str, str]) -> RawInputs:
    """Collect every action input and the workflow ref from the environment."""
    values = {
        field_name: get_input(environ, input_name)
        for field_name, input_name in ACTION_INPUT_NAMES.items()
    }
    return RawInputs(ref=environ.get("GITHUB_REF") or None, **values)


def load_execution_plan(environ: Mapping[str, str]) -> InputResolution:
    """Read inputs and the lighthouserc file once, then resolve the plan."""
    raw_inputs = read_raw_inputs(environ)
    pairing_error = check_server_token_pairing(raw_inputs)
    if pairing_error is not None:
        return pairing_error
    rc_document = None
    if raw_inputs.config_path:
        try:
            rc_document = read_rc_document(raw_inputs.config_path)
        except RcFileError as exc:
            return FatalInputError(str(exc))
    return resolve_execution_plan(raw_inputs, environ=environ, rc_document=rc_document)
