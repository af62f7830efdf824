"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path

import click

from lighthouse_ci_action.input_resolution import FatalInputError, load_execution_plan
from lighthouse_ci_action.problem_matchers import (
    MATCHER_RELATIVE_PATH,
    AssertionResultsError,
    emit_problem_matchers,
    write_matcher_definition,
)


class CliError(Exception):
    """Custom CLI error."""


def _configure_logging() -> None:
    # The runner sets RUNNER_DEBUG=1 when step debug logging is enabled.
    level = logging.DEBUG if os.environ.get("RUNNER_DEBUG") == "1" else logging.WARNING
    logging.basicConfig(level=level, format="::debug::%(name)s: %(message)s", stream=sys.stdout)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="lighthouse-ci-action")
def cli() -> None:
    """Lighthouse CI action input resolution and result annotation."""
    _configure_logging()


@cli.command(name="resolve-inputs")
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Write the execution plan JSON to this file instead of stdout",
)
def resolve_inputs(output_path: str | None) -> None:
    """Validate action inputs and print the resolved execution plan."""
    resolution = load_execution_plan(os.environ)
    if isinstance(resolution, FatalInputError):
        raise CliError(resolution.message)

    for warning in resolution.warnings:
        click.echo(f"::warning::{warning}")
    plan_json = json.dumps(resolution.to_dict(), indent=2)
    if output_path:
        try:
            Path(output_path).write_text(plan_json + "\n", encoding="utf-8")
        except OSError as exc:
            raise CliError(str(exc)) from exc
        return
    click.echo(plan_json)


@cli.command(name="annotate")
@click.option(
    "--results-dir",
    "results_path",
    required=False,
    default=".lighthouseci",
    show_default=True,
    type=click.Path(path_type=str),
    help="LHCI results directory or assertion-results.json file",
)
def annotate(results_path: str) -> None:
    """Print assertion results as problem-matcher annotations."""
    try:
        emit_problem_matchers(results_path, echo=click.echo)
    except (AssertionResultsError, OSError) as exc:
        raise CliError(str(exc)) from exc


@cli.command(name="write-matcher")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=str(MATCHER_RELATIVE_PATH),
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the problem matcher definition to write",
)
def write_matcher(output_path: str) -> None:
    """Write the problem matcher definition used by the annotate command."""
    try:
        resolved_output = write_matcher_definition(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(f"::error::{exc}")
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
