"""CLI orchestration integration tests."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner
from lighthouse_ci_action.cli import CliError, cli

_CLEAN_ENV = {
    "GITHUB_REF": None,
    "INPUT_URLS": None,
    "INPUT_CONFIGPATH": None,
    "INPUT_UPLOAD.SERVERBASEURL": None,
    "INPUT_UPLOAD.TOKEN": None,
    "INPUT_NETLIFYSITE": None,
    "RUNNER_DEBUG": None,
}


def _env(**values: str) -> dict[str, str | None]:
    env: dict[str, str | None] = dict(_CLEAN_ENV)
    env.update(values)
    return env


def _write_config(tmp_path: Path, ci_section: dict) -> Path:
    path = tmp_path / "lighthouserc.json"
    path.write_text(json.dumps({"ci": ci_section}), encoding="utf-8")
    return path


def test_resolve_inputs_prints_plan_json(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "plan.json"

    result = runner.invoke(
        cli,
        ["resolve-inputs", "--output", str(output_path)],
        env=_env(
            INPUT_URLS="https://example.com/\nhttps://example.com/blog",
            INPUT_RUNS="3",
            INPUT_TEMPORARYPUBLICSTORAGE="true",
        ),
    )

    assert result.exit_code == 0, result.output
    plan = json.loads(output_path.read_text(encoding="utf-8"))
    assert plan["urls"] == ["https://example.com/", "https://example.com/blog"]
    assert plan["number_of_runs"] == 3
    assert plan["can_upload"] is True
    assert plan["log_level"] == "info"


def test_resolve_inputs_rewrites_netlify_preview_urls() -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["resolve-inputs"],
        env=_env(
            INPUT_URLS="https://example.com/path",
            INPUT_NETLIFYSITE="mysite.netlify.app",
            GITHUB_REF="refs/heads/my-branch",
        ),
    )

    assert result.exit_code == 0, result.output
    plan = json.loads(result.output)
    assert plan["urls"] == ["https://my-branch--mysite.netlify.app/path"]


def test_resolve_inputs_warns_when_static_dist_dir_overrides_urls(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path, {"collect": {"staticDistDir": "./dist"}})
    output_path = tmp_path / "plan.json"

    result = runner.invoke(
        cli,
        ["resolve-inputs", "--output", str(output_path)],
        env=_env(INPUT_URLS="https://example.com/", INPUT_CONFIGPATH=str(config_path)),
    )

    assert result.exit_code == 0, result.output
    warning_lines = [line for line in result.output.splitlines() if line.startswith("::warning::")]
    assert len(warning_lines) == 1
    assert "'static_dist_dir' has higher priority" in warning_lines[0]
    plan = json.loads(output_path.read_text(encoding="utf-8"))
    assert plan["static_dist_dir"] == "./dist"
    assert plan["rc_collect"] is True


def test_resolve_inputs_fails_for_config_without_ci_section(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = tmp_path / "lighthouserc.json"
    config_path.write_text(json.dumps({"collect": {}}), encoding="utf-8")

    result = runner.invoke(
        cli,
        ["resolve-inputs"],
        env=_env(INPUT_URLS="https://example.com/", INPUT_CONFIGPATH=str(config_path)),
    )

    assert result.exit_code != 0
    assert isinstance(result.exception, CliError)
    assert "Config missing top level 'ci' property" in str(result.exception)


def test_resolve_inputs_fails_without_targets() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["resolve-inputs"], env=_env())

    assert result.exit_code != 0
    assert "Need either 'urls' in action parameters" in str(result.exception)


def test_annotate_prints_problem_matcher_lines(tmp_path: Path) -> None:
    runner = CliRunner()
    results_dir = tmp_path / ".lighthouseci"
    results_dir.mkdir()
    (results_dir / "assertion-results.json").write_text(
        json.dumps(
            [
                {
                    "url": "https://example.com/",
                    "auditId": "uses-rel-preconnect",
                    "name": "maxLength",
                    "level": "warning",
                    "operator": "<=",
                    "expected": 0,
                    "actual": 2,
                }
            ]
        ),
        encoding="utf-8",
    )

    result = runner.invoke(cli, ["annotate", "--results-dir", str(results_dir)], env=_env())

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0].startswith("::add-matcher::")
    assert lines[0].endswith("matchers.json")
    assert lines[1] == (
        "https://example.com/|warning|uses-rel-preconnect|`uses-rel-preconnect` warning for "
        "`maxLength` assertion, expected **<= 0**, but found **2**."
    )
    assert lines[2] == "::remove-matcher owner=lighthouse-ci-action::"


def test_annotate_fails_after_removing_matcher_for_missing_results(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli, ["annotate", "--results-dir", str(tmp_path / "missing")], env=_env()
    )

    assert result.exit_code != 0
    assert isinstance(result.exception, CliError)
    assert result.output.splitlines()[-1] == "::remove-matcher owner=lighthouse-ci-action::"


def test_write_matcher_command_writes_default_location(tmp_path: Path) -> None:
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=str(tmp_path)):
        result = runner.invoke(cli, ["write-matcher"])
        output_path = Path(".github/matchers.json").resolve()

        assert result.exit_code == 0
        assert output_path.exists()
        assert str(output_path) in result.output

        second = runner.invoke(cli, ["write-matcher"])
        assert second.exit_code != 0
        assert "already exists" in str(second.exception)
