"""CLI error-handling tests."""

from __future__ import annotations

from lighthouse_ci_action.cli import main


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["annotate", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_fatal_input_is_reported_as_workflow_error(capsys, monkeypatch) -> None:
    monkeypatch.setenv("INPUT_UPLOAD.TOKEN", "secret-token")
    monkeypatch.delenv("INPUT_UPLOAD.SERVERBASEURL", raising=False)

    exit_code = main(["resolve-inputs"])
    captured = capsys.readouterr()

    assert exit_code == 1
    error_lines = [line for line in captured.out.splitlines() if line.startswith("::error::")]
    assert error_lines == ["::error::Need both a LHCI server url and an API token"]
    assert "Traceback" not in captured.err
