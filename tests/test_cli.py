from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from netsuite_cli import __version__
from netsuite_cli.cli import app

runner = CliRunner()


def test_add_suitelet(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(project_root)
    result = runner.invoke(app, ["add", "suitelet", "My Report"], input="\ny\n")

    assert result.exit_code == 0, result.output
    assert (project_root / "SuiteScripts" / "acm_My Report_suitelet.ts").is_file()
    assert (project_root / "Objects" / "acme-proj" / "suitelet" / "acm_My Report.xml").is_file()
    assert "acm_My Report_suitelet.ts" in result.output
    assert "acm_My Report.xml" in result.output


def test_add_category_is_case_insensitive(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(project_root)
    result = runner.invoke(app, ["add", "Bundle", "Setup"], input="\ny\n")
    assert result.exit_code == 0, result.output
    assert (project_root / "SuiteScripts" / "acm_Setup_bundle.ts").is_file()


def test_add_unknown_category(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(project_root)
    result = runner.invoke(app, ["add", "widget", "x"])
    assert result.exit_code == 2
    assert not (project_root / "SuiteScripts").exists()


def test_add_outside_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["add", "suitelet", "x"])
    assert result.exit_code == 1
    assert "Not a project folder" in result.output


def test_add_malformed_preferences(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".netsuite-cli").write_text("{oops")
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["add", "suitelet", "x"])
    assert result.exit_code == 1
    assert "Configuration error" in result.output


def test_add_preferences_not_utf8(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".netsuite-cli").write_bytes(b'{"projectName": "\xff"}')
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["add", "suitelet", "x"])
    assert result.exit_code == 1
    assert "Configuration error" in result.output


def test_add_cancelled_exits_cleanly(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(project_root)
    result = runner.invoke(app, ["add", "restlet", "Api"], input="\nn\n")
    assert result.exit_code == 0
    assert "Cancelled. Script not created." in result.output
    assert not (project_root / "Objects").exists()


def test_add_missing_record_type(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(project_root)
    result = runner.invoke(app, ["add", "userevent", "Hook"], input="\n\n")
    assert result.exit_code == 1
    assert "Record type is required" in result.output


def test_add_input_closed(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(project_root)
    result = runner.invoke(app, ["add", "suitelet"], input="")
    assert result.exit_code == 1


def test_quiet_add_still_prompts(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(project_root)
    result = runner.invoke(app, ["--quiet", "add", "scheduled", "Job"], input="\ny\n")
    assert result.exit_code == 0, result.output
    assert "Enter script description" in result.output
    assert "Created" not in result.output


def test_create_without_suitecloud(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("netsuite_cli.project.shutil.which", lambda name: None)
    result = runner.invoke(app, ["create", "--name", "proj", "--skip-setup"])
    assert result.exit_code == 1
    assert "suitecloud CLI is not available" in result.output


def test_log_file(project_root: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(project_root)
    log_file = tmp_path / "logs" / "cli.log"
    result = runner.invoke(app, ["--log-file", str(log_file), "add", "common", "Types"], input="\ny\n")
    assert result.exit_code == 0, result.output
    assert "Adding common script to project acme-proj" in log_file.read_text()


def test_list_types() -> None:
    result = runner.invoke(app, ["list-types"])
    assert result.exit_code == 0
    for name in ("bundle", "suitelet", "workflowaction", "usereventscript"):
        assert name in result.output


def test_version() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output
