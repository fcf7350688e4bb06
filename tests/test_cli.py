"""Tests for the Typer CLI."""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest
from typer.testing import CliRunner

from court_docs.bootstrap import DATA_DIR_ENV
from court_docs.presentation.cli.app import app

runner = CliRunner()

CASE_FILE = {
    "case": {
        "case_number": "CASE/2024-001",
        "parties": [
            {"name": "Jane Doe", "designation": "Applicant"},
            {"name": "John Roe", "designation": "Respondent"},
        ],
    },
    "document": {
        "kind": "witness-statement",
        "witness_name": "Jane Doe",
        "paragraphs": ["I live in Leeds."],
    },
}


@pytest.fixture(autouse=True)
def data_dir(tmp_path: Path, monkeypatch) -> Path:
    path = tmp_path / "data"
    monkeypatch.setenv(DATA_DIR_ENV, str(path))
    return path


@pytest.fixture()
def case_file(tmp_path: Path) -> Path:
    path = tmp_path / "case.json"
    path.write_text(json.dumps(CASE_FILE), encoding="utf-8")
    return path


@pytest.fixture()
def logged_in():
    result = runner.invoke(
        app,
        ["auth", "register", "--email", "jane@example.com", "--password", "secret1", "--confirm", "secret1"],
    )
    assert result.exit_code == 0, result.output


class TestAuthCommands:
    def test_whoami_logged_out(self):
        result = runner.invoke(app, ["auth", "whoami"])
        assert result.exit_code == 1
        assert "Not logged in" in result.output

    def test_register_whoami_logout(self, logged_in):
        assert "jane@example.com" in runner.invoke(app, ["auth", "whoami"]).output
        assert runner.invoke(app, ["auth", "logout"]).exit_code == 0
        assert runner.invoke(app, ["auth", "whoami"]).exit_code == 1

    def test_register_mismatch(self):
        result = runner.invoke(
            app,
            ["auth", "register", "-e", "jane@example.com", "--password", "secret1", "--confirm", "secret2"],
        )
        assert result.exit_code == 1
        assert "Passwords do not match" in result.output

    def test_login_prompts(self, logged_in):
        runner.invoke(app, ["auth", "logout"])
        result = runner.invoke(app, ["auth", "login"], input="jane@example.com\nsecret1\n")
        assert result.exit_code == 0, result.output
        assert "Logged in" in result.output

    def test_login_wrong_password(self, logged_in):
        result = runner.invoke(app, ["auth", "login", "-e", "jane@example.com", "--password", "nope123"])
        assert result.exit_code == 1
        assert "Incorrect password" in result.output


class TestDocumentCommandsRequireLogin:
    @pytest.mark.parametrize("command", [["export"], ["preview"]])
    def test_refused(self, case_file, command):
        result = runner.invoke(app, [*command, str(case_file)])
        assert result.exit_code == 1
        assert "Please log in first" in result.output

    def test_corrupt_account_store(self, data_dir, case_file):
        data_dir.mkdir(parents=True)
        (data_dir / "accounts.json").write_text("{not json", encoding="utf-8")
        result = runner.invoke(app, ["export", str(case_file)])
        assert result.exit_code == 1
        assert "Please log in first" in result.output
        whoami = runner.invoke(app, ["auth", "whoami"])
        assert whoami.exit_code == 1
        assert "Not logged in" in whoami.output

    def test_wizard_refused(self):
        result = runner.invoke(app, ["wizard"])
        assert result.exit_code == 1
        assert "Please log in first" in result.output


class TestExport:
    def test_all_formats(self, logged_in, case_file, tmp_path):
        out = tmp_path / "out"
        result = runner.invoke(
            app, ["export", str(case_file), "--output-dir", str(out), "--date", "2025-06-03"]
        )
        assert result.exit_code == 0, result.output
        assert (out / "Witness_Statement_Jane_Doe_2025-06-03.docx").exists()
        assert (out / "Witness_Statement_Jane_Doe_2025-06-03.pdf").exists()

    def test_single_format(self, logged_in, case_file, tmp_path):
        out = tmp_path / "out"
        result = runner.invoke(
            app, ["export", str(case_file), "-f", "pdf", "-o", str(out), "--prepared-by", "A. Solicitor"]
        )
        assert result.exit_code == 0, result.output
        assert [p.suffix for p in out.iterdir()] == [".pdf"]

    def test_unknown_format(self, logged_in, case_file):
        result = runner.invoke(app, ["export", str(case_file), "--format", "odt"])
        assert result.exit_code == 1
        assert "Unknown format" in result.output

    def test_bad_date(self, logged_in, case_file):
        result = runner.invoke(app, ["export", str(case_file), "--date", "03/06/2025"])
        assert result.exit_code == 1
        assert "Invalid date" in result.output

    def test_invalid_case_file(self, logged_in, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({**CASE_FILE, "case": {"case_number": "", "parties": []}}))
        result = runner.invoke(app, ["export", str(bad)])
        assert result.exit_code == 1
        assert "Please enter a case number" in result.output


class TestPreview:
    def test_writes_html(self, logged_in, case_file):
        result = runner.invoke(app, ["preview", str(case_file)])
        assert result.exit_code == 0, result.output
        html = case_file.with_suffix(".html").read_text(encoding="utf-8")
        assert html.startswith("<!DOCTYPE html>")
        assert "WITNESS STATEMENT OF JANE DOE" in html

    def test_custom_output(self, logged_in, case_file, tmp_path):
        target = tmp_path / "nested.html"
        assert runner.invoke(app, ["preview", str(case_file), "-o", str(target)]).exit_code == 0
        assert target.exists()


class TestWizard:
    def test_draft_order_with_retry(self, logged_in, tmp_path):
        out = tmp_path / "wizard"
        answers = [
            "4",  # Draft Order
            # first attempt: no case number
            "", "", "", "", "n", "",
            # second attempt
            "CASE/1",
            "THE FAMILY COURT", "",
            "", "",
            "n",
            "Jane Doe", "", "n",
            "John Roe", "", "n",
            "",
            # draft order
            "1",
            "DJ Smith",
            "UPON hearing the parties", "",
            "Contact every Saturday", "",
            "",
            "",
            # prepared by
            "",
        ]
        result = runner.invoke(
            app,
            ["wizard", "--format", "docx", "--output-dir", str(out)],
            input="\n".join(answers) + "\n",
        )
        assert result.exit_code == 0, result.output
        assert "Please enter a case number" in result.output

        html = (out / "preview.html").read_text(encoding="utf-8")
        assert "IT IS ORDERED THAT:" in html
        assert "JANE DOE" in html
        assert "- and -" in html
        assert (out / f"Draft_Order_CASE_1_{date.today().isoformat()}.docx").exists()


class TestConfigCommands:
    def test_show(self):
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "Century Gothic" in result.output

    def test_init_and_validate(self, tmp_path):
        dest = tmp_path / "my_config.json"
        assert runner.invoke(app, ["config", "init", "-o", str(dest)]).exit_code == 0
        result = runner.invoke(app, ["config", "validate", str(dest)])
        assert result.exit_code == 0
        assert "Valid configuration" in result.output

    def test_validate_invalid(self, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"pdf": {"line_height_mm": -1}}))
        result = runner.invoke(app, ["config", "validate", str(bad)])
        assert result.exit_code == 1

    def test_validate_missing(self, tmp_path):
        result = runner.invoke(app, ["config", "validate", str(tmp_path / "nope.json")])
        assert result.exit_code == 1
