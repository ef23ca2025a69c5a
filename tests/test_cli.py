"""Tests for the command line interface."""

from __future__ import annotations

import json
import os

from click.testing import CliRunner

from vsselect.cli import cli
from vsselect.status import STATUS_ICON

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")
SOLUTION_DIR = os.path.join(FIXTURES_DIR, "vs_solution")


class TestScan:
    def test_lists_files(self):
        result = CliRunner().invoke(cli, ["scan", SOLUTION_DIR])

        assert result.exit_code == 0
        assert "App.sln" in result.output
        assert "Lib.vcxproj" in result.output

    def test_no_projects_exits_nonzero(self):
        result = CliRunner().invoke(cli, ["scan", os.path.join(FIXTURES_DIR, "solution_only")])
        assert result.exit_code == 1

    def test_missing_directory(self, tmp_path):
        result = CliRunner().invoke(cli, ["scan", str(tmp_path / "missing")])
        assert result.exit_code == 1


class TestInspect:
    def test_shows_axes(self):
        project = os.path.join(SOLUTION_DIR, "Lib", "Lib.vcxproj")
        result = CliRunner().invoke(cli, ["inspect", project])

        assert result.exit_code == 0
        assert "ARM64, x64" in result.output
        assert "Debug, Release" in result.output

    def test_unreadable_project(self, tmp_path):
        result = CliRunner().invoke(cli, ["inspect", str(tmp_path / "Missing.vcxproj")])
        assert result.exit_code == 1
        assert "Cannot read project" in result.output


class TestSelect:
    def test_writes_selection(self, tmp_path):
        output = tmp_path / "selection.json"
        result = CliRunner().invoke(cli, [
            "select", SOLUTION_DIR,
            "--solution", "App.sln",
            "--project", "App/App.vcxproj",
            "--platform", "x64",
            "--configuration", "Release",
            "-o", str(output),
        ])

        assert result.exit_code == 0, result.output
        data = json.loads(output.read_text())
        assert data["project"].endswith("App.vcxproj")
        assert data["solution"].endswith("App.sln")
        assert data["platform"] == "x64"
        assert data["configuration"] == "Release"

    def test_missing_answer_lists_choices(self, tmp_path):
        result = CliRunner().invoke(cli, [
            "select", SOLUTION_DIR,
            "--solution", "App.sln",
            "--project", "App/App.vcxproj",
            "-o", str(tmp_path / "selection.json"),
        ])

        assert result.exit_code == 2
        assert "--platform" in result.output
        assert not (tmp_path / "selection.json").exists()

    def test_invalid_choice(self, tmp_path):
        result = CliRunner().invoke(cli, [
            "select", os.path.join(FIXTURES_DIR, "projects_only"),
            "--project", "Tool/Tool.vcxproj",
            "--platform", "Win32",
            "-o", str(tmp_path / "selection.json"),
        ])
        assert result.exit_code == 2

    def test_no_projects_halts(self, tmp_path):
        result = CliRunner().invoke(cli, [
            "select", os.path.join(FIXTURES_DIR, "solution_only"),
            "-o", str(tmp_path / "selection.json"),
        ])
        assert result.exit_code == 1
        assert not (tmp_path / "selection.json").exists()


class TestStatusAndClear:
    def test_status_after_select(self, tmp_path):
        output = tmp_path / "selection.json"
        runner = CliRunner()
        runner.invoke(cli, [
            "--quiet", "select", os.path.join(FIXTURES_DIR, "projects_only"),
            "--project", "Tool/Tool.vcxproj",
            "--platform", "x64",
            "--configuration", "Debug",
            "-o", str(output),
        ])

        result = runner.invoke(cli, ["status", "-f", str(output)])

        assert result.exit_code == 0
        assert result.output.strip() == f"{STATUS_ICON} VS[P:Tool|x64|Debug]"

    def test_status_without_selection(self, tmp_path):
        result = CliRunner().invoke(cli, ["status", "-f", str(tmp_path / "none.json")])
        assert result.exit_code == 0
        assert result.output.strip() == ""

    def test_clear_removes_file(self, tmp_path):
        output = tmp_path / "selection.json"
        output.write_text("{}")

        result = CliRunner().invoke(cli, ["clear", "-f", str(output)])

        assert result.exit_code == 0
        assert not output.exists()

    def test_status_with_corrupt_file(self, tmp_path):
        selection_file = tmp_path / "selection.json"
        selection_file.write_text("{not json")

        result = CliRunner().invoke(cli, ["status", "-f", str(selection_file)])

        assert result.exit_code == 1
        assert not isinstance(result.exception, ValueError)
        assert "Cannot read selection file" in result.output

    def test_status_with_non_object_file(self, tmp_path):
        selection_file = tmp_path / "selection.json"
        selection_file.write_text('["x64", "Debug"]')

        result = CliRunner().invoke(cli, ["status", "-f", str(selection_file)])

        assert result.exit_code == 1
        assert "does not hold a JSON object" in result.output


class TestVerbose:
    def test_select_shows_resolved_selection(self, tmp_path):
        result = CliRunner().invoke(cli, [
            "--verbose", "select", os.path.join(FIXTURES_DIR, "projects_only"),
            "--project", "Tool/Tool.vcxproj",
            "--platform", "x64",
            "--configuration", "Debug",
            "-o", str(tmp_path / "selection.json"),
        ])

        assert result.exit_code == 0, result.output
        assert "Resolved Selection" in result.output
        assert "configuration" in result.output

    def test_select_without_verbose_omits_details(self, tmp_path):
        result = CliRunner().invoke(cli, [
            "select", os.path.join(FIXTURES_DIR, "projects_only"),
            "--project", "Tool/Tool.vcxproj",
            "--platform", "x64",
            "--configuration", "Debug",
            "-o", str(tmp_path / "selection.json"),
        ])

        assert result.exit_code == 0
        assert "Resolved Selection" not in result.output
