"""Tests for the Typer CLI, with network adapters replaced by fakes."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from rules_doctor.bootstrap import Container
from rules_doctor.presentation.cli.app import app

from conftest import FakeDiscovery, FakeFetcher

runner = CliRunner()

_CONFIG = {
    "repositories": {"enabled": True, "list": ["acme/widgets"]},
    "checks": [
        {"name": "has-license", "file": "LICENSE", "pattern": ".*"},
        {"name": "no-todo", "file": "README.md", "pattern": "!TODO", "requires": [{"check": "has-license"}]},
    ],
}


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(_CONFIG), encoding="utf-8")
    return path


def _patched_container(fetcher: FakeFetcher):
    def factory(config_path=None):
        return Container(config_path, fetcher=fetcher, discovery=FakeDiscovery())

    return patch("rules_doctor.bootstrap.Container", side_effect=factory)


class TestRunCommand:
    def test_all_pass_exit_zero(self, config_file, tmp_path):
        fetcher = FakeFetcher(
            {("acme/widgets", "LICENSE"): "MIT", ("acme/widgets", "README.md"): "done"}
        )
        report = tmp_path / "report.md"

        with _patched_container(fetcher):
            result = runner.invoke(app, ["run", "--config", str(config_file), "--report", str(report)])

        assert result.exit_code == 0, result.output
        assert "All checks passed" in report.read_text(encoding="utf-8")

    def test_failure_exit_one(self, config_file, tmp_path):
        fetcher = FakeFetcher({("acme/widgets", "README.md"): "TODO"})
        report = tmp_path / "report.md"

        with _patched_container(fetcher):
            result = runner.invoke(app, ["run", "--config", str(config_file), "--report", str(report)])

        assert result.exit_code == 1
        text = report.read_text(encoding="utf-8")
        assert "### 🔍 no-todo" in text
        assert "Fix first: [`has-license`](#-has-license)" in text

    def test_single_check(self, config_file, tmp_path):
        fetcher = FakeFetcher({("acme/widgets", "LICENSE"): "MIT"})

        with _patched_container(fetcher):
            result = runner.invoke(
                app,
                ["run", "has-license", "--config", str(config_file), "--report", str(tmp_path / "r.md")],
            )

        assert result.exit_code == 0, result.output
        assert fetcher.calls == [("acme/widgets", "LICENSE")]

    def test_unknown_check_fails_before_fetching(self, config_file, tmp_path):
        fetcher = FakeFetcher()

        with _patched_container(fetcher):
            result = runner.invoke(
                app, ["run", "nope", "--config", str(config_file), "--report", str(tmp_path / "r.md")]
            )

        assert result.exit_code == 1
        assert "No check found with name 'nope'" in result.output
        assert fetcher.calls == []
        assert not (tmp_path / "r.md").exists()

    def test_config_without_checks_fails(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(
            json.dumps({"repositories": {"enabled": True, "list": ["acme/widgets"]}}), encoding="utf-8"
        )
        fetcher = FakeFetcher()

        with _patched_container(fetcher):
            result = runner.invoke(
                app, ["run", "--config", str(path), "--report", str(tmp_path / "r.md")]
            )

        assert result.exit_code == 1
        assert "Invalid config" in result.output
        assert fetcher.calls == []
        assert not (tmp_path / "r.md").exists()

    def test_unwritable_report_is_reported(self, config_file, tmp_path):
        fetcher = FakeFetcher(
            {("acme/widgets", "LICENSE"): "MIT", ("acme/widgets", "README.md"): "done"}
        )
        report = tmp_path / "missing-dir" / "report.md"

        with _patched_container(fetcher):
            result = runner.invoke(app, ["run", "--config", str(config_file), "--report", str(report)])

        assert result.exit_code == 1
        assert not isinstance(result.exception, OSError)
        assert "Could not write report" in result.output

    def test_missing_config(self, tmp_path):
        with _patched_container(FakeFetcher()):
            result = runner.invoke(app, ["run", "--config", str(tmp_path / "missing.json")])

        assert result.exit_code == 1
        assert "Config file not found" in result.output


class TestValidateCommand:
    def test_valid(self, config_file):
        result = runner.invoke(app, ["validate", str(config_file)])
        assert result.exit_code == 0, result.output
        assert "Configuration valid" in result.output

    def test_invalid(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"checks": [{"name": "a"}]}), encoding="utf-8")

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Invalid config" in result.output
