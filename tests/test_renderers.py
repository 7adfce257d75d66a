"""Tests for the markdown report renderer."""

from __future__ import annotations

from datetime import datetime, timezone

from rules_doctor.application.use_cases import AggregateResultsUseCase, RunChecksUseCase
from rules_doctor.domain.models.check import RequiresEntry
from rules_doctor.infrastructure.renderers import MarkdownRenderer

from conftest import FakeFetcher, make_check

_FIXED = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def _report(files, repositories, checks):
    results = RunChecksUseCase(FakeFetcher(files)).execute(repositories, checks)
    return AggregateResultsUseCase().execute(results)


def _renderer() -> MarkdownRenderer:
    return MarkdownRenderer(clock=lambda: _FIXED)


class TestMarkdownRenderer:
    def test_all_passed(self):
        report = _report({("acme/widgets", "LICENSE"): "MIT"}, ["acme/widgets"], [make_check("lic", file="LICENSE")])

        text = _renderer().render(report)

        assert text == (
            "# Rules Doctor Report\n\n"
            "Generated: 2026-01-02T03:04:05+00:00\n\n"
            "## ✅ All checks passed!"
        )

    def test_failure_table(self):
        checks = [
            make_check("A", pattern="never"),
            make_check(
                "B",
                pattern="x|y",
                requires=[RequiresEntry(check="A")],
                reference_example="https://example.com/good",
            ),
        ]
        report = _report({("acme/widgets", "README.md"): "zzz"}, ["acme/widgets"], checks)

        text = _renderer().render(report)

        assert "- ❌ **Failed checks:** 2" in text
        assert "- ✅ **Passed checks:** 0" in text
        assert "### 🔍 A" in text
        assert "| Repository | File | Status | Reference |" in text
        assert (
            "| [acme/widgets](https://github.com/acme/widgets) "
            "| [README.md](https://github.com/acme/widgets/blob/main/README.md) "
            "| 🔍 Pattern `x\\|y` not found ⚠️ Fix first: [`A`](#-A) "
            "| [Example](https://example.com/good) |"
        ) in text
        assert text.index("### 🔍 A") < text.index("### 🔍 B")

    def test_not_found_status(self):
        report = _report({}, ["acme/empty"], [make_check("lic", file="LICENSE")])
        assert "🤷‍♂️ File not found" in _renderer().render(report)

    def test_output_is_stable(self):
        checks = [make_check("z", pattern="never"), make_check("a", pattern="never")]
        files = {(r, "README.md"): "" for r in ("b/b", "a/a")}

        first = _renderer().render(_report(files, ["b/b", "a/a"], checks))
        second = _renderer().render(_report(files, ["a/a", "b/b"], list(reversed(checks))))

        assert first == second

    def test_write(self, tmp_path):
        report = _report({}, ["acme/empty"], [make_check("lic", file="LICENSE")])

        path = _renderer().write(report, tmp_path / "report.md")

        assert path.read_text(encoding="utf-8").startswith("# Rules Doctor Report")
