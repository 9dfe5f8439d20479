"""Tests for the update report."""

import json
from datetime import datetime

import pytest
from rich.console import Console

from zohodocs.errors import ReportError
from zohodocs.report import UpdateReport, report_filename
from zohodocs.types import CheckResult, ComparisonResult, LocalSignals, RemoteSignals

GENERATED_AT = datetime(2025, 3, 14, 9, 30, 0)


def _results():
    return [
        CheckResult(
            product="crm",
            url="https://docs.test/crm/",
            status="checked",
            remote=RemoteSignals(version="8", content_length=100),
            local=LocalSignals(exists=True, version="7"),
            comparison=ComparisonResult(needs_update=True, reason="version-mismatch"),
        ),
        CheckResult(
            product="books",
            url="https://docs.test/books/",
            status="checked",
            remote=RemoteSignals(version="3"),
            local=LocalSignals(exists=True, version="3", last_updated="January 2025"),
            comparison=ComparisonResult(needs_update=False),
        ),
        CheckResult(
            product="desk",
            url="https://docs.test/desk/",
            status="inaccessible",
            http_status=403,
        ),
        CheckResult(
            product="sign",
            url="https://docs.test/sign/",
            status="error",
            error="Timeout 30000ms exceeded",
        ),
    ]


class TestSummary:
    """Tests for UpdateReport.from_results."""

    def test_counts(self):
        """Test the summary counts."""
        report = UpdateReport.from_results(_results(), generated_at=GENERATED_AT)

        assert report.summary == {"total": 4, "up_to_date": 1, "needs_update": 1, "errors": 2}
        assert [r.product for r in report.needs_update] == ["crm"]
        assert [r.product for r in report.up_to_date] == ["books"]
        assert [r.product for r in report.failures] == ["desk", "sign"]

    def test_empty_results(self):
        """Test a report with nothing checked."""
        report = UpdateReport.from_results([], generated_at=GENERATED_AT)

        assert report.summary["total"] == 0
        assert "All documentation appears to be up to date" in report.render_markdown()


class TestRenderMarkdown:
    """Tests for UpdateReport.render_markdown."""

    def test_sections(self):
        """Test that every section is present with its items."""
        body = UpdateReport.from_results(_results(), generated_at=GENERATED_AT).render_markdown()

        assert body.startswith("# Zoho Documentation Update Report\n")
        assert "**Generated**: 2025-03-14 09:30:00" in body
        assert "**Products Checked**: 4" in body
        assert "- ⚠️  **Needs Update**: 1" in body
        assert "### crm" in body
        assert "**Reason**: Version mismatch: Remote v8 vs Local v7" in body
        assert "**Remote URL**: https://docs.test/crm/" in body
        assert "**Local File**: `zoho-docs/api-reference/crm/README.md`" in body
        assert "- ✅ **books**: v3 (January 2025)" in body
        assert "- ❌ **desk**: inaccessible (HTTP 403)" in body
        assert "- ❌ **sign**: Timeout 30000ms exceeded" in body
        assert "  - URL: https://docs.test/sign/" in body
        assert "`zoho-docs check crm`" in body

    def test_missing_reason_text(self):
        """Test the text for a missing local file."""
        result = CheckResult(
            product="mail",
            url="https://docs.test/mail/",
            status="checked",
            remote=RemoteSignals(),
            local=LocalSignals(exists=False),
            comparison=ComparisonResult(needs_update=True, reason="missing"),
        )

        body = UpdateReport.from_results([result], generated_at=GENERATED_AT).render_markdown()

        assert "**Reason**: Local documentation file does not exist" in body
        assert "Local Version" not in body

    def test_identical_apart_from_timestamp(self):
        """Test that rendering is deterministic except for the timestamp line."""
        results = _results()
        first = UpdateReport.from_results(results, generated_at=GENERATED_AT).render_markdown()
        again = UpdateReport.from_results(results, generated_at=GENERATED_AT).render_markdown()
        later = UpdateReport.from_results(
            results, generated_at=datetime(2025, 3, 14, 18, 0, 0)
        ).render_markdown()

        assert first == again

        def strip(body):
            return [line for line in body.splitlines() if not line.startswith("**Generated**")]

        assert strip(first) == strip(later)
        assert first != later


class TestSave:
    """Tests for writing reports to disk."""

    def test_report_filename(self):
        """Test that the filename carries the date."""
        assert report_filename(GENERATED_AT) == "update-report-2025-03-14.md"
        assert report_filename(GENERATED_AT, ".json") == "update-report-2025-03-14.json"

    def test_save_markdown(self, tmp_path):
        """Test writing the markdown report, creating the directory."""
        report = UpdateReport.from_results(_results(), generated_at=GENERATED_AT)

        path = report.save(tmp_path / "out")

        assert path == tmp_path / "out" / "update-report-2025-03-14.md"
        assert path.read_text(encoding="utf-8") == report.render_markdown()

    def test_save_json(self, tmp_path):
        """Test writing the JSON report."""
        report = UpdateReport.from_results(_results(), generated_at=GENERATED_AT)

        path = report.save_json(tmp_path)
        data = json.loads(path.read_text(encoding="utf-8"))

        assert data["summary"]["needs_update"] == 1
        assert data["results"][0]["product"] == "crm"
        assert data["results"][0]["reason"] == "version-mismatch"
        assert data["results"][2]["http_status"] == 403

    def test_save_failure_raises_report_error(self, tmp_path):
        """Test that an unwritable destination raises ReportError."""
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")
        report = UpdateReport.from_results(_results(), generated_at=GENERATED_AT)

        with pytest.raises(ReportError):
            report.save(blocker / "nested")


class TestPrintSummary:
    """Tests for the console summary."""

    def test_print_summary(self):
        """Test that the summary lists stale products."""
        console = Console(record=True, width=120)
        report = UpdateReport.from_results(_results(), generated_at=GENERATED_AT)

        report.print_summary(console)
        output = console.export_text()

        assert "Update Summary" in output
        assert "crm: Version mismatch: Remote v8 vs Local v7" in output
