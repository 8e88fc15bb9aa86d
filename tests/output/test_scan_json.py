"""Tests for JSON output formatter."""
import json
import re
from pathlib import Path

from license_checker import __version__
from license_checker.models.license import License, LicenseSource, LicenseStatus, MatchResult
from license_checker.models.scan import FileCheckResult, ScanSummary
from license_checker.output.scan_json import ScanJsonFormatter

ROOT = Path("/project")


def _summary() -> ScanSummary:
    summary = ScanSummary(root=ROOT, elapsed_ms=7)
    summary.record(
        FileCheckResult(
            path=ROOT / "src/b.ts",
            result=MatchResult(status=LicenseStatus.PARTIALLY_FOUND, ratio=0.5),
        )
    )
    summary.record(
        FileCheckResult(
            path=ROOT / "a.ts",
            result=MatchResult(status=LicenseStatus.NOT_FOUND, ratio=0.0, prepended=True),
        )
    )
    summary.record(FileCheckResult(path=ROOT / "c.ts", error="could not read file: boom"))
    return summary


class TestScanJsonFormatter:
    """Tests for ScanJsonFormatter class."""

    def test_metadata(self, literal_license: License) -> None:
        """Test generation metadata and license description."""
        data = json.loads(ScanJsonFormatter().format_scan_summary(_summary(), literal_license))

        metadata = data["scan_metadata"]
        assert metadata["tool_version"] == __version__
        assert metadata["root"] == "/project"
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z", metadata["generated_at"])
        assert metadata["license"] == {"origin": "Copyright X\nMIT", "source": "literal"}

    def test_metadata_without_license(self) -> None:
        """Test that the license block is optional."""
        data = json.loads(ScanJsonFormatter().format_scan_summary(_summary()))

        assert "license" not in data["scan_metadata"]

    def test_summary_counts(self) -> None:
        """Test the aggregate section."""
        data = json.loads(ScanJsonFormatter().format_scan_summary(_summary()))

        assert data["summary"] == {
            "total_files": 2,
            "found": 0,
            "partially_found": 1,
            "not_found": 1,
            "prepended": 1,
            "errors": 1,
            "elapsed_ms": 7,
            "has_issues": True,
            "status": "issues_found",
        }

    def test_files_sorted_by_path(self) -> None:
        """Test that file entries are sorted and relative to the root."""
        data = json.loads(ScanJsonFormatter().format_scan_summary(_summary()))

        assert data["files"] == [
            {
                "path": "a.ts",
                "status": "not_found",
                "ratio": 0.0,
                "prepended": True,
                "error": None,
            },
            {
                "path": "c.ts",
                "status": None,
                "ratio": None,
                "prepended": False,
                "error": "could not read file: boom",
            },
            {
                "path": "src/b.ts",
                "status": "partially_found",
                "ratio": 0.5,
                "prepended": False,
                "error": None,
            },
        ]

    def test_pass_status(self) -> None:
        """Test the status of a clean scan."""
        summary = ScanSummary(root=ROOT, found=1)

        data = json.loads(ScanJsonFormatter().format_scan_summary(summary))

        assert data["summary"]["status"] == "pass"
        assert data["summary"]["has_issues"] is False
        assert data["files"] == []
