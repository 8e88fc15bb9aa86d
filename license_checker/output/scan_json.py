"""JSON output formatter for license check results."""
import json
from datetime import datetime, timezone
from typing import Any, Optional

from license_checker import __version__
from license_checker.models.license import License
from license_checker.models.scan import FileCheckResult, ScanSummary


class ScanJsonFormatter:
    """Format a scan summary as JSON output for CI/CD integration."""

    def format_scan_summary(
        self, summary: ScanSummary, license: Optional[License] = None
    ) -> str:
        """Format a scan summary as a JSON string.

        Args:
            summary: The finished scan summary.
            license: The license that was looked for, if it should be reported.

        Returns:
            JSON string representation of the scan.
        """
        output: dict[str, Any] = {
            "scan_metadata": self._build_scan_metadata(summary, license),
            "summary": self._build_summary(summary),
            "files": [self._build_file(entry, summary) for entry in self._sorted(summary)],
        }
        return json.dumps(output, indent=2)

    def _build_scan_metadata(
        self, summary: ScanSummary, license: Optional[License]
    ) -> dict[str, Any]:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        metadata: dict[str, Any] = {
            "generated_at": timestamp,
            "tool_version": __version__,
            "root": str(summary.root),
        }
        if license is not None:
            metadata["license"] = {
                "origin": license.origin,
                "source": license.source.value,
            }
        return metadata

    def _build_summary(self, summary: ScanSummary) -> dict[str, Any]:
        return {
            "total_files": summary.total_files,
            "found": summary.found,
            "partially_found": summary.partially_found,
            "not_found": summary.not_found,
            "prepended": summary.prepended,
            "errors": summary.errors,
            "elapsed_ms": summary.elapsed_ms,
            "has_issues": summary.has_issues,
            "status": "issues_found" if summary.has_issues else "pass",
        }

    def _build_file(self, entry: FileCheckResult, summary: ScanSummary) -> dict[str, Any]:
        item: dict[str, Any] = {
            "path": entry.display_path(summary.root),
            "status": None,
            "ratio": None,
            "prepended": False,
            "error": entry.error,
        }
        if entry.result is not None:
            item["status"] = entry.result.status.name.lower()
            item["ratio"] = entry.result.ratio
            item["prepended"] = entry.result.prepended
        return item

    def _sorted(self, summary: ScanSummary) -> list[FileCheckResult]:
        # Completion order is arbitrary, sort for deterministic reports
        return sorted(summary.files, key=lambda entry: entry.display_path(summary.root))
