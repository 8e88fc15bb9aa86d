"""Scan-related Pydantic models."""

from __future__ import annotations

import re
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, computed_field

from license_checker.constants import DEFAULT_DIR_PATTERN
from license_checker.models.license import License, LicenseStatus, MatchResult


class Verbosity(Enum):
    """Output verbosity levels."""

    QUIET = "quiet"
    NORMAL = "normal"
    VERBOSE = "verbose"


class PrependPolicy(Enum):
    """When a missing license should be written into a file."""

    NEVER = "never"
    IF_FULLY_MISSING = "missing"
    IF_PARTIAL_OR_FULLY_MISSING = "partial"


class ScanRequest(BaseModel):
    """Everything needed to run one scan."""

    model_config = {"extra": "forbid", "frozen": True, "arbitrary_types_allowed": True}

    root: Path = Field(description="Directory the scan starts from")
    file_include: re.Pattern[str] = Field(description="Pattern file names must match")
    file_exclude: Optional[re.Pattern[str]] = Field(
        default=None, description="Pattern file names must not match"
    )
    dir_include: re.Pattern[str] = Field(
        default_factory=lambda: re.compile(DEFAULT_DIR_PATTERN),
        description="Pattern directory names must match to be entered",
    )
    dir_exclude: Optional[re.Pattern[str]] = Field(
        default=None, description="Pattern directory names must not match"
    )
    license: License = Field(description="Resolved license to look for")
    prepend: PrependPolicy = Field(
        default=PrependPolicy.NEVER,
        description="When to write the license into files missing it",
    )
    log: bool = Field(default=True, description="Whether per-file results are shown")
    max_concurrency: Optional[int] = Field(
        default=None,
        ge=1,
        description="Maximum files processed at once (None for unbounded)",
    )


class FileCheckResult(BaseModel):
    """Result of checking a single file.

    ``result`` is missing when the file could not be read. When the license
    could not be written, both ``result`` (with ``prepended`` False) and
    ``error`` are set.
    """

    model_config = {"extra": "forbid", "frozen": True}

    path: Path = Field(description="Checked file (or directory for traversal errors)")
    result: Optional[MatchResult] = Field(default=None, description="Match outcome")
    error: Optional[str] = Field(
        default=None, description="Why the file could not be checked"
    )

    @property
    def is_error(self) -> bool:
        """Check if reading, writing or listing this path failed."""
        return self.error is not None

    def display_path(self, root: Path) -> str:
        """Path relative to ``root`` when it lies below it, else as is."""
        try:
            return self.path.relative_to(root.absolute()).as_posix()
        except ValueError:
            return str(self.path)


class ScanSummary(BaseModel):
    """Aggregate outcome of a scan."""

    model_config = {"extra": "forbid"}

    root: Path = Field(description="Directory the scan started from")
    found: int = Field(default=0, description="Files containing the full license")
    partially_found: int = Field(
        default=0, description="Files containing some license lines"
    )
    not_found: int = Field(default=0, description="Files without any license line")
    prepended: int = Field(default=0, description="Files the license was written into")
    errors: int = Field(default=0, description="Files or directories that failed")
    elapsed_ms: int = Field(default=0, description="Wall-clock scan duration")
    files: list[FileCheckResult] = Field(
        default_factory=list,
        description="Per-file results in completion order",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_files(self) -> int:
        """Number of files whose check completed."""
        return self.found + self.partially_found + self.not_found

    @property
    def has_issues(self) -> bool:
        """Check if any file still lacks the license or failed.

        Files that had the license prepended during this scan are not issues.
        """
        missing = self.partially_found + self.not_found - self.prepended
        return missing > 0 or self.errors > 0

    def count(self, status: LicenseStatus) -> int:
        """Return the number of files with the given status."""
        if status is LicenseStatus.FOUND:
            return self.found
        if status is LicenseStatus.PARTIALLY_FOUND:
            return self.partially_found
        return self.not_found

    def record(self, entry: FileCheckResult) -> None:
        """Add one file result to the counters.

        Must only be called from the event loop thread.
        """
        self.files.append(entry)
        if entry.error is not None:
            self.errors += 1
        if entry.result is None:
            return

        if entry.result.status is LicenseStatus.FOUND:
            self.found += 1
        elif entry.result.status is LicenseStatus.PARTIALLY_FOUND:
            self.partially_found += 1
        else:
            self.not_found += 1

        if entry.result.prepended:
            self.prepended += 1
