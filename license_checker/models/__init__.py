"""Pydantic data models for license-checker."""

from license_checker.models.config import CheckerConfig
from license_checker.models.license import (
    License,
    LicenseSource,
    LicenseStatus,
    MatchResult,
)
from license_checker.models.scan import (
    FileCheckResult,
    PrependPolicy,
    ScanRequest,
    ScanSummary,
    Verbosity,
)

__all__ = [
    "CheckerConfig",
    "FileCheckResult",
    "License",
    "LicenseSource",
    "LicenseStatus",
    "MatchResult",
    "PrependPolicy",
    "ScanRequest",
    "ScanSummary",
    "Verbosity",
]
