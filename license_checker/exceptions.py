"""Custom exceptions for license-checker."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class LicenseCheckerError(Exception):
    """Base exception for all license-checker errors."""

    pass


class ConfigurationError(LicenseCheckerError):
    """Exception raised when configuration is invalid."""

    pass


class InvalidPatternError(LicenseCheckerError):
    """Exception raised when a regex-shaped string cannot be compiled."""

    pass


class NetworkError(LicenseCheckerError):
    """Exception raised when a network request fails."""

    pass


class LicenseFetchError(NetworkError):
    """Exception raised when a URL license reference cannot be fetched."""

    pass


class InvalidPrependTargetError(LicenseCheckerError):
    """Exception raised when prepending is requested for a regex license.

    A regular expression has no literal text that could be inserted.
    """

    pass


class ScanError(LicenseCheckerError):
    """Exception raised when a scan operation fails."""

    pass


class _PathError(ScanError):
    """Scan error tied to one filesystem path."""

    def __init__(self, path: Path, reason: object = None) -> None:
        self.path = path
        self.reason: Optional[object] = reason
        message = f"{path}: {reason}" if reason is not None else str(path)
        super().__init__(message)


class FileReadError(_PathError):
    """Exception raised when a file cannot be read or decoded."""


class FileWriteError(_PathError):
    """Exception raised when a license cannot be written into a file."""


class TraversalError(_PathError):
    """Exception raised when a directory cannot be listed."""
