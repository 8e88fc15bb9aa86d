"""Tests for custom exceptions."""
from pathlib import Path

import pytest

from license_checker.exceptions import (
    ConfigurationError,
    FileReadError,
    FileWriteError,
    InvalidPatternError,
    InvalidPrependTargetError,
    LicenseCheckerError,
    LicenseFetchError,
    NetworkError,
    ScanError,
    TraversalError,
)


class TestExceptionHierarchy:
    """Tests for exception hierarchy."""

    @pytest.mark.parametrize(
        "exc_type",
        [
            ConfigurationError,
            InvalidPatternError,
            NetworkError,
            LicenseFetchError,
            InvalidPrependTargetError,
            ScanError,
            FileReadError,
            FileWriteError,
            TraversalError,
        ],
    )
    def test_inherits_from_base(self, exc_type: type) -> None:
        """Test that every error can be caught by LicenseCheckerError."""
        assert issubclass(exc_type, LicenseCheckerError)

    def test_fetch_error_is_network_error(self) -> None:
        """Test that LicenseFetchError is a NetworkError."""
        assert issubclass(LicenseFetchError, NetworkError)

    @pytest.mark.parametrize("exc_type", [FileReadError, FileWriteError, TraversalError])
    def test_path_errors_are_scan_errors(self, exc_type: type) -> None:
        """Test that per-path errors are ScanErrors."""
        assert issubclass(exc_type, ScanError)

    def test_path_error_keeps_path_and_reason(self) -> None:
        """Test that path errors expose the path and the underlying reason."""
        reason = PermissionError("denied")
        error = FileWriteError(Path("src/a.py"), reason)

        assert error.path == Path("src/a.py")
        assert error.reason is reason
        assert str(error) == f"{Path('src/a.py')}: denied"

    def test_path_error_without_reason(self) -> None:
        """Test that the message is the path when no reason is given."""
        error = TraversalError(Path("locked"))

        assert str(error) == "locked"
        assert error.reason is None

    def test_message_is_preserved(self) -> None:
        """Test that plain errors keep their message."""
        with pytest.raises(LicenseCheckerError, match="HTTP 404"):
            raise LicenseFetchError("HTTP 404")
