"""Output formatters for license-checker."""

from license_checker.output.scan_json import ScanJsonFormatter
from license_checker.output.terminal import TerminalFormatter

__all__ = [
    "ScanJsonFormatter",
    "TerminalFormatter",
]
