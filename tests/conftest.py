"""Shared fixtures for license-checker tests."""

from pathlib import Path
from typing import Callable

import pytest
from click.testing import CliRunner

from license_checker.models.license import License, LicenseSource

HEADER = "Copyright X\nMIT"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def literal_license() -> License:
    """Two-line literal license."""
    return License(origin=HEADER, value=HEADER.split("\n"), source=LicenseSource.LITERAL)


@pytest.fixture
def make_files(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Create files below tmp_path from a mapping of relative path to content."""

    def _make(files: dict[str, str]) -> Path:
        for relative, content in files.items():
            target = tmp_path / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return tmp_path

    return _make
