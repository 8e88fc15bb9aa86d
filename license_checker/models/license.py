"""License-related Pydantic models."""

from __future__ import annotations

import re
from enum import Enum, IntEnum
from typing import Union

from pydantic import BaseModel, Field

from license_checker.exceptions import InvalidPrependTargetError


class LicenseSource(Enum):
    """Which resolution strategy produced a license."""

    URL = "url"
    REGEX = "regex"
    FILE = "file"
    LITERAL = "literal"


class LicenseStatus(IntEnum):
    """How much of the license was found in a file.

    Ordered so that ``NOT_FOUND < PARTIALLY_FOUND < FOUND``.
    """

    NOT_FOUND = 0
    PARTIALLY_FOUND = 1
    FOUND = 2


class License(BaseModel):
    """A resolved license, ready to be matched against file contents.

    ``value`` holds either the ordered license lines or a compiled regular
    expression. A regex license can only be used for detection.
    """

    model_config = {"extra": "forbid", "frozen": True, "arbitrary_types_allowed": True}

    origin: str = Field(description="Raw reference the license was resolved from")
    value: Union[list[str], re.Pattern[str]] = Field(
        description="License lines, or a regex when the reference was a pattern"
    )
    source: LicenseSource = Field(
        default=LicenseSource.LITERAL,
        description="Resolution strategy that produced this license",
    )

    @property
    def is_regex(self) -> bool:
        """Check if this license is a detection-only regular expression."""
        return isinstance(self.value, re.Pattern)

    @property
    def lines(self) -> list[str]:
        """License lines.

        Raises:
            InvalidPrependTargetError: If the license is a regex.
        """
        if isinstance(self.value, re.Pattern):
            raise InvalidPrependTargetError(
                f"Regex license '{self.origin}' can only be used to search for a license"
            )
        return self.value

    @property
    def text(self) -> str:
        """License lines joined with newlines, as written into files."""
        return "\n".join(self.lines)


class MatchResult(BaseModel):
    """Outcome of checking one file for the license."""

    model_config = {"extra": "forbid", "frozen": True}

    status: LicenseStatus = Field(description="Match status")
    ratio: float = Field(
        ge=0.0,
        le=1.0,
        description="Fraction of license lines found in the file",
    )
    prepended: bool = Field(
        default=False,
        description="Whether the license was written into the file by this check",
    )

    @property
    def percent(self) -> str:
        """Ratio formatted as a percentage with two decimals."""
        return f"{self.ratio * 100:.2f}%"
