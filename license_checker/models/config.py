"""Configuration Pydantic models for license-checker."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from license_checker.models.scan import PrependPolicy


class CheckerConfig(BaseModel):
    """Configuration for license-checker.

    All fields are optional with None defaults to allow partial configuration.
    Command line options take precedence over values set here.
    """

    model_config = {"extra": "forbid"}

    license: Optional[str] = Field(
        default=None,
        description="License reference: file path, text, /regex/flags or URL.",
    )
    exclude_files: Optional[str] = Field(
        default=None,
        description="Pattern file names must not match.",
    )
    exclude_dirs: Optional[str] = Field(
        default=None,
        description="Pattern directory names must not match.",
    )
    dir_pattern: Optional[str] = Field(
        default=None,
        description="Pattern directory names must match to be entered.",
    )
    prepend: Optional[PrependPolicy] = Field(
        default=None,
        description="When to prepend the license (never, missing, partial).",
    )
    normalize_newlines: Optional[bool] = Field(
        default=None,
        description="Convert literal '\\n' sequences in the license to newlines.",
    )
    max_concurrency: Optional[int] = Field(
        default=None,
        ge=1,
        description="Maximum number of files processed at once.",
    )
