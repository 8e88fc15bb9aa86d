"""CLI entry point for license-checker."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from license_checker import __version__
from license_checker.config import CheckerConfig, load_config
from license_checker.constants import (
    DEFAULT_DIR_PATTERN,
    EXIT_ERROR,
    EXIT_ISSUES,
    EXIT_SUCCESS,
)
from license_checker.exceptions import ConfigurationError, LicenseCheckerError
from license_checker.models.license import License
from license_checker.models.scan import (
    FileCheckResult,
    PrependPolicy,
    ScanRequest,
    ScanSummary,
    Verbosity,
)
from license_checker.output.scan_json import ScanJsonFormatter
from license_checker.output.terminal import TerminalFormatter
from license_checker.patterns import compile_filter
from license_checker.resolvers import resolve_license
from license_checker.scanner import run_scan

# Module-level console for consistent output
_console = Console()
# Separate console for error output (writes to stderr)
_error_console = Console(stderr=True)

_LOG_LEVELS = {
    Verbosity.QUIET: logging.ERROR,
    Verbosity.NORMAL: logging.WARNING,
    Verbosity.VERBOSE: logging.DEBUG,
}


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """License Checker - Find and prepend license headers in source files.

    Checks every matching file below a directory for a license header,
    reports whether it was found, partially found or not found, and can
    insert the header into files missing it.

    \b
    Examples:
        license-checker check src '\\.py$' --license LICENSE_HEADER
        license-checker check . '/\\.(ts|js)$/' -l '/Copyright \\d{4}/'
        license-checker check src '\\.py$' -l header.txt --prepend missing
    """
    pass


@main.command()
@click.argument("path", type=click.Path(file_okay=False, path_type=Path))
@click.argument("file_pattern")
@click.argument("dir_pattern", required=False, default=None)
@click.option(
    "--license",
    "-l",
    "license_reference",
    default=None,
    help="License to look for: file path, text, /regex/flags or URL.",
)
@click.option(
    "--prepend",
    "-p",
    "prepend",
    type=click.Choice([policy.value for policy in PrependPolicy], case_sensitive=False),
    default=None,
    help="Prepend the license to files where it is missing "
    "(never, missing, partial; default: never).",
)
@click.option(
    "--exclude-files",
    "exclude_files",
    default=None,
    help="Pattern file names must not match.",
)
@click.option(
    "--exclude-dirs",
    "exclude_dirs",
    default=None,
    help="Pattern directory names must not match.",
)
@click.option(
    "--normalize-newlines",
    "-n",
    "normalize_newlines",
    is_flag=True,
    default=False,
    help="Convert literal \\n sequences in the license to newlines.",
)
@click.option(
    "--max-concurrency",
    "-j",
    "max_concurrency",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum number of files processed at once (default: unlimited).",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["terminal", "json"], case_sensitive=False),
    default="terminal",
    help="Output format for check results (default: terminal).",
)
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Also write the JSON report to this file.",
)
@click.option(
    "--verbose",
    "-v",
    "verbose_flag",
    is_flag=True,
    default=False,
    help="Show debug logging.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_flag",
    is_flag=True,
    default=False,
    help="Print only errors and the final status line.",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to configuration file.",
)
def check(
    path: Path,
    file_pattern: str,
    dir_pattern: Optional[str],
    license_reference: Optional[str],
    prepend: Optional[str],
    exclude_files: Optional[str],
    exclude_dirs: Optional[str],
    normalize_newlines: bool,
    max_concurrency: Optional[int],
    output_format: str,
    output_path: Optional[str],
    verbose_flag: bool,
    quiet_flag: bool,
    config_path: Optional[str],
) -> None:
    """Check files below PATH whose names match FILE_PATTERN for a license.

    Directories are entered when their name matches DIR_PATTERN
    (default: everything except node_modules). Patterns are regular
    expressions, optionally written as /pattern/flags.

    \b
    Examples:
        license-checker check src '\\.py$' --license LICENSE_HEADER
        license-checker check src '\\.py$' -l 'Copyright 2021 Example' -q
        license-checker check . '\\.ts$' -l https://example.com/header.txt
        license-checker check . '\\.ts$' '^(?!dist).+' -l header.txt -p partial
        license-checker check . '\\.py$' --exclude-dirs '^\\.' --format json
    """
    if verbose_flag and quiet_flag:
        raise click.UsageError("--verbose and --quiet are mutually exclusive.")

    if quiet_flag:
        verbosity = Verbosity.QUIET
    elif verbose_flag:
        verbosity = Verbosity.VERBOSE
    else:
        verbosity = Verbosity.NORMAL
    _configure_logging(verbosity)

    format_value = output_format.lower()

    try:
        config = load_config(config_path, scan_root=path)
        request_options = _build_request_options(
            path,
            file_pattern,
            dir_pattern,
            prepend,
            exclude_files,
            exclude_dirs,
            max_concurrency,
            verbosity,
            config,
        )
        reference = license_reference or config.license
        if not reference:
            raise ConfigurationError(
                "License is missing, set it using the --license option "
                "or the 'license' configuration key"
            )

        license, summary = asyncio.run(
            _run_check(
                reference,
                normalize_newlines or bool(config.normalize_newlines),
                request_options,
                format_value,
                verbosity,
            )
        )

        if format_value == "terminal":
            TerminalFormatter(console=_console, verbosity=verbosity).format_summary(
                summary
            )

        if format_value == "json" or output_path is not None:
            report = ScanJsonFormatter().format_scan_summary(summary, license)
            if output_path is not None:
                _write_output_to_file(report, output_path)
            else:
                click.echo(report)

        if summary.has_issues:
            sys.exit(EXIT_ISSUES)
        sys.exit(EXIT_SUCCESS)

    except LicenseCheckerError as e:
        _display_error(e, format_value)
        sys.exit(EXIT_ERROR)


def _configure_logging(verbosity: Verbosity) -> None:
    """Send package log records to stderr at the level matching verbosity."""
    logging.basicConfig(
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("license_checker").setLevel(_LOG_LEVELS[verbosity])


def _build_request_options(
    path: Path,
    file_pattern: str,
    dir_pattern: Optional[str],
    prepend: Optional[str],
    exclude_files: Optional[str],
    exclude_dirs: Optional[str],
    max_concurrency: Optional[int],
    verbosity: Verbosity,
    config: CheckerConfig,
) -> dict[str, object]:
    """Merge command line options over configuration values.

    Patterns are compiled here so an invalid one fails before any network
    access or traversal.

    Raises:
        InvalidPatternError: If one of the patterns is invalid.
    """
    if prepend is not None:
        policy = PrependPolicy(prepend.lower())
    else:
        policy = config.prepend or PrependPolicy.NEVER

    file_exclude = exclude_files or config.exclude_files
    dir_exclude = exclude_dirs or config.exclude_dirs

    return {
        "root": path,
        "file_include": compile_filter(file_pattern),
        "file_exclude": compile_filter(file_exclude) if file_exclude else None,
        "dir_include": compile_filter(
            dir_pattern or config.dir_pattern or DEFAULT_DIR_PATTERN
        ),
        "dir_exclude": compile_filter(dir_exclude) if dir_exclude else None,
        "prepend": policy,
        "log": verbosity != Verbosity.QUIET,
        "max_concurrency": max_concurrency or config.max_concurrency,
    }


async def _run_check(
    reference: str,
    normalize_newlines: bool,
    request_options: dict[str, object],
    format_type: str,
    verbosity: Verbosity,
) -> tuple[License, ScanSummary]:
    """Resolve the license and run the scan.

    Args:
        reference: Raw license reference.
        normalize_newlines: Whether literal ``\\n`` sequences become newlines.
        request_options: ScanRequest fields other than the license.
        format_type: Output format (terminal, json).
        verbosity: Output verbosity level.

    Returns:
        The resolved license and the scan summary.
    """
    license = await resolve_license(reference, normalize_newlines)
    request = ScanRequest.model_validate({**request_options, "license": license})

    if format_type != "terminal":
        return license, await run_scan(request)

    formatter = TerminalFormatter(console=_console, verbosity=verbosity)
    formatter.format_scan_start(request.root)

    def print_result(entry: FileCheckResult) -> None:
        formatter.format_file_result(entry, request.root)

    summary = await run_scan(
        request,
        on_result=print_result,
        console=_console if verbosity != Verbosity.QUIET else None,
    )
    return license, summary


def _write_output_to_file(content: str, path: str) -> None:
    """Write report content to file.

    Args:
        content: The report content to write.
        path: The file path to write to.

    Raises:
        ConfigurationError: If file cannot be written.
    """
    file_path = Path(path)

    try:
        file_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot write to file '{path}': {e}") from e

    _error_console.print(f"[green]Report written to {path}[/green]")


def _display_error(error: LicenseCheckerError, format_type: str) -> None:
    """Display error message to user.

    All errors are written to stderr for consistent CI/CD behavior.

    Args:
        error: The exception that occurred.
        format_type: Output format type for styling.
    """
    message = f"Error: {type(error).__name__}: {error}"

    if format_type == "terminal":
        _error_console.print(f"[red bold]{escape(message)}[/red bold]", highlight=False)
    else:
        click.echo(message, err=True)


if __name__ == "__main__":
    main()
