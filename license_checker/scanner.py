"""Scanner module for directory traversal and license checking."""
import asyncio
import logging
import os
import re
import time
from pathlib import Path
from typing import AsyncIterator, Callable, NamedTuple, Optional

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from license_checker.analysis.matching import match_license
from license_checker.analysis.prepend import check_prepend_target, maybe_prepend
from license_checker.constants import DEFAULT_DIR_PATTERN
from license_checker.exceptions import (
    FileReadError,
    FileWriteError,
    ScanError,
    TraversalError,
)
from license_checker.models.license import License
from license_checker.models.scan import (
    FileCheckResult,
    PrependPolicy,
    ScanRequest,
    ScanSummary,
)

logger = logging.getLogger(__name__)


class _Entry(NamedTuple):
    """Directory entry as reported by the filesystem."""

    name: str
    path: Path
    is_file: bool
    is_dir: bool


def _list_directory(path: Path) -> list[_Entry]:
    """List a directory in native enumeration order."""
    with os.scandir(path) as it:
        return [
            _Entry(
                name=entry.name,
                path=path / entry.name,
                is_file=entry.is_file(),
                is_dir=entry.is_dir(),
            )
            for entry in it
        ]


def _accepts(name: str, include: re.Pattern[str], exclude: Optional[re.Pattern[str]]) -> bool:
    if exclude is not None and exclude.search(name):
        return False
    return include.search(name) is not None


async def walk_directory(
    root: Path,
    file_include: re.Pattern[str],
    file_exclude: Optional[re.Pattern[str]] = None,
    dir_include: Optional[re.Pattern[str]] = None,
    dir_exclude: Optional[re.Pattern[str]] = None,
    on_error: Optional[Callable[[TraversalError], None]] = None,
) -> AsyncIterator[Path]:
    """Recursively yield files below ``root``, depth first.

    A file is yielded when its name matches ``file_include`` and does not
    match ``file_exclude``. A directory is entered when its name matches
    ``dir_include`` and does not match ``dir_exclude``. Entries are visited in
    the order the filesystem reports them.

    Symbolic links to directories are followed, so a cyclic link must be
    excluded with ``dir_exclude``.

    Args:
        root: Directory to start from.
        file_include: Pattern file names have to match.
        file_exclude: Pattern file names cannot match.
        dir_include: Pattern directory names have to match
            (default: everything except node_modules).
        dir_exclude: Pattern directory names cannot match.
        on_error: Called with a TraversalError for every directory that
            cannot be listed. The directory is skipped either way.

    Yields:
        Absolute paths of matching files.
    """
    if dir_include is None:
        dir_include = re.compile(DEFAULT_DIR_PATTERN)

    pending = [Path(root).absolute()]
    while pending:
        directory = pending.pop()
        try:
            entries = await asyncio.to_thread(_list_directory, directory)
        except OSError as e:
            error = TraversalError(directory, e)
            if on_error is not None:
                on_error(error)
            else:
                logger.warning("Skipping directory: %s", error)
            continue

        subdirectories: list[Path] = []
        for entry in entries:
            if entry.is_file and _accepts(entry.name, file_include, file_exclude):
                yield entry.path
            elif entry.is_dir:
                if _accepts(entry.name, dir_include, dir_exclude):
                    subdirectories.append(entry.path)
                else:
                    logger.debug("Not entering %s", entry.path)

        # Reversed so the first listed subdirectory is walked first
        pending.extend(reversed(subdirectories))


def _read_text(path: Path) -> str:
    with path.open(encoding="utf-8", newline="") as handle:
        return handle.read()


async def check_file(
    path: Path,
    license: License,
    prepend: PrependPolicy = PrependPolicy.NEVER,
) -> FileCheckResult:
    """Check one file for the license and prepend it if the policy says so.

    Read and write failures are reported in the returned entry instead of
    being raised.

    Args:
        path: File to check.
        license: Resolved license.
        prepend: Prepend policy.

    Returns:
        FileCheckResult for ``path``.

    Raises:
        InvalidPrependTargetError: If prepending is enabled for a regex license.
    """
    try:
        text = await asyncio.to_thread(_read_text, path)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Skipping file: %s", FileReadError(path, e))
        return FileCheckResult(path=path, error=f"could not read file: {e}")

    result = match_license(text, license)
    try:
        result = await maybe_prepend(path, text, result, license, prepend)
    except FileWriteError as e:
        logger.debug("Could not prepend license: %s", e)
        return FileCheckResult(
            path=path, result=result, error=f"could not prepend license: {e.reason}"
        )

    return FileCheckResult(path=path, result=result)


async def run_scan(
    request: ScanRequest,
    on_result: Optional[Callable[[FileCheckResult], None]] = None,
    console: Optional[Console] = None,
) -> ScanSummary:
    """Check every matching file below the request root.

    A task is started for each file as soon as the traversal finds it, so
    files are read, matched and written concurrently. Results are handed to
    ``on_result`` in completion order; with ``request.log`` unset only failed
    entries are handed over. The summary is returned once every file has
    been processed.

    Args:
        request: Scan configuration.
        on_result: Optional callback receiving each file result.
        console: Optional Rich Console for a progress indicator.

    Returns:
        ScanSummary with counts per status and the elapsed time.

    Raises:
        InvalidPrependTargetError: If prepending is enabled for a regex license.
        ScanError: If the root is not a directory.
    """
    check_prepend_target(request.license, request.prepend)
    if not request.root.is_dir():
        raise ScanError(f"Not a directory: {request.root}")

    summary = ScanSummary(root=request.root)
    semaphore = (
        asyncio.Semaphore(request.max_concurrency)
        if request.max_concurrency is not None
        else None
    )

    progress: Optional[Progress] = None
    task_id = None
    if console is not None:
        progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        )
        task_id = progress.add_task(f"Checking licenses in {request.root}...")

    def report(entry: FileCheckResult) -> None:
        summary.record(entry)
        if progress is not None and task_id is not None:
            progress.update(
                task_id,
                description=f"Checked {len(summary.files)} files in {request.root}...",
            )
        if on_result is not None and (request.log or entry.is_error):
            on_result(entry)

    def report_traversal_error(error: TraversalError) -> None:
        logger.debug("Skipping directory: %s", error)
        report(
            FileCheckResult(path=error.path, error=f"could not list directory: {error.reason}")
        )

    async def check_one(path: Path) -> None:
        if semaphore is None:
            entry = await check_file(path, request.license, request.prepend)
        else:
            async with semaphore:
                entry = await check_file(path, request.license, request.prepend)
        report(entry)

    start = time.perf_counter()
    tasks: list[asyncio.Task[None]] = []

    if progress is not None:
        progress.start()
    try:
        async for path in walk_directory(
            request.root,
            file_include=request.file_include,
            file_exclude=request.file_exclude,
            dir_include=request.dir_include,
            dir_exclude=request.dir_exclude,
            on_error=report_traversal_error,
        ):
            tasks.append(asyncio.create_task(check_one(path)))

        await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        raise
    finally:
        if progress is not None:
            progress.stop()

    summary.elapsed_ms = round((time.perf_counter() - start) * 1000)
    logger.debug(
        "Checked %d files in %s in %dms", summary.total_files, request.root, summary.elapsed_ms
    )
    return summary
