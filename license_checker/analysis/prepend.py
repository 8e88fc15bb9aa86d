"""Writing licenses into files that miss them."""
import asyncio
import logging
from pathlib import Path

from license_checker.exceptions import FileWriteError, InvalidPrependTargetError
from license_checker.models.license import License, LicenseStatus, MatchResult
from license_checker.models.scan import PrependPolicy

logger = logging.getLogger(__name__)


def should_prepend(status: LicenseStatus, policy: PrependPolicy) -> bool:
    """Decide whether a file with the given status gets the license.

    | policy                       | writes when                  |
    |------------------------------|------------------------------|
    | NEVER                        | never                        |
    | IF_FULLY_MISSING             | NOT_FOUND                    |
    | IF_PARTIAL_OR_FULLY_MISSING  | NOT_FOUND or PARTIALLY_FOUND |
    """
    if policy is PrependPolicy.IF_FULLY_MISSING:
        return status is LicenseStatus.NOT_FOUND
    if policy is PrependPolicy.IF_PARTIAL_OR_FULLY_MISSING:
        return status <= LicenseStatus.PARTIALLY_FOUND
    return False


def check_prepend_target(license: License, policy: PrependPolicy) -> None:
    """Ensure the license can be written under the given policy.

    Raises:
        InvalidPrependTargetError: If prepending is enabled for a regex license.
    """
    if policy is not PrependPolicy.NEVER and license.is_regex:
        raise InvalidPrependTargetError(
            f"Regex license '{license.origin}' can only be used to search for a "
            f"license, not with prepend policy '{policy.value}'"
        )


def render_prepended(license: License, text: str) -> str:
    """Return file content with the license lines and one newline in front."""
    return f"{license.text}\n{text}"


def _write_text(path: Path, content: str) -> None:
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(content)


async def prepend_license(path: Path, text: str, license: License) -> None:
    """Rewrite ``path`` with the license in front of ``text``.

    Raises:
        FileWriteError: If the file cannot be written.
    """
    try:
        await asyncio.to_thread(_write_text, path, render_prepended(license, text))
    except OSError as e:
        raise FileWriteError(path, e) from e


async def maybe_prepend(
    path: Path,
    text: str,
    result: MatchResult,
    license: License,
    policy: PrependPolicy,
) -> MatchResult:
    """Prepend the license when the policy asks for it.

    Args:
        path: File the text was read from.
        text: Current file contents.
        result: Match result for ``text``.
        license: License that was matched.
        policy: Prepend policy.

    Returns:
        ``result`` unchanged when nothing was written, otherwise a copy with
        ``prepended`` set.

    Raises:
        InvalidPrependTargetError: If a policy other than NEVER is used with
            a regex license, whatever the match status.
        FileWriteError: If the write was attempted and failed.
    """
    check_prepend_target(license, policy)

    if not should_prepend(result.status, policy):
        return result

    await prepend_license(path, text, license)
    logger.debug("Prepended license to %s", path)
    return result.model_copy(update={"prepended": True})
