"""License matching.

Decides whether file text contains a license, fully or in part. Matching is
purely textual: no attempt is made to understand comment syntax.
"""

from license_checker.models.license import License, LicenseStatus, MatchResult

# Vacuous or complete licenses
FULL_MATCH = MatchResult(status=LicenseStatus.FOUND, ratio=1.0)
NO_MATCH = MatchResult(status=LicenseStatus.NOT_FOUND, ratio=0.0)


def count_matching_lines(text: str, lines: list[str]) -> int:
    """Count license lines that appear anywhere in ``text``.

    Lines are tested independently and in no particular order. A line
    repeated in the license is counted once per repetition.
    """
    return sum(1 for line in lines if line in text)


def match_license(text: str, license: License) -> MatchResult:
    """Check file text for a license.

    Regex licenses are either found or not found. Literal licenses are found
    when their full text appears verbatim; otherwise the ratio of individual
    lines present decides between partially found and not found.

    Args:
        text: File contents.
        license: Resolved license.

    Returns:
        MatchResult with ``prepended`` set to False.
    """
    if isinstance(license.value, list):
        lines = license.value
        if not lines or "\n".join(lines) in text:
            return FULL_MATCH

        matched = count_matching_lines(text, lines)
        if matched == 0:
            return NO_MATCH
        return MatchResult(
            status=LicenseStatus.PARTIALLY_FOUND,
            ratio=matched / len(lines),
        )

    if license.value.search(text):
        return FULL_MATCH
    return NO_MATCH
