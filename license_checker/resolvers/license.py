"""Resolution of a license reference into a License."""
from typing import Optional

import httpx

from license_checker.models.license import License
from license_checker.resolvers.base import BaseResolver
from license_checker.resolvers.file import FileLicenseResolver
from license_checker.resolvers.literal import LiteralLicenseResolver
from license_checker.resolvers.regex import RegexLicenseResolver
from license_checker.resolvers.url import UrlLicenseResolver


def build_resolvers(
    normalize_newlines: bool = False,
    client: Optional[httpx.AsyncClient] = None,
) -> list[BaseResolver]:
    """Create the resolver chain in priority order."""
    return [
        UrlLicenseResolver(normalize_newlines, client=client),
        RegexLicenseResolver(normalize_newlines),
        FileLicenseResolver(normalize_newlines),
        LiteralLicenseResolver(normalize_newlines),
    ]


async def resolve_license(
    reference: str,
    normalize_newlines: bool = False,
    client: Optional[httpx.AsyncClient] = None,
) -> License:
    """Resolve a raw license reference into a License.

    Resolution order:
    1. URL - fetched over HTTP(S), body used as license text
    2. /pattern/flags - compiled regular expression (detection only)
    3. File path - file contents used as license text
    4. Anything else - the reference itself is the license text

    Args:
        reference: Raw license reference.
        normalize_newlines: Whether literal ``\\n`` sequences become newlines.
        client: Optional shared httpx.AsyncClient.

    Returns:
        The resolved License.

    Raises:
        LicenseFetchError: If a URL reference cannot be fetched.
        InvalidPatternError: If a pattern reference is invalid.
    """
    for resolver in build_resolvers(normalize_newlines, client):
        resolved = await resolver.resolve(reference)
        if resolved is not None:
            return resolved

    # LiteralLicenseResolver always resolves
    raise AssertionError("license resolver chain returned no result")
