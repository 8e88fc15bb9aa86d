"""Remote license resolver."""
import logging
import re
from typing import Optional

import httpx

from license_checker.constants import FETCH_TIMEOUT_SECONDS, URL_PATTERN
from license_checker.exceptions import LicenseFetchError
from license_checker.models.license import License, LicenseSource
from license_checker.resolvers.base import BaseResolver, split_license_text

logger = logging.getLogger(__name__)

_SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")


def is_url(reference: str) -> bool:
    """Check if a license reference is shaped like a URL."""
    return URL_PATTERN.match(reference) is not None


def to_fetch_url(reference: str) -> str:
    """Add an https scheme to scheme-less references like ``www.example.com``."""
    if _SCHEME_PATTERN.match(reference):
        return reference
    return f"https://{reference}"


async def fetch_license_text(
    url: str, client: Optional[httpx.AsyncClient] = None
) -> str:
    """Fetch license text with a single GET request.

    The response body is treated as plain text whatever its content type.

    Args:
        url: URL to fetch.
        client: Optional httpx.AsyncClient to use. If not provided,
            a new client will be created.

    Returns:
        Response body.

    Raises:
        LicenseFetchError: If the request fails or returns a non-2xx status.
    """

    async def do_fetch(c: httpx.AsyncClient) -> str:
        try:
            response = await c.get(
                url,
                timeout=httpx.Timeout(FETCH_TIMEOUT_SECONDS),
                follow_redirects=True,
            )
        except httpx.RequestError as e:
            raise LicenseFetchError(f"Failed to fetch license from {url}: {e}") from e

        if not 200 <= response.status_code < 300:
            raise LicenseFetchError(
                f"Failed to fetch license from {url}: HTTP {response.status_code}"
            )
        return response.text

    if client:
        return await do_fetch(client)

    async with httpx.AsyncClient() as new_client:
        return await do_fetch(new_client)


class UrlLicenseResolver(BaseResolver):
    """Resolver that downloads the license text from a URL.

    A URL-shaped reference is an explicit request for the network, so
    failures are raised instead of falling through to other resolvers.
    """

    def __init__(
        self,
        normalize_newlines: bool = False,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """Initialize with an optional shared HTTP client.

        Args:
            normalize_newlines: Whether literal ``\\n`` sequences become newlines.
            client: Optional shared httpx.AsyncClient for connection reuse.
        """
        super().__init__(normalize_newlines)
        self._client = client

    async def resolve(self, reference: str) -> Optional[License]:
        """Fetch the license if the reference is a URL.

        Raises:
            LicenseFetchError: If the license cannot be downloaded.
        """
        if not is_url(reference):
            return None

        url = to_fetch_url(reference)
        logger.debug("Fetching license from %s", url)
        text = await fetch_license_text(url, client=self._client)

        return License(
            origin=reference,
            value=split_license_text(text, self._normalize_newlines),
            source=LicenseSource.URL,
        )
