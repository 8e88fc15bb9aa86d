"""Tests for the URL license resolver."""
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from license_checker.exceptions import LicenseFetchError
from license_checker.models.license import LicenseSource
from license_checker.resolvers.url import (
    UrlLicenseResolver,
    fetch_license_text,
    is_url,
    to_fetch_url,
)


def _response(status_code: int, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    return response


class TestIsUrl:
    """Tests for URL shape detection."""

    def test_http_url(self) -> None:
        """Test that http(s) URLs are detected."""
        assert is_url("https://example.com/LICENSE")

    def test_plain_text_is_not_url(self) -> None:
        """Test that license text is not a URL."""
        assert not is_url("Copyright 2021 Example")

    def test_scheme_is_added_when_missing(self) -> None:
        """Test that www references are fetched over https."""
        assert to_fetch_url("www.example.com/h") == "https://www.example.com/h"
        assert to_fetch_url("http://example.com/h") == "http://example.com/h"


class TestUrlLicenseResolver:
    """Tests for UrlLicenseResolver."""

    @pytest.mark.asyncio
    async def test_fetches_license_lines(self) -> None:
        """Test that the response body becomes the license lines."""
        with patch("license_checker.resolvers.url.httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=_response(200, "Copyright X\nMIT")
            )

            license = await UrlLicenseResolver().resolve("https://example.com/HEADER")

        assert license is not None
        assert license.value == ["Copyright X", "MIT"]
        assert license.source == LicenseSource.URL
        assert license.origin == "https://example.com/HEADER"

    @pytest.mark.asyncio
    async def test_returns_none_for_non_url(self) -> None:
        """Test that non-URL references are left to other resolvers."""
        with patch("license_checker.resolvers.url.httpx.AsyncClient") as mock_client:
            license = await UrlLicenseResolver().resolve("Copyright X")

        assert license is None
        mock_client.assert_not_called()

    @pytest.mark.asyncio
    async def test_normalizes_newlines(self) -> None:
        """Test that escaped newlines in the body are converted when asked."""
        with patch("license_checker.resolvers.url.httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=_response(200, "Copyright X\\nMIT\\nAll rights")
            )

            license = await UrlLicenseResolver(normalize_newlines=True).resolve(
                "https://example.com/HEADER"
            )

        assert license is not None
        assert license.value == ["Copyright X", "MIT", "All rights"]

    @pytest.mark.asyncio
    async def test_uses_shared_client(self) -> None:
        """Test that a provided client is used instead of a new one."""
        client = MagicMock()
        client.get = AsyncMock(return_value=_response(200, "MIT"))

        with patch("license_checker.resolvers.url.httpx.AsyncClient") as mock_client:
            license = await UrlLicenseResolver(client=client).resolve(
                "www.example.com/HEADER"
            )

        mock_client.assert_not_called()
        assert license is not None
        assert client.get.call_args.args[0] == "https://www.example.com/HEADER"


class TestFetchLicenseText:
    """Tests for fetch_license_text function."""

    @pytest.mark.asyncio
    async def test_http_404_raises(self) -> None:
        """Test that a 404 response fails instead of falling through."""
        client = MagicMock()
        client.get = AsyncMock(return_value=_response(404))

        with pytest.raises(LicenseFetchError, match="HTTP 404"):
            await fetch_license_text("https://example.com/missing", client=client)

    @pytest.mark.asyncio
    async def test_server_error_raises(self) -> None:
        """Test that 5xx responses raise LicenseFetchError."""
        client = MagicMock()
        client.get = AsyncMock(return_value=_response(503))

        with pytest.raises(LicenseFetchError, match="HTTP 503"):
            await fetch_license_text("https://example.com/x", client=client)

    @pytest.mark.asyncio
    async def test_request_error_raises(self) -> None:
        """Test that transport errors raise LicenseFetchError."""
        client = MagicMock()
        client.get = AsyncMock(side_effect=httpx.ConnectError("unreachable"))

        with pytest.raises(LicenseFetchError, match="unreachable"):
            await fetch_license_text("https://example.com/x", client=client)

    @pytest.mark.asyncio
    async def test_returns_body_regardless_of_content_type(self) -> None:
        """Test that any 2xx body is returned as text."""
        client = MagicMock()
        client.get = AsyncMock(return_value=_response(203, "<p>MIT</p>"))

        assert await fetch_license_text("https://example.com/x", client=client) == "<p>MIT</p>"
