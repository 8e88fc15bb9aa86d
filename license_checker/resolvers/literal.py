"""Literal license resolver."""
from typing import Optional

from license_checker.models.license import License, LicenseSource
from license_checker.resolvers.base import BaseResolver, split_license_text


class LiteralLicenseResolver(BaseResolver):
    """Fallback resolver treating the reference itself as the license text."""

    async def resolve(self, reference: str) -> Optional[License]:
        """Return the reference split into lines. Never returns None."""
        return License(
            origin=reference,
            value=split_license_text(reference, self._normalize_newlines),
            source=LicenseSource.LITERAL,
        )
