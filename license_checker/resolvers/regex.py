"""Regular expression license resolver."""
from typing import Optional

from license_checker.models.license import License, LicenseSource
from license_checker.patterns import compile_pattern
from license_checker.resolvers.base import BaseResolver


class RegexLicenseResolver(BaseResolver):
    """Resolver for ``/pattern/flags`` references.

    The resulting license can detect headers but never be prepended.
    """

    async def resolve(self, reference: str) -> Optional[License]:
        """Compile the reference if it is a delimited pattern.

        Raises:
            InvalidPatternError: If the pattern or its flags are invalid.
        """
        compiled = compile_pattern(reference)
        if compiled is None:
            return None
        return License(origin=reference, value=compiled, source=LicenseSource.REGEX)
