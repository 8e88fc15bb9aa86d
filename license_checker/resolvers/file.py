"""License file resolver."""
import asyncio
import logging
from pathlib import Path
from typing import Optional

from license_checker.models.license import License, LicenseSource
from license_checker.resolvers.base import BaseResolver, split_license_text

logger = logging.getLogger(__name__)


class FileLicenseResolver(BaseResolver):
    """Resolver that reads the license text from a file path."""

    async def resolve(self, reference: str) -> Optional[License]:
        """Read the referenced file.

        Returns:
            The license read from the file, or None if the reference is not
            a readable text file. An unreadable path is not an error: the
            reference is then taken as the license text itself.
        """
        path = Path(reference)
        try:
            text = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError, ValueError) as e:
            logger.debug("License reference is not a readable file (%s)", e)
            return None

        logger.debug("Read license from %s", path)
        return License(
            origin=reference,
            value=split_license_text(text, self._normalize_newlines),
            source=LicenseSource.FILE,
        )
