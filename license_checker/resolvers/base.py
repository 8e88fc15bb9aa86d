"""Base resolver interface."""

from abc import ABC, abstractmethod
from typing import Optional

from license_checker.models.license import License


def split_license_text(text: str, normalize_newlines: bool = False) -> list[str]:
    """Split license text into lines.

    Args:
        text: Raw license text.
        normalize_newlines: Whether two-character ``\\n`` sequences should be
            turned into real newlines first.

    Returns:
        License lines, split on ``\\n`` only.
    """
    if normalize_newlines:
        text = text.replace("\\n", "\n")
    return text.split("\n")


class BaseResolver(ABC):
    """Abstract base class for license resolvers.

    Each resolver handles one kind of license reference. Resolvers are tried
    in order and the first one returning a License wins.
    """

    def __init__(self, normalize_newlines: bool = False) -> None:
        """Initialize the resolver.

        Args:
            normalize_newlines: Whether literal ``\\n`` sequences in resolved
                text become newlines.
        """
        self._normalize_newlines = normalize_newlines

    @abstractmethod
    async def resolve(self, reference: str) -> Optional[License]:
        """Resolve a license reference.

        Args:
            reference: The raw reference supplied by the user.

        Returns:
            The resolved License, or None if this resolver does not
            handle the reference.

        Raises:
            LicenseCheckerError: If the reference is handled by this
                resolver but cannot be turned into a License.
        """
