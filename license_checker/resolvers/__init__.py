"""License resolvers package."""

from license_checker.resolvers.base import BaseResolver, split_license_text
from license_checker.resolvers.file import FileLicenseResolver
from license_checker.resolvers.license import build_resolvers, resolve_license
from license_checker.resolvers.literal import LiteralLicenseResolver
from license_checker.resolvers.regex import RegexLicenseResolver
from license_checker.resolvers.url import UrlLicenseResolver, fetch_license_text

__all__ = [
    "BaseResolver",
    "FileLicenseResolver",
    "LiteralLicenseResolver",
    "RegexLicenseResolver",
    "UrlLicenseResolver",
    "build_resolvers",
    "fetch_license_text",
    "resolve_license",
    "split_license_text",
]
