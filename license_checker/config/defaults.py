"""Default configuration values for license-checker."""

from __future__ import annotations

from license_checker.models.config import CheckerConfig

# Default configuration file names to search for
DEFAULT_CONFIG_NAMES = [".license-checker.yaml", ".license-checker.yml"]


def get_default_config() -> CheckerConfig:
    """Get the default configuration.

    Returns:
        CheckerConfig with all defaults (all fields None).
    """
    return CheckerConfig()
