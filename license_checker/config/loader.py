"""Configuration file discovery and loading for license-checker."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable

import yaml
from pydantic import ValidationError

from license_checker.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from license_checker.exceptions import ConfigurationError
from license_checker.models.config import CheckerConfig

logger = logging.getLogger(__name__)


def find_config_file(search_dirs: Iterable[Path] | None = None) -> Path | None:
    """Find the first configuration file in the given directories.

    Each directory is searched for `.license-checker.yaml`, then
    `.license-checker.yml`, before moving to the next directory.

    Args:
        search_dirs: Directories to search, in order. Defaults to the
            current working directory.

    Returns:
        Path to the configuration file if found, None otherwise.
    """
    dirs = list(search_dirs) if search_dirs is not None else [Path.cwd()]
    for directory in dirs:
        for name in DEFAULT_CONFIG_NAMES:
            candidate = directory / name
            if candidate.is_file():
                return candidate
    return None


def load_config_file(path: Path) -> CheckerConfig:
    """Load and validate configuration from a YAML file.

    Args:
        path: Path to the configuration file.

    Returns:
        Validated CheckerConfig instance.

    Raises:
        ConfigurationError: If the file cannot be read, is not valid YAML,
            or does not describe a valid configuration.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read configuration file '{path}': {e}") from e

    try:
        data: Any = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in '{path}': {e}") from e

    # Empty documents and comment-only files mean "use defaults"
    if data is None:
        return get_default_config()

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration in '{path}': "
            f"expected a mapping at root level, got {type(data).__name__}"
        )

    try:
        return CheckerConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in '{path}': {_format_validation_errors(e)}"
        ) from e


def _format_validation_errors(error: ValidationError) -> str:
    """Join Pydantic errors into `location: message` pairs."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'root'}: {err['msg']}"
        for err in error.errors()
    )


def load_config(
    config_path: str | None = None,
    scan_root: Path | None = None,
) -> CheckerConfig:
    """Load configuration from file or use defaults.

    An explicit path always wins. Otherwise the scanned directory is searched
    first and the current working directory second.

    Args:
        config_path: Optional path to configuration file.
        scan_root: Directory that is about to be scanned.

    Returns:
        CheckerConfig with loaded or default values.

    Raises:
        ConfigurationError: If the chosen configuration file is invalid.
    """
    if config_path is not None:
        return load_config_file(Path(config_path))

    search_dirs = [Path.cwd()]
    if scan_root is not None and scan_root.resolve() != Path.cwd().resolve():
        search_dirs.insert(0, scan_root)

    discovered = find_config_file(search_dirs)
    if discovered is None:
        logger.debug("No configuration file found in %s", search_dirs)
        return get_default_config()

    logger.debug("Using configuration file %s", discovered)
    return load_config_file(discovered)
