"""Load conversion defaults from a YAML file."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from atom2md.config.schema import ConvertConfig
from atom2md.utils.errors import ConfigNotFoundError, InvalidConfigError

logger = logging.getLogger(__name__)


def load_config(config_file: Path) -> ConvertConfig:
    """Load and validate a configuration file.

    An empty file yields the defaults.

    Args:
        config_file: Path to a YAML file

    Returns:
        Validated ConvertConfig instance

    Raises:
        ConfigNotFoundError: If config file doesn't exist
        InvalidConfigError: If config is not valid YAML or fails validation
    """
    if not config_file.exists():
        raise ConfigNotFoundError(f"Config file not found: {config_file}")

    try:
        with open(config_file, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise InvalidConfigError(f"Cannot read configuration in {config_file}: {e}") from e

    if not isinstance(data, dict):
        raise InvalidConfigError(
            f"Invalid configuration in {config_file}: expected a mapping"
        )

    try:
        config = ConvertConfig(**data)
    except ValidationError as e:
        raise InvalidConfigError(f"Invalid configuration in {config_file}: {e}") from e

    logger.debug(f"Loaded configuration from {config_file}")
    return config
