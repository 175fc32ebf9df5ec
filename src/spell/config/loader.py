"""YAML configuration loader with inheritance support.

Supports:
- Loading YAML config files
- Config inheritance via 'extends' key
- Deep merging of nested config
"""

from pathlib import Path
from typing import Any

import yaml

from ..errors import ConfigError
from . import ClassifierConfig, ExamplesConfig, LoggingConfig, SpellConfig
from .profiles import Profile, get_profile_path

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    Values from override take precedence. Nested dicts are merged recursively.
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_yaml_with_inheritance(path: Path) -> dict[str, Any]:
    """Load YAML file with inheritance support.

    If the file contains an 'extends' key, the base config is loaded first
    and merged with the current config.

    Raises:
        FileNotFoundError: If path (or a file it extends) does not exist.
        ConfigError: If the file is not a YAML mapping.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        try:
            config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")

    # Handle inheritance
    if "extends" in config:
        base_name = config.pop("extends")
        base_path = path.parent / base_name
        base_config = load_yaml_with_inheritance(base_path)
        config = deep_merge(base_config, config)

    return config


def dict_to_config(data: dict[str, Any]) -> SpellConfig:
    """Convert raw dict to typed SpellConfig dataclass.

    Raises:
        ConfigError: On unknown keys or out-of-range values.
    """
    spell_data = data.get("spell", {}) or {}

    # YAML gives None for empty sections
    def safe_get(key: str) -> dict[str, Any]:
        value = spell_data.get(key, {})
        return value if value is not None else {}

    try:
        config = SpellConfig(
            classifier=ClassifierConfig(**safe_get("classifier")),
            examples=ExamplesConfig(**safe_get("examples")),
            logging=LoggingConfig(**safe_get("logging")),
        )
    except TypeError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

    validate_config(config)
    return config


def validate_config(config: SpellConfig) -> None:
    """Check value ranges that the dataclasses cannot express.

    Raises:
        ConfigError: If a threshold or log level is invalid.
    """
    thresholds = {
        "acceptance_threshold": config.classifier.acceptance_threshold,
        "primary_confidence_threshold": config.classifier.primary_confidence_threshold,
    }
    for name, value in thresholds.items():
        if not isinstance(value, int | float) or not 0.0 <= value <= 1.0:
            raise ConfigError(f"classifier.{name} must be between 0.0 and 1.0, got {value!r}")

    if str(config.logging.level).upper() not in VALID_LOG_LEVELS:
        raise ConfigError(f"logging.level must be one of {VALID_LOG_LEVELS}")


class YAMLConfigLoader:
    """YAML configuration loader implementation."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize loader with optional config directory.

        Args:
            config_dir: Directory containing config files.
                        Defaults to 'config' relative to project root.
        """
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent.parent / "config"
        self._config_dir = config_dir

    def load(self, path: Path) -> SpellConfig:
        """Load configuration from file path.

        Args:
            path: Path to YAML config file

        Returns:
            Parsed SpellConfig
        """
        raw_config = load_yaml_with_inheritance(path)
        return dict_to_config(raw_config)

    def load_profile(self, profile: str) -> SpellConfig:
        """Load configuration by profile name.

        Args:
            profile: Profile name (e.g., 'dev', 'prod')

        Returns:
            Parsed SpellConfig for the profile

        Raises:
            ConfigError: If the profile name is unknown.
        """
        try:
            selected = Profile(profile)
        except ValueError as e:
            raise ConfigError(f"Unknown profile: {profile}") from e
        return self.load(get_profile_path(selected, self._config_dir))

    def get_config_dir(self) -> Path:
        """Get the configuration directory path."""
        return self._config_dir


def load_config(path: str | Path | None = None, profile: str | None = None) -> SpellConfig:
    """Load spell configuration.

    Args:
        path: Direct path to config file (takes precedence)
        profile: Profile name ('dev', 'prod', 'test') if path not given

    Returns:
        Parsed SpellConfig

    Examples:
        >>> config = load_config(profile="dev")
        >>> config = load_config(path="/path/to/config.yaml")
    """
    loader = YAMLConfigLoader()

    if path is not None:
        return loader.load(Path(path))
    elif profile is not None:
        return loader.load_profile(profile)
    else:
        return loader.load_profile("dev")


__all__ = [
    "YAMLConfigLoader",
    "deep_merge",
    "dict_to_config",
    "load_config",
    "load_yaml_with_inheritance",
    "validate_config",
]
