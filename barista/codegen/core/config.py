"""
Configuration management for boilerplate generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
from pathlib import Path
from typing import Dict, Any, Optional, Union, Tuple
from dataclasses import dataclass, field

from ...logging_config import get_logger

logger = get_logger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


VALID_BOOLEAN_PREFIXES = ("is", "get")

DEFAULT_IMMUTABLE_TYPES: Tuple[str, ...] = (
    "String",
    "java.lang.String",
    "Integer",
    "Long",
    "Short",
    "Byte",
    "Character",
    "Boolean",
    "Float",
    "Double",
    "BigDecimal",
    "BigInteger",
    "UUID",
    "LocalDate",
    "LocalDateTime",
    "LocalTime",
    "Instant",
    "Duration",
)


@dataclass(frozen=True)
class NamingConfig:
    """Settings consumed by the name resolver and the emitters."""

    var_prefix: str = ""
    boolean_prefix: str = "is"  # is, get
    hash_multiplier: int = 31


@dataclass(frozen=True)
class GeneratorConfig:
    """Complete, immutable configuration for one generation run."""

    naming: NamingConfig = field(default_factory=NamingConfig)

    # Emitter switches
    generate_getters: bool = False
    generate_setters: bool = False
    generate_copy_constructor: bool = False
    generate_equals_hash: bool = False

    # Code style settings
    indent_size: int = 4
    add_comments: bool = True

    # Types copied by value in the copy constructor
    immutable_types: Tuple[str, ...] = DEFAULT_IMMUTABLE_TYPES

    @property
    def any_enabled(self) -> bool:
        """Whether at least one emitter is switched on."""
        return (
            self.generate_getters
            or self.generate_setters
            or self.generate_copy_constructor
            or self.generate_equals_hash
        )


# Flat configuration keys mapped to (section, attribute)
_NAMING_KEYS = {
    "var_prefix": "var_prefix",
    "boolean_prefix": "boolean_prefix",
    "hash_multiplier": "hash_multiplier",
}

_GENERATOR_KEYS = {
    "getters": "generate_getters",
    "setters": "generate_setters",
    "copy_constructor": "generate_copy_constructor",
    "equals_hash": "generate_equals_hash",
    "indent_size": "indent_size",
    "add_comments": "add_comments",
    "immutable_types": "immutable_types",
}

DEFAULT_CONFIG: Dict[str, Any] = {
    "var_prefix": "",
    "boolean_prefix": "is",
    "hash_multiplier": 31,
    "getters": False,
    "setters": False,
    "copy_constructor": False,
    "equals_hash": False,
    "indent_size": 4,
    "add_comments": True,
    "immutable_types": list(DEFAULT_IMMUTABLE_TYPES),
}


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self, defaults: Optional[Dict[str, Any]] = None):
        """Initialize configuration manager with default settings."""
        self._defaults: Dict[str, Any] = dict(DEFAULT_CONFIG)
        if defaults:
            self._defaults.update(defaults)

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Build the complete configuration.

        Args:
            custom_config: Overrides applied last (typically CLI flags)
            config_file: Path to a JSON configuration file

        Returns:
            Validated, immutable generator configuration

        Raises:
            ConfigError: If the file cannot be loaded or a value is invalid
        """
        merged = dict(self._defaults)

        if config_file:
            merged.update(self._load_config_file(config_file))

        if custom_config:
            merged.update(custom_config)

        return self._dict_to_config(merged)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug("Loaded configuration file %s", path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert a flat dictionary to a validated GeneratorConfig."""
        naming_args = {}
        generator_args = {}

        for key, value in config_dict.items():
            if key in _NAMING_KEYS:
                naming_args[_NAMING_KEYS[key]] = value
            elif key in _GENERATOR_KEYS:
                generator_args[_GENERATOR_KEYS[key]] = value
            else:
                logger.warning("Ignoring unknown configuration key: %s", key)

        immutable_types = generator_args.get("immutable_types")
        if isinstance(immutable_types, (list, tuple)):
            generator_args["immutable_types"] = tuple(immutable_types)
        elif immutable_types is not None:
            raise ConfigError("immutable_types must be a list of type names")

        naming = NamingConfig(**naming_args)
        config = GeneratorConfig(naming=naming, **generator_args)

        errors = self.validate_config(config)
        if errors:
            raise ConfigError("; ".join(errors))

        return config

    def validate_config(self, config: GeneratorConfig) -> list[str]:
        """
        Validate a configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        naming = config.naming

        if not isinstance(naming.var_prefix, str):
            errors.append(f"var_prefix must be a string: {naming.var_prefix!r}")

        if naming.boolean_prefix not in VALID_BOOLEAN_PREFIXES:
            errors.append(
                f"Invalid boolean_prefix: {naming.boolean_prefix!r} "
                f"(expected one of: {', '.join(VALID_BOOLEAN_PREFIXES)})"
            )

        multiplier = naming.hash_multiplier
        if (
            isinstance(multiplier, bool)
            or not isinstance(multiplier, int)
            or multiplier <= 0
        ):
            errors.append(f"hash_multiplier must be a positive integer: {multiplier!r}")

        indent = config.indent_size
        if isinstance(indent, bool) or not isinstance(indent, int) or indent <= 0:
            errors.append(f"indent_size must be a positive integer: {indent!r}")

        if not all(isinstance(name, str) for name in config.immutable_types):
            errors.append("immutable_types must be a list of type names")

        return errors


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    return ConfigManager().get_config(custom_config, config_file)

