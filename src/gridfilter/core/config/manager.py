"""
Configuration Manager

Handles hierarchical configuration loading and validation with support for
explicit overrides → environment variables → config files → defaults.
"""

import os
import json
import logging
import yaml
from pathlib import Path
from typing import Dict, Any, Optional, Union, List
from pydantic import ValidationError

from gridfilter.core.config.models import AppConfig, FilterConfig
from gridfilter.core.exceptions import ConfigurationError, ErrorCode


logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Manages configuration with hierarchical loading and validation.

    Configuration sources in order of precedence:
    1. Explicit overrides (highest priority)
    2. Environment variables
    3. Configuration files
    4. Default values (lowest priority)
    """

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        """
        Initialize configuration manager.

        Args:
            config_file: Optional path to configuration file
        """
        self.config_file = Path(config_file) if config_file else None
        self._config: Optional[AppConfig] = None
        self._config_paths = self._get_default_config_paths()

    def _get_default_config_paths(self) -> List[Path]:
        """Get default configuration file search paths."""
        search_paths = [
            Path.cwd() / "gridfilter.yaml",
            Path.cwd() / "gridfilter.yml",
            Path.cwd() / ".gridfilter.yaml",
            Path.home() / ".config" / "gridfilter" / "config.yaml",
        ]

        xdg_config = os.environ.get('XDG_CONFIG_HOME')
        if xdg_config:
            search_paths.append(Path(xdg_config) / "gridfilter" / "config.yaml")

        return search_paths

    def load_config(
        self,
        overrides: Optional[Dict[str, Any]] = None,
        env_prefix: str = "GRIDFILTER_"
    ) -> AppConfig:
        """
        Load and validate configuration from all sources.

        Args:
            overrides: Nested dictionary of explicit settings
            env_prefix: Prefix for environment variables

        Returns:
            Validated AppConfig instance

        Raises:
            ConfigurationError: If configuration is invalid
        """
        config_data = {}

        file_config = self._load_config_file()
        if file_config:
            config_data.update(file_config)

        env_config = self._load_env_config(env_prefix)
        if env_config:
            config_data = self._deep_merge(config_data, env_config)

        if overrides:
            config_data = self._deep_merge(config_data, overrides)

        try:
            self._config = AppConfig(**config_data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Configuration validation failed: {e}",
                error_code=ErrorCode.CONFIG_INVALID_VALUE,
                cause=e
            )

        logger.debug(f"Loaded configuration: {self._config.model_dump()}")
        return self._config

    def _load_config_file(self) -> Optional[Dict[str, Any]]:
        """Load configuration from file."""
        config_file = self.config_file

        if not config_file:
            for path in self._config_paths:
                if path.exists() and path.is_file():
                    config_file = path
                    break
            else:
                return None

        if not config_file.exists():
            raise ConfigurationError(
                f"Config file not found: {config_file}",
                error_code=ErrorCode.CONFIG_FILE_NOT_FOUND,
                config_key="config_file",
                config_value=str(config_file)
            )

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                if config_file.suffix.lower() == '.json':
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f) or {}
        except (IOError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Failed to load config file {config_file}: {e}", cause=e)

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {config_file} must contain a mapping")

        logger.info(f"Loaded configuration file {config_file}")
        return data

    def _load_env_config(self, prefix: str) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        env_config = {}

        env_mappings = {
            f"{prefix}DEFAULT_SEARCH_FIELD": ("filters", "default_search_field", str),
            f"{prefix}STRICT_KINDS": ("filters", "strict_kinds", self._parse_bool),
            f"{prefix}VALIDATE_FIELDS": ("filters", "validate_fields", self._parse_bool),
            f"{prefix}ACCEPT_LEGACY_SHAPE": ("filters", "accept_legacy_shape", self._parse_bool),

            f"{prefix}VERBOSE": ("verbose", None, self._parse_bool),
            f"{prefix}DEBUG": ("debug", None, self._parse_bool),
        }

        for env_var, (section, key, parser) in env_mappings.items():
            value = os.environ.get(env_var)
            if value is not None:
                try:
                    parsed_value = parser(value)
                except (ValueError, TypeError) as e:
                    raise ConfigurationError(
                        f"Invalid value for {env_var}: {value} ({e})",
                        error_code=ErrorCode.CONFIG_INVALID_VALUE,
                        config_key=env_var,
                        config_value=value
                    )
                if key is None:
                    env_config[section] = parsed_value
                else:
                    env_config.setdefault(section, {})[key] = parsed_value

        return env_config

    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two dictionaries, with override taking precedence."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    @staticmethod
    def _parse_bool(value: Union[str, bool]) -> bool:
        """Parse boolean value from string."""
        if isinstance(value, bool):
            return value
        normalized = value.strip().lower()
        if normalized in {'true', '1', 'yes', 'on', 'enabled'}:
            return True
        if normalized in {'false', '0', 'no', 'off', 'disabled', ''}:
            return False
        raise ValueError(f"not a boolean: {value!r}")

    def validate_config(self, config: Optional[AppConfig] = None) -> List[str]:
        """
        Validate configuration and return list of warnings.

        Args:
            config: Configuration to validate (uses loaded config if None)

        Returns:
            List of validation warnings
        """
        if config is None:
            config = self._config

        if config is None:
            return ["No configuration loaded"]

        warnings = []

        if not config.filters.strict_kinds:
            warnings.append(
                "strict_kinds is disabled: descriptors with unknown kinds "
                "will be treated as value-set filters"
            )
        if not config.filters.validate_fields:
            warnings.append(
                "validate_fields is disabled: filters on missing fields "
                "silently match nothing"
            )

        return warnings

    def generate_schema(self, output_file: Optional[Path] = None) -> Dict[str, Any]:
        """
        Generate JSON schema for configuration.

        Args:
            output_file: Optional file to write schema to

        Returns:
            JSON schema dictionary
        """
        schema = AppConfig.model_json_schema()

        if output_file:
            with open(output_file, 'w', encoding='utf-8') as f:
                json.dump(schema, f, indent=2)

        return schema

    def create_example_config(self, output_file: Path, profile: str = "default") -> None:
        """
        Create example configuration file.

        Args:
            output_file: Path to write configuration file
            profile: Configuration profile (default, permissive)
        """
        if profile == "permissive":
            config = AppConfig(
                filters=FilterConfig(
                    strict_kinds=False,
                    validate_fields=False
                )
            )
        else:
            config = AppConfig()

        with open(output_file, 'w', encoding='utf-8') as f:
            yaml.dump(config.model_dump(mode='json'), f, default_flow_style=False, indent=2)

    @property
    def config(self) -> Optional[AppConfig]:
        """Get the loaded configuration."""
        return self._config
