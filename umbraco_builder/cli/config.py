"""Run configuration loading and validation.

This module loads the optional umbraco-builder.yaml settings file. Credentials
never live in this file; they come from the environment (see
umbraco_builder.management_client.auth).
"""

from typing import Any, Dict, List

import yaml

from .errors import ConfigError, ConfigFilesystemError
from .models import BuilderConfig, STEPS


class ConfigLoader:
    """Handles configuration file loading and validation.

    Config file structure (every key optional):
        views_dir: "Views"
        media_dir: "Media"
        page_size: 100
        timeout: 30
        culture: "en-US"
        steps:
          - templates
          - media

    A missing or empty file yields the defaults.
    """

    DEFAULT_CONFIG_FILE = 'umbraco-builder.yaml'

    _STRING_FIELDS = ('views_dir', 'media_dir', 'culture')
    _KNOWN_FIELDS = ('views_dir', 'media_dir', 'page_size', 'timeout', 'culture', 'steps')

    @classmethod
    def load(cls, config_path: str) -> BuilderConfig:
        """Load and parse configuration from a YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            BuilderConfig with parsed settings

        Raises:
            ConfigFilesystemError: If file cannot be read (except FileNotFoundError)
            ConfigError: If config file is invalid or malformed
        """
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            return BuilderConfig()
        except PermissionError:
            raise ConfigFilesystemError(
                config_path,
                'read',
                'Permission denied'
            )
        except OSError as e:
            raise ConfigFilesystemError(
                config_path,
                'read',
                str(e)
            )

        if not content.strip():
            return BuilderConfig()

        try:
            config_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(
                f"Invalid YAML syntax: {str(e)}"
            )

        if config_dict is None:
            return BuilderConfig()

        if not isinstance(config_dict, dict):
            raise ConfigError(
                f"Config must be a YAML dictionary, got {type(config_dict).__name__}"
            )

        return cls._parse_config(config_dict)

    @classmethod
    def _parse_config(cls, config_dict: Dict[str, Any]) -> BuilderConfig:
        unknown = sorted(set(config_dict) - set(cls._KNOWN_FIELDS))
        if unknown:
            raise ConfigError(f"Unknown config field(s): {', '.join(unknown)}")

        config = BuilderConfig()

        for field_name in cls._STRING_FIELDS:
            if field_name in config_dict:
                value = config_dict[field_name]
                if not isinstance(value, str) or not value.strip():
                    raise ConfigError("must be a non-empty string", field_name)
                setattr(config, field_name, value)

        if 'page_size' in config_dict:
            page_size = config_dict['page_size']
            # bool is an int subclass
            if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size < 1:
                raise ConfigError("must be a positive integer", 'page_size')
            config.page_size = page_size

        if 'timeout' in config_dict:
            timeout = config_dict['timeout']
            if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
                raise ConfigError("must be a positive number", 'timeout')
            config.timeout = timeout

        if 'steps' in config_dict:
            config.steps = cls.validate_steps(config_dict['steps'], 'steps')

        return config

    @staticmethod
    def validate_steps(steps: Any, config_field: str = 'steps') -> List[str]:
        """Validate step names and return them in execution order.

        Args:
            steps: Requested step names
            config_field: Field name reported in errors

        Returns:
            The requested steps, deduplicated and sorted into run order

        Raises:
            ConfigError: If steps is not a non-empty list of known step names
        """
        if not isinstance(steps, list) or not steps:
            raise ConfigError("must be a non-empty list of step names", config_field)

        unknown = [step for step in steps if step not in STEPS]
        if unknown:
            raise ConfigError(
                f"unknown step(s): {', '.join(str(step) for step in unknown)}. "
                f"Valid steps: {', '.join(STEPS)}",
                config_field
            )

        return [step for step in STEPS if step in steps]
