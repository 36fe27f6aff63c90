"""Configuration Management for the YCLIENTS SDK

Handles loading and validation of client configuration. Supports a YAML
file with environment variable overrides on top of model defaults.
"""

import os
import logging
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError, field_validator

from .error_handler import ConfigurationError

DEFAULT_BASE_URL = "https://api.yclients.com/api/v1"
DEFAULT_ACCEPT = "application/vnd.api.v2+json"


class APIConfig(BaseModel):
    """Configuration for the YCLIENTS REST API."""
    base_url: str = Field(default=DEFAULT_BASE_URL)
    timeout: int = Field(default=30, ge=1, le=300)
    accept: str = Field(default=DEFAULT_ACCEPT)
    partner_token: Optional[SecretStr] = None
    verify_ssl: bool = Field(default=True)
    user_agent: str = Field(default="yclients-python/1.0.0")

    @field_validator('base_url')
    @classmethod
    def validate_base_url(cls, v):
        """Validate base URL scheme"""
        if not v.startswith(('http://', 'https://')):
            raise ValueError("Base URL must start with http:// or https://")
        return v.rstrip('/')


class LoggingConfig(BaseModel):
    """Configuration for logging."""
    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    log_to_console: bool = Field(default=False)
    file_path: Optional[str] = None


class ClientConfig(BaseModel):
    """Main SDK configuration."""
    api: APIConfig = Field(default_factory=APIConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(validate_assignment=True)


class ConfigManager:
    """Loads the SDK configuration from YAML and the environment.

    Precedence, lowest first: model defaults, the YAML file, then
    ``YCLIENTS_<SECTION>_<KEY>`` environment variables.
    """

    ENV_PREFIX = "YCLIENTS_"
    SECTIONS = ('api', 'logging')

    def __init__(self, config_path: Optional[Union[str, Path]] = None,
                 environ: Optional[Dict[str, str]] = None):
        """Initialize configuration manager.

        Args:
            config_path: Path of a YAML configuration file
            environ: Environment mapping, defaults to os.environ
        """
        self.config_path = Path(config_path) if config_path else None
        self.environ = os.environ if environ is None else environ
        self.logger = logging.getLogger(__name__)
        self._config: Optional[ClientConfig] = None
        self._lock = threading.Lock()

    def load_config(self) -> ClientConfig:
        """Load and validate configuration.

        Returns:
            Validated client configuration

        Raises:
            ConfigurationError: If the file or the values are invalid
        """
        with self._lock:
            if self._config:
                return self._config

            config_data: Dict[str, Any] = {}

            if self.config_path is not None:
                if not self.config_path.exists():
                    raise ConfigurationError(f"Configuration file not found: {self.config_path}")
                self.logger.info(f"Loading config from {self.config_path}")
                self._deep_merge(config_data, self._load_yaml_file(self.config_path))

            env_overrides = self._get_env_overrides()
            if env_overrides:
                self.logger.info(f"Applying environment overrides: {list(env_overrides.keys())}")
                self._deep_merge(config_data, env_overrides)

            try:
                self._config = ClientConfig(**config_data)
            except ValidationError as e:
                self.logger.error(f"Configuration validation failed: {e}")
                raise ConfigurationError(f"Invalid configuration: {e}") from e

            return self._config

    def reload_config(self) -> ClientConfig:
        """Drop the cached configuration and load it again."""
        with self._lock:
            self._config = None
        return self.load_config()

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load YAML configuration file.

        Returns:
            Configuration dictionary
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            self.logger.error(f"Failed to parse YAML file {file_path}: {e}")
            raise ConfigurationError(f"Invalid YAML in {file_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Top level of {file_path} must be a mapping")
        return data

    def _get_env_overrides(self) -> Dict[str, Any]:
        """Get configuration overrides from environment variables.

        Environment variables follow pattern: YCLIENTS_<SECTION>_<KEY>
        Example: YCLIENTS_API_PARTNER_TOKEN -> api.partner_token
        """
        overrides: Dict[str, Any] = {}

        for key, value in self.environ.items():
            if not key.startswith(self.ENV_PREFIX):
                continue

            section, _, field = key[len(self.ENV_PREFIX):].lower().partition('_')
            if section not in self.SECTIONS or not field:
                continue

            # pydantic coerces the raw strings to the field types
            overrides.setdefault(section, {})[field] = value

        return overrides

    def _deep_merge(self, base_dict: Dict[str, Any], update_dict: Dict[str, Any]):
        """Recursively merge update_dict into base_dict."""
        for key, value in update_dict.items():
            if isinstance(value, dict) and isinstance(base_dict.get(key), dict):
                self._deep_merge(base_dict[key], value)
            else:
                base_dict[key] = value
