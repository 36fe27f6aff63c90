"""Core modules for the YCLIENTS SDK.

Configuration, logging and the error hierarchy shared by the API package.
"""

from .config_manager import APIConfig, ClientConfig, ConfigManager, LoggingConfig
from .error_handler import (
    ApiError,
    ConfigurationError,
    DecodeError,
    ErrorSeverity,
    MissingCredentialError,
    TransportError,
    ValidationError
)
from .logging_manager import LoggingManager

__all__ = [
    "APIConfig",
    "ClientConfig",
    "ConfigManager",
    "LoggingConfig",
    "ApiError",
    "ConfigurationError",
    "DecodeError",
    "ErrorSeverity",
    "MissingCredentialError",
    "TransportError",
    "ValidationError",
    "LoggingManager"
]
