"""YCLIENTS - Python SDK for the YCLIENTS booking platform API."""

from .api import AuthMode, HttpMethod, RequestSpec, YclientsClient
from .api import options
from .core import (
    ApiError,
    ConfigManager,
    DecodeError,
    MissingCredentialError,
    TransportError,
    ValidationError
)

__version__ = "1.0.0"

__all__ = [
    "YclientsClient",
    "AuthMode",
    "HttpMethod",
    "RequestSpec",
    "options",
    "ApiError",
    "ConfigManager",
    "DecodeError",
    "MissingCredentialError",
    "TransportError",
    "ValidationError"
]
