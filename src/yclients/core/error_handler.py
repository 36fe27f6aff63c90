"""Error Types for the YCLIENTS SDK

Every failure the SDK can report derives from ApiError and carries a
message, an optional numeric code and a severity used for logging.
"""

import logging
from enum import Enum
from typing import Optional


class ErrorSeverity(Enum):
    """Error severity levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ApiError(Exception):
    """Base exception class for the YCLIENTS SDK."""

    severity = ErrorSeverity.MEDIUM

    def __init__(self, message: str, code: Optional[int] = None,
                 severity: Optional[ErrorSeverity] = None):
        self.message = message
        self.code = code
        if severity is not None:
            self.severity = severity
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.code:
            return f"{self.message} (code {self.code})"
        return self.message


class ConfigurationError(ApiError):
    """Error raised when configuration is invalid."""
    severity = ErrorSeverity.HIGH


class ValidationError(ApiError):
    """Error raised when a call is missing a required field.

    Always raised before anything reaches the transport.
    """
    severity = ErrorSeverity.LOW


class MissingCredentialError(ApiError):
    """Error raised when a call needs the partner token and none is set."""
    severity = ErrorSeverity.HIGH


class TransportError(ApiError):
    """Error raised when the underlying HTTP call failed."""
    severity = ErrorSeverity.HIGH


class DecodeError(ApiError):
    """Error raised when a response body is not valid JSON."""

    def __init__(self, message: str, raw_body: str = ''):
        super().__init__(message)
        self.raw_body = raw_body


_LOG_LEVELS = {
    ErrorSeverity.LOW: logging.INFO,
    ErrorSeverity.MEDIUM: logging.WARNING,
    ErrorSeverity.HIGH: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def log_level_for(error: ApiError) -> int:
    """Map an SDK error to the logging level it should be reported at.

    Args:
        error: The error to report

    Returns:
        Numeric logging level
    """
    return _LOG_LEVELS[error.severity]
