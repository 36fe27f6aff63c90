"""
Response Handler for the YCLIENTS API Client

Converts the outcome of a transport call into a decoded JSON value or a
typed error. HTTP status codes are not inspected: an error payload with a
4xx/5xx status is returned like any other body.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

from ..core.error_handler import DecodeError, TransportError


@dataclass(frozen=True)
class TransportResult:
    """Raw outcome of one transport call"""
    body: str
    error_code: int = 0
    error_message: str = ''

    @property
    def failed(self) -> bool:
        return bool(self.error_code)


@dataclass(frozen=True)
class DecodeResult:
    """
    Outcome of decoding a response body.

    Exactly one of three cases holds: a decoded value, an empty body, or a
    decode failure with its reason.
    """
    value: Any = None
    error: Optional[str] = None
    empty: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


class ResponseHandler:
    """
    Handles transport results.

    A transport failure is raised before the body is looked at. A body that
    is not JSON raises DecodeError; an empty body decodes to None.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def decode(self, body: Optional[str]) -> DecodeResult:
        """Decode a body without raising"""
        if body is None or not body.strip():
            return DecodeResult(empty=True)

        try:
            return DecodeResult(value=json.loads(body))
        except ValueError as e:
            return DecodeResult(error=f"Invalid JSON response: {e}")

    def handle(self, result: TransportResult) -> Any:
        """
        Process a transport result

        Args:
            result: Raw body plus transport error signal

        Returns:
            Decoded JSON value, or None for an empty body

        Raises:
            TransportError: If the transport reported a failure
            DecodeError: If the body is not valid JSON
        """
        if result.failed:
            self.logger.error(f"Transport error {result.error_code}: {result.error_message}")
            raise TransportError(result.error_message, result.error_code)

        decoded = self.decode(result.body)
        if not decoded.ok:
            self.logger.error(f"{decoded.error} (body: {self._preview(result.body)})")
            raise DecodeError(decoded.error, raw_body=result.body)

        if decoded.empty:
            self.logger.debug("Response body is empty")

        return decoded.value

    @staticmethod
    def _preview(body: str, limit: int = 200) -> str:
        if len(body) > limit:
            return body[:limit] + '... [TRUNCATED]'
        return body
