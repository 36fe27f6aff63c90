"""
Base Endpoint Class for the YCLIENTS API

Common functionality for every endpoint group: request execution through
the client, parameter helpers, and standardized logging of failures.
"""

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional

from ...core.error_handler import ApiError, log_level_for
from ..authentication import AuthMode
from ..request_builder import HttpMethod, RequestSpec, join_path

if TYPE_CHECKING:
    from ..client import YclientsClient


class BaseEndpoint:
    """
    Base class for YCLIENTS endpoint groups.

    Subclasses only describe calls: the path, the parameters, the method
    and the auth mode. Building, sending and decoding is done by the client.
    """

    def __init__(self, client: 'YclientsClient'):
        """
        Initialize endpoint with the API client

        Args:
            client: Configured YclientsClient instance
        """
        self.client = client
        self.params = client.parameter_builder
        self.logger = logging.getLogger(self.__class__.__module__)

    @staticmethod
    def _path(*segments: Any) -> str:
        return join_path(*segments)

    def _request(
        self,
        operation: str,
        path: str,
        parameters: Any = None,
        method: HttpMethod = HttpMethod.GET,
        auth: Optional[AuthMode] = None
    ) -> Any:
        """
        Execute a call and log its outcome

        Args:
            operation: Name of the operation for logging
            path: Resource path relative to the API root
            parameters: Query or body parameters
            method: HTTP method
            auth: Auth mode, partner only when omitted

        Returns:
            Decoded response
        """
        spec = RequestSpec(
            path=path,
            parameters=parameters if parameters is not None else {},
            method=method,
            auth=auth if auth is not None else AuthMode.partner()
        )

        try:
            result = self.client.execute(spec)
        except ApiError as e:
            self._handle_request_error(e, operation, path=path)
            raise

        self._log_operation(operation, path=path)
        return result

    def _handle_request_error(self, error: ApiError, operation: str, **context):
        """
        Log a failed operation at a level matching the error severity

        Args:
            error: The exception that occurred
            operation: Description of the operation that failed
            **context: Additional context for logging
        """
        error_context = {
            'operation': operation,
            'endpoint_class': self.__class__.__name__,
            'timestamp': datetime.now().isoformat(),
            **context
        }
        self.logger.log(
            log_level_for(error),
            f"{type(error).__name__} during {operation}: {error}",
            extra=error_context
        )

    def _log_operation(self, operation: str, **context):
        """Log successful operations"""
        self.logger.info(f"Successfully completed {operation}", extra=context)
