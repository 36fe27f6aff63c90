"""
Request Dispatcher for the YCLIENTS API Client

Combines a RequestSpec with resolved auth headers and drives one transport
call. GET parameters go to the query string, every other method sends them
as a JSON body.
"""

import logging
from typing import Any, Dict

from .authentication import AuthResolver
from .request_builder import HttpMethod, RequestSpec, encode_query
from .response_handler import TransportResult
from .transport import Transport

DEFAULT_TIMEOUT = 30

SENSITIVE_HEADERS = ('authorization',)


class RequestDispatcher:
    """
    Performs API calls through a stateful transport.

    The transport's headers, body and timeout are overwritten before every
    call, so one dispatcher must not run two requests at the same time.
    """

    def __init__(
        self,
        transport: Transport,
        auth_resolver: AuthResolver,
        base_url: str,
        timeout: int = DEFAULT_TIMEOUT
    ):
        self.transport = transport
        self.auth_resolver = auth_resolver
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.logger = logging.getLogger(__name__)

    def build_url(self, spec: RequestSpec) -> str:
        """Absolute URL of the call, including the query string for GET"""
        url = f"{self.base_url}/{spec.path.lstrip('/')}"
        if spec.parameters and spec.method == HttpMethod.GET:
            url = f"{url}?{encode_query(spec.parameters)}"
        return url

    def dispatch(self, spec: RequestSpec) -> TransportResult:
        """
        Execute one call

        Args:
            spec: Path, parameters, method and auth mode of the call

        Returns:
            Raw body plus the transport's error signal

        Raises:
            MissingCredentialError: If the auth mode cannot be satisfied;
                nothing is sent in that case
        """
        method = HttpMethod(spec.method)
        headers = self.auth_resolver.resolve(spec.auth)
        url = self.build_url(spec)

        self.transport.set_headers(headers).set_timeout(self.timeout)
        if spec.parameters and method != HttpMethod.GET:
            self.transport.set_body(spec.parameters, as_json=True)

        self.logger.info(f"Making {method.value} request to {url}")
        self.logger.debug(f"Request headers: {self._sanitize_headers(headers)}")

        senders = {
            HttpMethod.GET: self.transport.get,
            HttpMethod.POST: self.transport.post,
            HttpMethod.PUT: self.transport.put,
            HttpMethod.DELETE: self.transport.delete,
        }
        body = senders[method](url)

        return TransportResult(
            body=body,
            error_code=self.transport.error_code,
            error_message=self.transport.error_message
        )

    @staticmethod
    def _sanitize_headers(headers: Dict[str, Any]) -> Dict[str, Any]:
        """Mask credentials before headers are logged"""
        return {
            key: '[MASKED]' if key.lower() in SENSITIVE_HEADERS else value
            for key, value in headers.items()
        }
