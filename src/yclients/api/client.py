"""
YCLIENTS API Client

Owns the partner credentials and the transport, and wires parameter
building, authentication, dispatching and response handling into a single
``execute`` call used by every endpoint group.
"""

import logging
from typing import Any, Optional

from ..core.config_manager import DEFAULT_ACCEPT, DEFAULT_BASE_URL, ClientConfig
from ..core.logging_manager import LoggingManager
from .authentication import AuthMode, AuthResolver, Credentials
from .dispatcher import DEFAULT_TIMEOUT, RequestDispatcher
from .endpoints.booking_endpoints import BookingEndpoints
from .endpoints.company_endpoints import CompanyEndpoints
from .endpoints.customer_endpoints import CustomerEndpoints
from .endpoints.management_endpoints import ManagementEndpoints
from .endpoints.record_endpoints import RecordEndpoints
from .request_builder import HttpMethod, ParameterBuilder, RequestSpec
from .response_handler import ResponseHandler
from .transport import RequestsTransport, Transport


class YclientsClient:
    """
    Client for the YCLIENTS REST API.

    Calls are synchronous and blocking. The transport is mutated before
    every request, so an instance must not be used from several threads at
    once; create one client per thread instead.

    Endpoint groups:
    - ``booking``: online booking widget
    - ``companies``: companies, services, events and staff
    - ``customers``: client base
    - ``records``: records, schedules, timetable and comments
    - ``management``: users, accounts, SMS, storages and webhooks
    """

    def __init__(
        self,
        partner_token: Optional[str] = None,
        transport: Optional[Transport] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: int = DEFAULT_TIMEOUT,
        accept: str = DEFAULT_ACCEPT
    ):
        """
        Initialize the client

        Args:
            partner_token: Token identifying the partner application
            transport: Transport to use, a RequestsTransport by default
            base_url: API root all paths are relative to
            timeout: Per-request timeout in seconds
            accept: Accept header sent with every request
        """
        self.credentials = Credentials(partner_token)
        self.transport = transport or RequestsTransport()
        self.parameter_builder = ParameterBuilder()
        self.auth_resolver = AuthResolver(self.credentials, accept)
        self.dispatcher = RequestDispatcher(self.transport, self.auth_resolver, base_url, timeout)
        self.response_handler = ResponseHandler()
        self.logger = logging.getLogger(__name__)

        self.booking = BookingEndpoints(self)
        self.companies = CompanyEndpoints(self)
        self.customers = CustomerEndpoints(self)
        self.records = RecordEndpoints(self)
        self.management = ManagementEndpoints(self)

    @classmethod
    def from_config(cls, config: ClientConfig, transport: Optional[Transport] = None) -> 'YclientsClient':
        """Build a client from a loaded configuration and set up logging"""
        LoggingManager().configure(
            level=config.logging.level,
            log_to_console=config.logging.log_to_console,
            file_path=config.logging.file_path
        )

        api = config.api
        if transport is None:
            transport = RequestsTransport(verify_ssl=api.verify_ssl, user_agent=api.user_agent)

        return cls(
            partner_token=api.partner_token.get_secret_value() if api.partner_token else None,
            transport=transport,
            base_url=api.base_url,
            timeout=api.timeout,
            accept=api.accept
        )

    @property
    def partner_token(self) -> Optional[str]:
        return self.credentials.partner_token

    def set_partner_token(self, partner_token: str) -> 'YclientsClient':
        """Replace the partner token used by subsequent calls"""
        self.credentials.partner_token = partner_token
        self.logger.info("Partner token updated")
        return self

    def execute(self, spec: RequestSpec) -> Any:
        """
        Send one request and decode its response

        Args:
            spec: Request description

        Returns:
            Decoded JSON value, or None for an empty body

        Raises:
            MissingCredentialError: If the call needs a partner token
            TransportError: If the HTTP call failed
            DecodeError: If the response is not JSON
        """
        result = self.dispatcher.dispatch(spec)
        return self.response_handler.handle(result)

    def request(
        self,
        path: str,
        parameters: Any = None,
        method: HttpMethod = HttpMethod.GET,
        auth: Optional[AuthMode] = None
    ) -> Any:
        """Call an arbitrary resource path, partner auth by default"""
        return self.execute(RequestSpec(
            path=path,
            parameters=parameters if parameters is not None else {},
            method=HttpMethod(method),
            auth=auth if auth is not None else AuthMode.partner()
        ))

    def close(self):
        """Close the transport if it holds resources"""
        close = getattr(self.transport, 'close', None)
        if callable(close):
            close()

    def __enter__(self) -> 'YclientsClient':
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
