"""
YCLIENTS API Client Package

Request construction, authentication, dispatching and response handling
for the YCLIENTS booking platform REST API.
"""

from .client import YclientsClient
from .authentication import AuthMode, AuthResolver, Credentials
from .dispatcher import RequestDispatcher
from .request_builder import HttpMethod, ParameterBuilder, RequestSpec
from .response_handler import DecodeResult, ResponseHandler, TransportResult
from .transport import RequestsTransport, Transport
from .endpoints import (
    BaseEndpoint,
    BookingEndpoints,
    CompanyEndpoints,
    CustomerEndpoints,
    RecordEndpoints,
    ManagementEndpoints
)

__all__ = [
    'YclientsClient',
    'AuthMode',
    'AuthResolver',
    'Credentials',
    'RequestDispatcher',
    'HttpMethod',
    'ParameterBuilder',
    'RequestSpec',
    'DecodeResult',
    'ResponseHandler',
    'TransportResult',
    'RequestsTransport',
    'Transport',
    'BaseEndpoint',
    'BookingEndpoints',
    'CompanyEndpoints',
    'CustomerEndpoints',
    'RecordEndpoints',
    'ManagementEndpoints'
]
