"""
Transport Layer for the YCLIENTS API Client

Defines the transport interface the request dispatcher talks to and a
``requests``-based implementation of it. A transport performs one blocking
HTTP call at a time and reports low-level failures through a numeric error
code instead of raising.
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from urllib.parse import urlencode

import requests
from requests.exceptions import (
    RequestException, ConnectionError, Timeout,
    SSLError, TooManyRedirects, InvalidURL, MissingSchema
)

# Numeric codes reported for low-level failures. 0 means success.
ERR_NONE = 0
ERR_GENERIC = 1
ERR_INVALID_URL = 3
ERR_CONNECT = 7
ERR_TIMEOUT = 28
ERR_SSL = 35
ERR_TOO_MANY_REDIRECTS = 47


class Transport(ABC):
    """
    Stateful HTTP transport.

    Headers, body and timeout are configured on the instance and consumed by
    the next call; an instance therefore serves one request at a time and
    must not be shared between threads.
    """

    @abstractmethod
    def get(self, url: str) -> str:
        """Perform a GET request and return the response body"""
        pass

    @abstractmethod
    def post(self, url: str) -> str:
        """Perform a POST request and return the response body"""
        pass

    @abstractmethod
    def put(self, url: str) -> str:
        """Perform a PUT request and return the response body"""
        pass

    @abstractmethod
    def delete(self, url: str) -> str:
        """Perform a DELETE request and return the response body"""
        pass

    @abstractmethod
    def set_headers(self, headers: Dict[str, str]) -> 'Transport':
        """Set headers for the next request"""
        pass

    @abstractmethod
    def set_body(self, data: Dict[str, Any], as_json: bool = False) -> 'Transport':
        """Set the body of the next request, JSON or form encoded"""
        pass

    @abstractmethod
    def set_timeout(self, timeout: int) -> 'Transport':
        """Set the timeout in seconds for the next request"""
        pass

    @property
    @abstractmethod
    def error_code(self) -> int:
        """Error code of the last request, 0 when it succeeded"""
        pass

    @property
    @abstractmethod
    def error_message(self) -> str:
        """Error message of the last request, empty when it succeeded"""
        pass


class RequestsTransport(Transport):
    """
    Transport backed by a persistent ``requests.Session``.

    HTTP error statuses are not transport failures: a 4xx/5xx response is
    returned as a normal body. Only exceptions raised by ``requests`` are
    turned into error codes.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        verify_ssl: bool = True,
        max_redirects: int = 10,
        user_agent: Optional[str] = None
    ):
        """
        Initialize the transport

        Args:
            session: Session to reuse, a new one is created when omitted
            verify_ssl: Whether to verify SSL certificates
            max_redirects: Maximum number of redirects to follow
            user_agent: User agent string for requests
        """
        self.session = session or requests.Session()
        self.session.verify = verify_ssl
        self.session.max_redirects = max_redirects
        if user_agent:
            self.session.headers['User-Agent'] = user_agent

        self.logger = logging.getLogger(__name__)
        self.last_status_code: Optional[int] = None
        self._error_code = ERR_NONE
        self._error_message = ''
        self._reset()

    def _reset(self):
        """Forget per-request state after every call"""
        self._headers: Dict[str, str] = {}
        self._body: Optional[str] = None
        self._timeout: Optional[int] = None

    def set_headers(self, headers: Dict[str, str]) -> 'RequestsTransport':
        self._headers = dict(headers)
        return self

    def set_body(self, data: Dict[str, Any], as_json: bool = False) -> 'RequestsTransport':
        if as_json:
            self._body = json.dumps(data, ensure_ascii=False)
        else:
            self._body = urlencode(data, doseq=True)
        return self

    def set_timeout(self, timeout: int) -> 'RequestsTransport':
        self._timeout = timeout
        return self

    @property
    def error_code(self) -> int:
        return self._error_code

    @property
    def error_message(self) -> str:
        return self._error_message

    def get(self, url: str) -> str:
        return self._request('GET', url)

    def post(self, url: str) -> str:
        return self._request('POST', url)

    def put(self, url: str) -> str:
        return self._request('PUT', url)

    def delete(self, url: str) -> str:
        return self._request('DELETE', url)

    def _request(self, method: str, url: str) -> str:
        """Execute the configured request and record its outcome"""
        self._error_code = ERR_NONE
        self._error_message = ''
        self.last_status_code = None

        data = self._body.encode('utf-8') if self._body is not None else None

        try:
            response = self.session.request(
                method=method,
                url=url,
                headers=self._headers,
                data=data,
                timeout=self._timeout
            )
            self.last_status_code = response.status_code
            self.logger.debug(f"{method} {url} -> HTTP {response.status_code}")
            return response.text

        except RequestException as e:
            self._error_code = self._classify(e)
            self._error_message = str(e)
            self.logger.warning(f"{method} {url} failed with transport error {self._error_code}: {e}")
            return ''

        finally:
            self._reset()

    @staticmethod
    def _classify(error: RequestException) -> int:
        """Map a requests exception to a numeric error code"""
        # SSLError subclasses ConnectionError, Timeout may subclass it too
        if isinstance(error, SSLError):
            return ERR_SSL
        if isinstance(error, Timeout):
            return ERR_TIMEOUT
        if isinstance(error, ConnectionError):
            return ERR_CONNECT
        if isinstance(error, TooManyRedirects):
            return ERR_TOO_MANY_REDIRECTS
        if isinstance(error, (InvalidURL, MissingSchema)):
            return ERR_INVALID_URL
        return ERR_GENERIC

    def close(self):
        """Close the underlying session"""
        self.session.close()
        self.logger.info("HTTP transport session closed")
