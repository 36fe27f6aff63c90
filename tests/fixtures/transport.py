"""
Transport double for YCLIENTS SDK tests.
"""

from typing import Any, Dict, List, Optional

from yclients.api.transport import Transport


class RecordingTransport(Transport):
    """Transport double that records every call instead of sending it"""

    def __init__(self, body: str = '{"success": true, "data": []}',
                 error_code: int = 0, error_message: str = ''):
        self.body = body
        self.next_error_code = error_code
        self.next_error_message = error_message
        self.calls: List[Dict[str, Any]] = []
        self._error_code = 0
        self._error_message = ''
        self._reset()

    def _reset(self):
        self._headers: Dict[str, str] = {}
        self._body: Optional[Any] = None
        self._as_json: Optional[bool] = None
        self._timeout: Optional[int] = None

    def set_headers(self, headers):
        self._headers = dict(headers)
        return self

    def set_body(self, data, as_json=False):
        self._body = data
        self._as_json = as_json
        return self

    def set_timeout(self, timeout):
        self._timeout = timeout
        return self

    @property
    def error_code(self):
        return self._error_code

    @property
    def error_message(self):
        return self._error_message

    def get(self, url):
        return self._send('GET', url)

    def post(self, url):
        return self._send('POST', url)

    def put(self, url):
        return self._send('PUT', url)

    def delete(self, url):
        return self._send('DELETE', url)

    def _send(self, method, url):
        self.calls.append({
            'method': method,
            'url': url,
            'headers': self._headers,
            'body': self._body,
            'as_json': self._as_json,
            'timeout': self._timeout,
        })
        self._error_code = self.next_error_code
        self._error_message = self.next_error_message
        self._reset()
        return '' if self._error_code else self.body

    @property
    def last_call(self) -> Dict[str, Any]:
        return self.calls[-1]
