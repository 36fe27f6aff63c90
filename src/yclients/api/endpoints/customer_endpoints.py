"""
Customer Endpoints for the YCLIENTS API Client

The client base of a company. The API calls these resources "clients";
the module name avoids confusion with the HTTP client.
"""

from typing import Any, Dict, Optional

from ..authentication import AuthMode
from ..options import ClientsOptions
from ..request_builder import HttpMethod
from .base_endpoint import BaseEndpoint


class CustomerEndpoints(BaseEndpoint):
    """Client base API endpoints. Every call acts on behalf of a user."""

    def get_clients(self, company_id: int, user_token: str, options: Optional[ClientsOptions] = None) -> Any:
        """Search the client base"""
        return self._request(
            'get_clients',
            self._path('clients', company_id),
            self.params.build(options),
            auth=AuthMode.partner_plus_user(user_token)
        )

    def post_clients(
        self,
        company_id: int,
        name: str,
        phone: int,
        user_token: str,
        fields: Optional[Dict[str, Any]] = None
    ) -> Any:
        """Add a client, extra fields override name and phone"""
        return self._request(
            'post_clients',
            self._path('clients', company_id),
            self.params.merge({'name': name, 'phone': phone}, fields),
            HttpMethod.POST, AuthMode.partner_plus_user(user_token)
        )

    def get_client(self, company_id: int, client_id: int, user_token: str) -> Any:
        return self._request(
            'get_client',
            self._path('client', company_id, client_id),
            auth=AuthMode.partner_plus_user(user_token)
        )

    def put_client(self, company_id: int, client_id: int, fields: Dict[str, Any], user_token: str) -> Any:
        return self._request(
            'put_client',
            self._path('client', company_id, client_id),
            dict(fields), HttpMethod.PUT, AuthMode.partner_plus_user(user_token)
        )

    def delete_client(self, company_id: int, client_id: int, user_token: str) -> Any:
        return self._request(
            'delete_client',
            self._path('client', company_id, client_id),
            method=HttpMethod.DELETE, auth=AuthMode.partner_plus_user(user_token)
        )
