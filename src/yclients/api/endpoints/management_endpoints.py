"""
Management Endpoints for the YCLIENTS API Client

Company-level administration: users, cash accounts, storages, SMS
mailings and webhook settings.
"""

from typing import Any, Dict, List

from ..authentication import AuthMode
from ..request_builder import HttpMethod
from .base_endpoint import BaseEndpoint


class ManagementEndpoints(BaseEndpoint):
    """Company administration API endpoints"""

    def get_company_users(self, company_id: int, user_token: str) -> Any:
        return self._request(
            'get_company_users',
            self._path('company_users', company_id),
            auth=AuthMode.partner_plus_user(user_token)
        )

    def get_accounts(self, company_id: int, user_token: str) -> Any:
        """List cash accounts of the company"""
        return self._request(
            'get_accounts',
            self._path('accounts', company_id),
            auth=AuthMode.partner_plus_user(user_token)
        )

    def send_sms(self, company_id: int, client_ids: List[int], text: str, user_token: str) -> Any:
        """Send an SMS to the given clients"""
        return self._request(
            'send_sms',
            self._path('sms/clients/by_id', company_id),
            {'client_ids': [int(client_id) for client_id in client_ids], 'text': text},
            HttpMethod.POST, AuthMode.partner_plus_user(user_token)
        )

    def get_storages(self, company_id: int, user_token: str) -> Any:
        return self._request(
            'get_storages',
            self._path('storages', company_id),
            auth=AuthMode.partner_plus_user(user_token)
        )

    def get_hooks(self, company_id: int, user_token: str) -> Any:
        """Get webhook settings"""
        return self._request(
            'get_hooks',
            self._path('hooks_settings', company_id),
            auth=AuthMode.partner_plus_user(user_token)
        )

    def post_hooks(self, company_id: int, fields: Dict[str, Any], user_token: str) -> Any:
        """
        Change webhook settings

        Raises:
            ValidationError: If fields has no url or no active flag
        """
        self.params.require(fields, ('url',), 'Webhook url is required.')
        self.params.require(fields, ('active',), 'Webhook active flag is required.')

        return self._request(
            'post_hooks',
            self._path('hooks_settings', company_id),
            dict(fields), HttpMethod.POST, AuthMode.partner_plus_user(user_token)
        )
