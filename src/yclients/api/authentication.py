"""
Authentication for the YCLIENTS API Client

The API authenticates an application (the partner) with a bearer token and
lets that application optionally act on behalf of an end user by appending
a user token to the same Authorization header.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from ..core.error_handler import MissingCredentialError, ValidationError

CONTENT_TYPE = 'application/json'
ACCEPT = 'application/vnd.api.v2+json'


class AuthKind:
    NONE = 'none'
    PARTNER = 'partner'
    PARTNER_PLUS_USER = 'partner_plus_user'


@dataclass(frozen=True)
class AuthMode:
    """Authentication requested by a single call"""
    kind: str
    user_token: Optional[str] = None

    @classmethod
    def none(cls) -> 'AuthMode':
        return cls(AuthKind.NONE)

    @classmethod
    def partner(cls) -> 'AuthMode':
        return cls(AuthKind.PARTNER)

    @classmethod
    def partner_plus_user(cls, user_token: str) -> 'AuthMode':
        if not user_token:
            raise ValidationError("User token must be a non-empty string")
        return cls(AuthKind.PARTNER_PLUS_USER, user_token)

    @classmethod
    def for_user(cls, user_token: Optional[str]) -> 'AuthMode':
        """Partner plus user when a user token is given, partner only otherwise"""
        return cls.partner_plus_user(user_token) if user_token else cls.partner()

    @property
    def requires_partner(self) -> bool:
        return self.kind != AuthKind.NONE


@dataclass
class Credentials:
    """Client-wide credentials"""
    partner_token: Optional[str] = None


class AuthResolver:
    """
    Turns an AuthMode into request headers.

    Every set of headers carries the fixed JSON content type and the v2
    Accept header; the Authorization header depends on the mode.
    """

    def __init__(self, credentials: Credentials, accept: str = ACCEPT):
        self.credentials = credentials
        self.accept = accept
        self.logger = logging.getLogger(__name__)

    def resolve(self, mode: AuthMode) -> Dict[str, str]:
        """
        Build the headers for a call

        Args:
            mode: Authentication requested by the call

        Returns:
            Header mapping

        Raises:
            MissingCredentialError: If the mode needs a partner token and
                none is configured
        """
        headers = {
            'Content-Type': CONTENT_TYPE,
            'Accept': self.accept,
        }

        if not mode.requires_partner:
            return headers

        partner_token = self.credentials.partner_token
        if not partner_token:
            self.logger.error("Partner token is required but not configured")
            raise MissingCredentialError("Partner token is not configured")

        authorization = f'Bearer {partner_token}'
        if mode.kind == AuthKind.PARTNER_PLUS_USER:
            authorization += f', User {mode.user_token}'

        headers['Authorization'] = authorization
        return headers
