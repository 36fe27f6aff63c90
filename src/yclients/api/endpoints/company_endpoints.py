"""
Company Endpoints for the YCLIENTS API Client

Companies and the catalogue that belongs to them: service categories,
services, events and staff.
"""

from typing import Any, Dict, Optional

from ..authentication import AuthMode
from ..options import CompaniesOptions, ServiceCategoriesOptions, ServicesOptions
from ..request_builder import HttpMethod
from .base_endpoint import BaseEndpoint


class CompanyEndpoints(BaseEndpoint):
    """
    Company management API endpoints.

    Free-form ``fields`` maps are sent as-is on top of any required fields
    the method takes explicitly.
    """

    # Companies

    def get_companies(self, options: Optional[CompaniesOptions] = None, user_token: Optional[str] = None) -> Any:
        """List companies, optionally only those the user manages"""
        if options is not None and options.my and not user_token:
            self.logger.warning("get_companies with my=True expects a user token")

        return self._request(
            'get_companies', 'companies',
            self.params.build(options),
            auth=AuthMode.for_user(user_token)
        )

    def post_company(self, fields: Dict[str, Any], user_token: str) -> Any:
        """
        Create a company

        Raises:
            ValidationError: If fields has no title
        """
        self.params.require(fields, ('title',), 'Company title is required.')
        return self._request(
            'post_company', 'companies', dict(fields),
            HttpMethod.POST, AuthMode.partner_plus_user(user_token)
        )

    def get_company(self, company_id: int) -> Any:
        return self._request('get_company', self._path('company', company_id))

    def put_company(self, company_id: int, fields: Dict[str, Any], user_token: str) -> Any:
        return self._request(
            'put_company', self._path('company', company_id), dict(fields),
            HttpMethod.PUT, AuthMode.partner_plus_user(user_token)
        )

    def delete_company(self, company_id: int) -> Any:
        return self._request(
            'delete_company', self._path('company', company_id),
            method=HttpMethod.DELETE
        )

    # Service categories

    def get_service_categories(
        self,
        company_id: int,
        category_id: int,
        options: Optional[ServiceCategoriesOptions] = None
    ) -> Any:
        return self._request(
            'get_service_categories',
            self._path('service_categories', company_id, category_id),
            self.params.build(options)
        )

    def post_service_categories(
        self,
        company_id: int,
        category_id: int,
        fields: Dict[str, Any],
        user_token: str
    ) -> Any:
        return self._request(
            'post_service_categories',
            self._path('service_categories', company_id, category_id),
            dict(fields), HttpMethod.POST, AuthMode.partner_plus_user(user_token)
        )

    def get_service_category(self, company_id: int, category_id: int) -> Any:
        return self._request(
            'get_service_category',
            self._path('service_category', company_id, category_id)
        )

    def put_service_category(
        self,
        company_id: int,
        category_id: int,
        fields: Dict[str, Any],
        user_token: str
    ) -> Any:
        return self._request(
            'put_service_category',
            self._path('service_category', company_id, category_id),
            dict(fields), HttpMethod.PUT, AuthMode.partner_plus_user(user_token)
        )

    def delete_service_category(self, company_id: int, category_id: int, user_token: str) -> Any:
        return self._request(
            'delete_service_category',
            self._path('service_category', company_id, category_id),
            method=HttpMethod.DELETE, auth=AuthMode.partner_plus_user(user_token)
        )

    # Services

    def get_services(
        self,
        company_id: int,
        service_id: Optional[int] = None,
        options: Optional[ServicesOptions] = None
    ) -> Any:
        """Get one service, or every service of the company when no id is given"""
        return self._request(
            'get_services',
            self._path('services', company_id, service_id),
            self.params.build(options)
        )

    def post_services(
        self,
        company_id: int,
        service_id: int,
        category_id: int,
        title: str,
        user_token: str,
        fields: Optional[Dict[str, Any]] = None
    ) -> Any:
        parameters = self.params.merge({'category_id': category_id, 'title': title}, fields)
        return self._request(
            'post_services',
            self._path('services', company_id, service_id),
            parameters, HttpMethod.POST, AuthMode.partner_plus_user(user_token)
        )

    def put_services(
        self,
        company_id: int,
        service_id: int,
        category_id: int,
        title: str,
        user_token: str,
        fields: Optional[Dict[str, Any]] = None
    ) -> Any:
        parameters = self.params.merge({'category_id': category_id, 'title': title}, fields)
        return self._request(
            'put_services',
            self._path('services', company_id, service_id),
            parameters, HttpMethod.PUT, AuthMode.partner_plus_user(user_token)
        )

    def delete_services(self, company_id: int, service_id: int, user_token: str) -> Any:
        return self._request(
            'delete_services',
            self._path('services', company_id, service_id),
            method=HttpMethod.DELETE, auth=AuthMode.partner_plus_user(user_token)
        )

    # Events

    def get_events(self, company_id: int, event_id: Optional[int] = None) -> Any:
        return self._request('get_events', self._path('events', company_id, event_id))

    # Staff

    def get_staff(self, company_id: int, staff_id: Optional[int] = None) -> Any:
        return self._request('get_staff', self._path('staff', company_id, staff_id))

    def post_staff(
        self,
        company_id: int,
        staff_id: int,
        name: str,
        user_token: str,
        fields: Optional[Dict[str, Any]] = None
    ) -> Any:
        return self._request(
            'post_staff',
            self._path('staff', company_id, staff_id),
            self.params.merge({'name': name}, fields),
            HttpMethod.POST, AuthMode.partner_plus_user(user_token)
        )

    def put_staff(self, company_id: int, staff_id: int, fields: Dict[str, Any], user_token: str) -> Any:
        return self._request(
            'put_staff',
            self._path('staff', company_id, staff_id),
            dict(fields), HttpMethod.PUT, AuthMode.partner_plus_user(user_token)
        )

    def delete_staff(self, company_id: int, staff_id: int, user_token: str) -> Any:
        return self._request(
            'delete_staff',
            self._path('staff', company_id, staff_id),
            method=HttpMethod.DELETE, auth=AuthMode.partner_plus_user(user_token)
        )
