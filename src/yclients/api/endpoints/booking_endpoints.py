"""
Online Booking Endpoints for the YCLIENTS API Client

Calls behind the public booking widget: booking form settings, what can be
booked and when, booking itself, and the end-user account of a booked
client.
"""

import datetime as dt
from typing import Any, Dict, List, Optional

from ...core.error_handler import ValidationError
from ..authentication import AuthMode
from ..options import (
    BookDatesOptions, BookRecordOptions, BookServicesOptions,
    BookStaffOptions, BookTimesOptions
)
from ..request_builder import HttpMethod, format_date
from .base_endpoint import BaseEndpoint

APPOINTMENT_FIELDS = ('id', 'staff_id', 'datetime')
PERSON_FIELDS = ('phone', 'fullname', 'email')


class BookingEndpoints(BaseEndpoint):
    """
    Online booking API endpoints.

    Provides methods for:
    - Booking form and localization settings
    - Services, staff, dates and seances available for booking
    - Phone confirmation codes and booking creation
    - Records of an end user
    """

    def authorize_user(self, login: str, password: str) -> Any:
        """Exchange a login and password for a user token"""
        return self._request(
            'authorize_user', 'auth',
            {'login': login, 'password': password},
            HttpMethod.POST
        )

    def get_bookform(self, bookform_id: int) -> Any:
        """Get booking form settings"""
        return self._request('get_bookform', self._path('bookform', bookform_id))

    def get_i18n(self, locale: str = 'ru-RU') -> Any:
        """
        Get localization strings

        Args:
            locale: One of ru-RU, lv-LV, en-US, ee-EE, lt-LT, de-DE, uk-UK
        """
        return self._request('get_i18n', self._path('i18n', locale))

    def get_book_services(self, company_id: int, options: Optional[BookServicesOptions] = None) -> Any:
        """Get services available for booking"""
        return self._request(
            'get_book_services',
            self._path('book_services', company_id),
            self.params.build(options)
        )

    def get_book_staff(self, company_id: int, options: Optional[BookStaffOptions] = None) -> Any:
        """Get staff available for booking"""
        return self._request(
            'get_book_staff',
            self._path('book_staff', company_id),
            self.params.build(options)
        )

    def get_book_dates(self, company_id: int, options: Optional[BookDatesOptions] = None) -> Any:
        """Get dates available for booking"""
        return self._request(
            'get_book_dates',
            self._path('book_dates', company_id),
            self.params.build(options)
        )

    def get_book_times(
        self,
        company_id: int,
        staff_id: int,
        date: dt.date,
        options: Optional[BookTimesOptions] = None
    ) -> Any:
        """Get seances of a staff member available for booking on a date"""
        return self._request(
            'get_book_times',
            self._path('book_times', company_id, staff_id, format_date(date)),
            self.params.build(options)
        )

    def post_book_code(self, company_id: int, phone: str, fullname: Optional[str] = None) -> Any:
        """
        Send an SMS code confirming a phone number

        Args:
            company_id: Company identifier
            phone: Phone number in the form 79991234567
            fullname: Client name
        """
        parameters = {'phone': phone}
        if fullname is not None:
            parameters['fullname'] = fullname

        return self._request(
            'post_book_code',
            self._path('book_code', company_id),
            parameters,
            HttpMethod.POST
        )

    def post_book_check(self, company_id: int, appointments: List[Dict[str, Any]]) -> Any:
        """
        Check appointments before booking

        Args:
            company_id: Company identifier
            appointments: Appointments, each with id, staff_id and datetime
                plus optional services and events id lists
        """
        self.params.require_each(
            appointments, APPOINTMENT_FIELDS,
            'Appointment must contain id, staff_id and datetime.'
        )

        return self._request(
            'post_book_check',
            self._path('book_check', company_id),
            list(appointments),
            HttpMethod.POST
        )

    def post_book_record(
        self,
        company_id: int,
        person: Dict[str, Any],
        appointments: List[Dict[str, Any]],
        options: Optional[BookRecordOptions] = None
    ) -> Any:
        """
        Book one or more appointments

        Args:
            company_id: Company identifier
            person: Client data with phone, fullname and email
            appointments: Appointments, each with id, staff_id and datetime
            options: Confirmation code, reminders, comment and external id

        Raises:
            ValidationError: If the client or an appointment misses a
                required field, or no appointment is given
        """
        self.params.require(person, PERSON_FIELDS, 'Client must contain phone, fullname and email.')

        if not appointments:
            raise ValidationError('At least one appointment is required.')

        self.params.require_each(
            appointments, APPOINTMENT_FIELDS,
            'Appointment must contain id, staff_id and datetime.'
        )

        parameters = self.params.merge(person, {'appointments': list(appointments)})
        parameters.update(self.params.build(options))

        return self._request(
            'post_book_record',
            self._path('book_record', company_id),
            parameters,
            HttpMethod.POST
        )

    def post_user_auth(self, phone: str, code: str) -> Any:
        """Authorize an end user by phone number and SMS code"""
        return self._request(
            'post_user_auth', 'user/auth',
            {'phone': phone, 'code': code},
            HttpMethod.POST
        )

    def get_user_records(
        self,
        record_id: int,
        record_hash: Optional[str] = None,
        user_token: Optional[str] = None
    ) -> Any:
        """
        Get a record of an end user

        Args:
            record_id: Record identifier from the booking response
            record_hash: Record hash, needed when the user is not authorized
            user_token: User token, needed when no record hash is given
        """
        self._warn_without_owner('get_user_records', record_hash, user_token)
        return self._request(
            'get_user_records',
            self._path('user/records', record_id, record_hash),
            auth=AuthMode.for_user(user_token)
        )

    def delete_user_records(
        self,
        record_id: int,
        record_hash: Optional[str] = None,
        user_token: Optional[str] = None
    ) -> Any:
        """Cancel a record of an end user, see get_user_records"""
        self._warn_without_owner('delete_user_records', record_hash, user_token)
        return self._request(
            'delete_user_records',
            self._path('user/records', record_id, record_hash),
            method=HttpMethod.DELETE,
            auth=AuthMode.for_user(user_token)
        )

    def _warn_without_owner(self, operation: str, record_hash: Optional[str], user_token: Optional[str]):
        if not record_hash and not user_token:
            self.logger.warning(f"{operation} expects a record hash or a user token")
