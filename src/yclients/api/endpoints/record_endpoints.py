"""
Record Endpoints for the YCLIENTS API Client

Records (appointments) as seen by company staff, staff schedules, the
timetable and client comments.
"""

import datetime as dt
from typing import Any, Dict, List, Optional

from ..authentication import AuthMode
from ..options import CommentsOptions, NewRecordOptions, RecordsOptions
from ..request_builder import HttpMethod, format_date, format_timestamp
from .base_endpoint import BaseEndpoint


class RecordEndpoints(BaseEndpoint):
    """
    Record and schedule API endpoints.

    Provides methods for:
    - Record listing, creation, update and removal
    - Staff schedules and timetable lookups
    - Client comments
    """

    def get_records(self, company_id: int, user_token: str, options: Optional[RecordsOptions] = None) -> Any:
        """List records of a company"""
        return self._request(
            'get_records',
            self._path('records', company_id),
            self.params.build(options),
            auth=AuthMode.partner_plus_user(user_token)
        )

    def post_records(
        self,
        company_id: int,
        user_token: str,
        staff_id: int,
        services: List[Dict[str, Any]],
        client: Dict[str, Any],
        datetime: dt.datetime,
        seance_length: int,
        save_if_busy: bool,
        send_sms: bool,
        options: Optional[NewRecordOptions] = None
    ) -> Any:
        """
        Create a record

        Args:
            company_id: Company identifier
            user_token: User token
            staff_id: Staff member performing the services
            services: Services with id, first_cost, discount, cost
            client: Client with phone, name, email
            datetime: Seance start
            seance_length: Seance length in seconds
            save_if_busy: Whether to save the record when the slot is taken
            send_sms: Whether to send an SMS confirmation
            options: Comment, reminders, external id and attendance
        """
        parameters = {
            'staff_id': staff_id,
            'services': services,
            'client': client,
            'datetime': format_timestamp(datetime),
            'seance_length': seance_length,
            'save_if_busy': save_if_busy,
            'send_sms': send_sms,
        }
        parameters.update(self.params.build(options))

        return self._request(
            'post_records',
            self._path('records', company_id),
            parameters, HttpMethod.POST, AuthMode.partner_plus_user(user_token)
        )

    def get_record(self, company_id: int, record_id: int, user_token: str) -> Any:
        return self._request(
            'get_record',
            self._path('record', company_id, record_id),
            auth=AuthMode.partner_plus_user(user_token)
        )

    def put_record(self, company_id: int, record_id: int, fields: Dict[str, Any], user_token: str) -> Any:
        return self._request(
            'put_record',
            self._path('record', company_id, record_id),
            dict(fields), HttpMethod.PUT, AuthMode.partner_plus_user(user_token)
        )

    def delete_record(self, company_id: int, record_id: int, user_token: str) -> Any:
        return self._request(
            'delete_record',
            self._path('record', company_id, record_id),
            method=HttpMethod.DELETE, auth=AuthMode.partner_plus_user(user_token)
        )

    def put_schedule(self, company_id: int, staff_id: int, fields: Dict[str, Any], user_token: str) -> Any:
        """Change the work schedule of a staff member"""
        return self._request(
            'put_schedule',
            self._path('schedule', company_id, staff_id),
            dict(fields), HttpMethod.PUT, AuthMode.partner_plus_user(user_token)
        )

    def get_timetable_dates(self, company_id: int, date: dt.date, staff_id: int, user_token: str) -> Any:
        """Get the working days of a staff member around a date"""
        return self._request(
            'get_timetable_dates',
            self._path('timetable/dates', company_id, format_date(date)),
            {'staff_id': staff_id},
            auth=AuthMode.partner_plus_user(user_token)
        )

    def get_timetable_seances(self, company_id: int, date: dt.date, staff_id: int, user_token: str) -> Any:
        """Get the seances of a staff member on a date"""
        return self._request(
            'get_timetable_seances',
            self._path('timetable/seances', company_id, staff_id, format_date(date)),
            auth=AuthMode.partner_plus_user(user_token)
        )

    def get_comments(self, company_id: int, user_token: str, options: Optional[CommentsOptions] = None) -> Any:
        return self._request(
            'get_comments',
            self._path('comments', company_id),
            self.params.build(options),
            auth=AuthMode.partner_plus_user(user_token)
        )
