"""
Per-call options for the YCLIENTS API Client

Each dataclass lists the optional filters or fields of one endpoint. All
fields default to None and are omitted from the request when left unset.
"""

import datetime as dt
from dataclasses import dataclass
from typing import List, Optional

from .request_builder import KIND_DATE, KIND_FLAG, KIND_IDS, KIND_TIMESTAMP, param


@dataclass
class BookServicesOptions:
    """Filters for services available for online booking"""
    staff_id: Optional[int] = param()
    datetime: Optional[dt.datetime] = param(kind=KIND_TIMESTAMP)
    service_ids: Optional[List[int]] = param(kind=KIND_IDS)
    event_ids: Optional[List[int]] = param(kind=KIND_IDS)


@dataclass
class BookStaffOptions(BookServicesOptions):
    """Filters for staff available for online booking"""
    # Skips the nearest free seances in the response, which is faster
    without_seances: Optional[bool] = param(kind=KIND_FLAG)


@dataclass
class BookDatesOptions:
    """Filters for dates available for online booking"""
    staff_id: Optional[int] = param()
    date: Optional[dt.date] = param(kind=KIND_DATE)
    service_ids: Optional[List[int]] = param(kind=KIND_IDS)
    event_ids: Optional[List[int]] = param(kind=KIND_IDS)


@dataclass
class BookTimesOptions:
    service_ids: Optional[List[int]] = param(kind=KIND_IDS)
    event_ids: Optional[List[int]] = param(kind=KIND_IDS)


@dataclass
class BookRecordOptions:
    """Optional fields of an online booking"""
    notify_by_sms: Optional[int] = param()
    notify_by_email: Optional[int] = param()
    code: Optional[str] = param()
    comment: Optional[str] = param()
    api_id: Optional[str] = param()


@dataclass
class CompaniesOptions:
    group_id: Optional[int] = param()
    active: Optional[bool] = param()
    moderated: Optional[bool] = param()
    for_booking: Optional[bool] = param(wire='forBooking')
    # Only companies the user may manage; needs a user token
    my: Optional[bool] = param()


@dataclass
class ServiceCategoriesOptions:
    staff_id: Optional[int] = param()


@dataclass
class ServicesOptions:
    staff_id: Optional[int] = param()
    category_id: Optional[int] = param()


@dataclass
class ClientsOptions:
    """Search filters and paging for the client list"""
    fullname: Optional[str] = param()
    phone: Optional[str] = param()
    email: Optional[str] = param()
    page: Optional[int] = param()
    count: Optional[int] = param()


@dataclass
class RecordsOptions:
    """Filters and paging for the record list"""
    page: Optional[int] = param()
    count: Optional[int] = param()
    staff_id: Optional[int] = param()
    client_id: Optional[int] = param()
    start_date: Optional[dt.date] = param(kind=KIND_DATE)
    end_date: Optional[dt.date] = param(kind=KIND_DATE)
    # Creation date range
    c_start_date: Optional[dt.date] = param(kind=KIND_DATE)
    c_end_date: Optional[dt.date] = param(kind=KIND_DATE)
    changed_after: Optional[dt.datetime] = param(kind=KIND_TIMESTAMP)
    changed_before: Optional[dt.datetime] = param(kind=KIND_TIMESTAMP)


@dataclass
class NewRecordOptions:
    """Optional fields of a record created by staff"""
    comment: Optional[str] = param()
    sms_remain_hours: Optional[int] = param()
    email_remain_hours: Optional[int] = param()
    api_id: Optional[int] = param()
    attendance: Optional[int] = param()


@dataclass
class CommentsOptions:
    start_date: Optional[dt.date] = param(kind=KIND_DATE)
    end_date: Optional[dt.date] = param(kind=KIND_DATE)
    staff_id: Optional[int] = param()
    rating: Optional[int] = param()
