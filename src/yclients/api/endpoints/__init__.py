"""
API Endpoints Package for the YCLIENTS Client

Contains endpoint classes for the different resource families.
"""

from .base_endpoint import BaseEndpoint
from .booking_endpoints import BookingEndpoints
from .company_endpoints import CompanyEndpoints
from .customer_endpoints import CustomerEndpoints
from .record_endpoints import RecordEndpoints
from .management_endpoints import ManagementEndpoints

__all__ = [
    'BaseEndpoint',
    'BookingEndpoints',
    'CompanyEndpoints',
    'CustomerEndpoints',
    'RecordEndpoints',
    'ManagementEndpoints'
]
