"""
Sample test data for YCLIENTS SDK testing.

Realistic payloads and responses shaped like the ones the YCLIENTS API
exchanges.
"""

PARTNER_TOKEN = "partner-token-123"
USER_TOKEN = "user-token-456"
COMPANY_ID = 4564

BASE_URL = "https://api.yclients.com/api/v1"

SAMPLE_PERSON = {
    "phone": "79161502239",
    "fullname": "Anna Petrova",
    "email": "anna@example.com",
}

SAMPLE_APPOINTMENTS = [
    {
        "id": 1,
        "services": [331],
        "events": [],
        "staff_id": 6544,
        "datetime": "2024-03-01T13:00:00+0300",
    }
]

SAMPLE_API_RESPONSES = {
    "book_dates": '{"success": true, "data": {"booking_dates": ["2024-03-01", "2024-03-02"]}, "meta": []}',
    "book_record": '[{"id": 1, "record_id": 2820023, "record_hash": "567df655ec1b2ba8f6ebb1d1e0b0c4b0"}]',
    "company": '{"success": true, "data": {"id": 4564, "title": "Salon Anna"}, "meta": []}',
    "not_found": '{"success": false, "data": null, "meta": {"message": "Company not found"}}',
    "unicode": '{"success": true, "data": {"title": "Салон красоты"}}',
}

SAMPLE_CONFIG_YAML = """
api:
  base_url: https://api.yclients.com/api/v1
  timeout: 20
  partner_token: from-yaml
logging:
  level: DEBUG
"""
