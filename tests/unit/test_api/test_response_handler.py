"""
Unit tests for ResponseHandler.
"""

import pytest

from yclients.api.response_handler import ResponseHandler, TransportResult
from yclients.core.error_handler import DecodeError, TransportError
from tests.fixtures.sample_data import SAMPLE_API_RESPONSES


class TestResponseHandler:
    """Test suite for ResponseHandler"""

    @pytest.fixture
    def handler(self):
        return ResponseHandler()

    @pytest.mark.unit
    def test_transport_failure_wins_over_body(self, handler):
        result = TransportResult(body='{"success": true}', error_code=28, error_message='timeout')

        with pytest.raises(TransportError) as exc_info:
            handler.handle(result)

        assert exc_info.value.code == 28
        assert exc_info.value.message == 'timeout'
        assert str(exc_info.value) == 'timeout (code 28)'

    @pytest.mark.unit
    def test_valid_json_is_returned(self, handler):
        value = handler.handle(TransportResult(SAMPLE_API_RESPONSES['book_dates']))

        assert value['success'] is True
        assert value['data']['booking_dates'] == ['2024-03-01', '2024-03-02']

    @pytest.mark.unit
    def test_top_level_array(self, handler):
        value = handler.handle(TransportResult(SAMPLE_API_RESPONSES['book_record']))

        assert value[0]['record_id'] == 2820023

    @pytest.mark.unit
    def test_error_payload_is_returned_as_is(self, handler):
        value = handler.handle(TransportResult(SAMPLE_API_RESPONSES['not_found']))

        assert value == {'success': False, 'data': None, 'meta': {'message': 'Company not found'}}

    @pytest.mark.unit
    @pytest.mark.parametrize('body', ['', '   ', '\n'])
    def test_empty_body_is_none(self, handler, body):
        assert handler.handle(TransportResult(body)) is None

    @pytest.mark.unit
    def test_invalid_json_raises_decode_error(self, handler):
        body = '<html>502 Bad Gateway</html>'

        with pytest.raises(DecodeError) as exc_info:
            handler.handle(TransportResult(body))

        assert exc_info.value.raw_body == body
        assert 'Invalid JSON' in exc_info.value.message

    @pytest.mark.unit
    def test_unicode_body(self, handler):
        value = handler.handle(TransportResult(SAMPLE_API_RESPONSES['unicode']))

        assert value['data']['title'] == 'Салон красоты'

    @pytest.mark.unit
    def test_decode_never_raises(self, handler):
        assert handler.decode('not json').ok is False
        assert handler.decode('').empty is True
        assert handler.decode('null').value is None
        assert handler.decode('null').empty is False

    @pytest.mark.unit
    def test_preview_truncates_long_bodies(self):
        preview = ResponseHandler._preview('x' * 500)

        assert preview.startswith('x' * 200)
        assert preview.endswith('[TRUNCATED]')
        assert ResponseHandler._preview('short') == 'short'
