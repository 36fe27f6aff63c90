"""
Unit tests for ParameterBuilder and query encoding.

Covers omission of absent values, wire key mapping, date serialization,
free-form field merging and required-field validation.
"""

import datetime as dt
from dataclasses import dataclass

import pytest

from yclients.api.options import (
    BookDatesOptions, BookServicesOptions, BookStaffOptions,
    CompaniesOptions, RecordsOptions
)
from yclients.api.request_builder import (
    ParameterBuilder, encode_query, format_date, format_timestamp, join_path
)
from yclients.core.error_handler import ValidationError

MSK = dt.timezone(dt.timedelta(hours=3))


class TestParameterBuilder:
    """Test suite for ParameterBuilder"""

    @pytest.fixture
    def builder(self):
        return ParameterBuilder()

    @pytest.mark.unit
    def test_unset_options_build_empty_mapping(self, builder):
        assert builder.build(None) == {}
        assert builder.build(BookServicesOptions()) == {}
        assert builder.build(RecordsOptions()) == {}

    @pytest.mark.unit
    def test_absent_values_are_omitted(self, builder):
        parameters = builder.build(BookServicesOptions(staff_id=5))

        assert parameters == {'staff_id': 5}
        assert 'datetime' not in parameters
        assert None not in parameters.values()

    @pytest.mark.unit
    def test_wire_key_mapping(self, builder):
        parameters = builder.build(CompaniesOptions(for_booking=True, active=False))

        assert parameters == {'active': False, 'forBooking': True}

    @pytest.mark.unit
    def test_date_and_timestamp_fields(self, builder):
        options = RecordsOptions(
            start_date=dt.date(2024, 3, 1),
            end_date=dt.datetime(2024, 3, 31, 18, 45),
            changed_after=dt.datetime(2024, 2, 1, 9, 30, tzinfo=MSK)
        )

        assert builder.build(options) == {
            'start_date': '2024-03-01',
            'end_date': '2024-03-31',
            'changed_after': '2024-02-01T09:30:00+0300',
        }

    @pytest.mark.unit
    def test_id_lists_are_ordered_integers(self, builder):
        parameters = builder.build(BookServicesOptions(service_ids=['3', 1, 2]))

        assert parameters == {'service_ids': [3, 1, 2]}

    @pytest.mark.unit
    def test_flag_is_sent_only_when_set(self, builder):
        assert builder.build(BookStaffOptions(without_seances=False)) == {}
        assert builder.build(BookStaffOptions(without_seances=True)) == {'without_seances': True}

    @pytest.mark.unit
    def test_build_rejects_non_dataclass(self, builder):
        with pytest.raises(TypeError):
            builder.build({'staff_id': 5})

    @pytest.mark.unit
    def test_build_accepts_custom_options(self, builder):
        @dataclass
        class Custom:
            plain: int = None

        assert builder.build(Custom(plain=7)) == {'plain': 7}

    @pytest.mark.unit
    def test_merge_overlays_extra_fields(self, builder):
        merged = builder.merge({'title': 'Haircut', 'category_id': 1}, {'title': 'Override', 'price_min': 100})

        assert merged == {'title': 'Override', 'category_id': 1, 'price_min': 100}
        assert list(merged) == ['title', 'category_id', 'price_min']

    @pytest.mark.unit
    def test_merge_without_extra(self, builder):
        required = {'name': 'Ivan'}

        merged = builder.merge(required, None)

        assert merged == required
        assert merged is not required

    @pytest.mark.unit
    def test_require_reports_missing_keys(self, builder):
        with pytest.raises(ValidationError) as exc_info:
            builder.require({'phone': '7999', 'fullname': None}, ('phone', 'fullname', 'email'), 'Client is incomplete.')

        assert 'fullname' in str(exc_info.value)
        assert 'email' in str(exc_info.value)
        assert 'phone' not in exc_info.value.message.split('Missing:')[1]

    @pytest.mark.unit
    def test_require_each_checks_every_item(self, builder):
        items = [{'id': 1, 'staff_id': 2, 'datetime': 'x'}, {'id': 2, 'staff_id': 3}]

        with pytest.raises(ValidationError):
            builder.require_each(items, ('id', 'staff_id', 'datetime'), 'Appointment is incomplete.')


class TestFormatting:
    """Test suite for value and path formatting helpers"""

    @pytest.mark.unit
    def test_format_date(self):
        assert format_date(dt.date(2024, 3, 1)) == '2024-03-01'
        assert format_date(dt.datetime(2024, 3, 1, 23, 59)) == '2024-03-01'
        assert format_date('2024-03-01') == '2024-03-01'

    @pytest.mark.unit
    def test_format_timestamp_keeps_offset(self):
        value = dt.datetime(2015, 9, 29, 13, 0, tzinfo=dt.timezone(dt.timedelta(hours=4)))

        assert format_timestamp(value) == '2015-09-29T13:00:00+0400'

    @pytest.mark.unit
    def test_format_timestamp_treats_naive_as_utc(self):
        assert format_timestamp(dt.datetime(2024, 3, 1, 10, 15)) == '2024-03-01T10:15:00+0000'
        assert format_timestamp(dt.date(2024, 3, 1)) == '2024-03-01T00:00:00+0000'

    @pytest.mark.unit
    def test_join_path_drops_absent_segments(self):
        assert join_path('staff', 42, None) == 'staff/42'
        assert join_path('user/records', 7, '') == 'user/records/7'
        assert join_path('book_times', 1, 2, '2024-03-01') == 'book_times/1/2/2024-03-01'


class TestEncodeQuery:
    """Test suite for GET query string encoding"""

    @pytest.mark.unit
    def test_query_is_independent_of_argument_order(self):
        first = ParameterBuilder().build(BookDatesOptions(date=dt.date(2024, 3, 1), staff_id=5))
        second = ParameterBuilder().build(BookDatesOptions(staff_id=5, date=dt.date(2024, 3, 1)))

        assert encode_query(first) == 'staff_id=5&date=2024-03-01'
        assert encode_query(second) == encode_query(first)

    @pytest.mark.unit
    def test_book_dates_wire_order(self):
        parameters = ParameterBuilder().build(BookDatesOptions(
            event_ids=[9], service_ids=[3], date=dt.date(2024, 3, 1), staff_id=5
        ))

        assert list(parameters) == ['staff_id', 'date', 'service_ids', 'event_ids']
        assert encode_query(parameters) == 'staff_id=5&date=2024-03-01&service_ids[]=3&event_ids[]=9'

    @pytest.mark.unit
    def test_arrays_use_bracket_keys(self):
        assert encode_query({'service_ids': [1, 2]}) == 'service_ids[]=1&service_ids[]=2'

    @pytest.mark.unit
    def test_nested_maps_and_lists_of_maps(self):
        query = encode_query({'client': {'name': 'Ann'}, 'services': [{'id': 1}]})

        assert query == 'client[name]=Ann&services[0][id]=1'

    @pytest.mark.unit
    def test_booleans_and_escaping(self):
        query = encode_query({'active': True, 'my': False, 'fullname': 'Ann Lee&Co'})

        assert query == 'active=1&my=0&fullname=Ann+Lee%26Co'

    @pytest.mark.unit
    def test_empty_parameters(self):
        assert encode_query({}) == ''
