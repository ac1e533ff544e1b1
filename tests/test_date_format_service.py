import datetime
import json

import pytest

from daily_logger.schemas import WorkSchedulePeriod
from daily_logger.services.date_format_service import (
    format_activity_prefix,
    format_date,
    format_short_date,
    format_work_schedule_period,
    get_dates_in_range,
    normalize_date,
    normalize_time,
    parse_roles,
    parse_work_schedule,
)


def test_get_dates_in_range_is_inclusive():
    dates = get_dates_in_range(datetime.date(2025, 6, 30), datetime.date(2025, 7, 2))

    assert dates == [
        datetime.date(2025, 6, 30),
        datetime.date(2025, 7, 1),
        datetime.date(2025, 7, 2),
    ]


def test_get_dates_in_range_with_start_after_end_is_empty():
    assert get_dates_in_range(datetime.date(2025, 7, 2), datetime.date(2025, 7, 1)) == []


def test_format_date_and_short_date():
    date = datetime.date(2025, 7, 7)

    assert format_date(date) == "July 7, 2025"
    assert format_short_date(date) == "Jul_07_2025"


def test_normalize_date_reads_day_first_entries():
    assert normalize_date("2025-07-07") == datetime.date(2025, 7, 7)
    assert normalize_date("06.06.2025") == datetime.date(2025, 6, 6)
    assert normalize_date("09/06/2025") == datetime.date(2025, 6, 9)
    assert normalize_date(datetime.datetime(2025, 7, 7, 9, 30)) == datetime.date(2025, 7, 7)


def test_normalize_date_returns_none_for_garbage():
    assert normalize_date("not a date") is None
    assert normalize_date("") is None
    assert normalize_date(None) is None


def test_normalize_time_accepts_dotted_and_colon_forms():
    assert normalize_time("07.00") == "07:00:00"
    assert normalize_time("7:00") == "07:00:00"
    assert normalize_time("14.30") == "14:30:00"
    assert normalize_time("10:30:15") == "10:30:15"
    assert normalize_time("2:30 PM") == "14:30:00"


def test_normalize_time_blank_and_unreadable_values_become_none():
    assert normalize_time("") is None
    assert normalize_time("   ") is None
    assert normalize_time(None) is None
    assert normalize_time("whenever") is None


@pytest.mark.parametrize("value", ["7", "1430", "2025-07-08", "July 8"])
def test_normalize_time_rejects_input_without_a_clock_part(value):
    assert normalize_time(value) is None


def test_normalize_time_keeps_meridiem_only_hours():
    assert normalize_time("7 PM") == "19:00:00"
    assert normalize_time("12 AM") == "00:00:00"


def test_format_activity_prefix():
    assert format_activity_prefix("07:00:00", "10:30:00") == "07:00:00 - 10:30:00: "
    assert format_activity_prefix("07:00:00", None) == "From 07:00:00: "
    assert format_activity_prefix(None, "10:30:00") == ""


def test_format_work_schedule_period_collapses_single_day():
    weekdays = WorkSchedulePeriod(start="Monday", end="Friday", expected_time_in="07:30", expected_time_out="14:30")
    saturday = WorkSchedulePeriod(start="Saturday", end="Saturday", expected_time_in="09:00", expected_time_out="12:00")

    assert format_work_schedule_period(weekdays) == "Monday to Friday: 07:30 - 14:30"
    assert format_work_schedule_period(saturday) == "Saturday: 09:00 - 12:00"


def test_parse_work_schedule_accepts_wrapped_and_plain_lists():
    period = {"start": "Monday", "end": "Friday", "expected_time_in": "07:30", "expected_time_out": "14:30"}

    assert len(parse_work_schedule(json.dumps({"periods": [period]}))) == 1
    assert len(parse_work_schedule([period])) == 1


def test_parse_work_schedule_drops_malformed_input():
    assert parse_work_schedule("{broken") == []
    assert parse_work_schedule([{"start": "Monday"}]) == []
    assert parse_work_schedule(None) == []


def test_parse_roles_handles_json_and_comma_separated():
    assert parse_roles('["IT Support", "Editor"]') == ["IT Support", "Editor"]
    assert parse_roles("IT Support, Editor") == ["IT Support", "Editor"]
    assert parse_roles("") == []
