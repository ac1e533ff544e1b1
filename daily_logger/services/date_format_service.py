"""Date/time parsing, normalization and display helpers."""

from __future__ import annotations

import datetime
import json
import logging
import re
from typing import Any, List

from dateutil import parser as date_parser
from pydantic import ValidationError as PydanticValidationError

from daily_logger.schemas import WorkSchedulePeriod

logger = logging.getLogger(__name__)

_CLOCK_PATTERN = re.compile(r"([01]?\d|2[0-3])\s*[.:]\s*([0-5]\d)(?:\s*[.:]\s*([0-5]\d))?")
_MIDNIGHT = datetime.datetime(2000, 1, 1, 0, 0)
_ONE_AM = datetime.datetime(2000, 1, 1, 1, 0)


def get_dates_in_range(start: datetime.date, end: datetime.date) -> List[datetime.date]:
    """Every calendar date from ``start`` to ``end`` inclusive."""
    dates = []
    current = start
    while current <= end:
        dates.append(current)
        current += datetime.timedelta(days=1)
    return dates


def format_date(value: datetime.date) -> str:
    # 日本語: 例 "July 7, 2025" / English: e.g. "July 7, 2025"
    return f"{value.strftime('%B')} {value.day}, {value.year}"


def weekday_name(value: datetime.date) -> str:
    return value.strftime("%A")


def format_short_date(value: datetime.date) -> str:
    # 日本語: ファイル名用 "Jul_07_2025" / English: File-name form "Jul_07_2025"
    return value.strftime("%b_%d_%Y")


def normalize_date(value: Any) -> datetime.date | None:
    """Coerce ``value`` into a date.

    ISO strings are read as-is; anything else goes through dateutil with the
    day first, so ``06.06.2025`` and ``09/06/2025`` land in June.
    """
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        return datetime.date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return date_parser.parse(text, dayfirst=True).date()
    except (ValueError, TypeError, OverflowError):
        return None


def parse_date(value: Any) -> datetime.date:
    """Like :func:`normalize_date` but rejects unreadable input."""
    parsed = normalize_date(value)
    if parsed is None:
        raise ValueError(f"Invalid date: {value!r}")
    return parsed


def normalize_time(value: Any) -> str | None:
    """Coerce clock input such as ``07.00``, ``7:00`` or ``2:30 PM`` into ``HH:MM:SS``."""
    if isinstance(value, datetime.time):
        return value.strftime("%H:%M:%S")
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None

    match = _CLOCK_PATTERN.fullmatch(text)
    if match:
        hour = int(match.group(1))
        minute = int(match.group(2))
        second = int(match.group(3) or 0)
        return f"{hour:02d}:{minute:02d}:{second:02d}"

    try:
        parsed = date_parser.parse(text, default=_MIDNIGHT)
        alternate_hour = date_parser.parse(text, default=_ONE_AM).hour
    except (ValueError, TypeError, OverflowError):
        logger.warning("Ignoring unreadable time value %r", value)
        return None
    # 日本語: 時刻を含まない入力(日付や単独の数字)は既定値が残る / English: Input without a clock part keeps the default hour
    if parsed.hour != alternate_hour:
        logger.warning("Ignoring time value without a clock part %r", value)
        return None
    return parsed.strftime("%H:%M:%S")


def format_activity_prefix(time_start: str | None, time_end: str | None) -> str:
    if time_start and time_end:
        return f"{time_start} - {time_end}: "
    if time_start:
        return f"From {time_start}: "
    return ""


def format_work_schedule_period(period: WorkSchedulePeriod) -> str:
    # 日本語: 開始日と終了日が同じなら1回だけ表示 / English: Show the day once when start and end match
    date_range = period.start if period.start == period.end else f"{period.start} to {period.end}"
    return f"{date_range}: {period.expected_time_in} - {period.expected_time_out}"


def parse_work_schedule(raw: Any) -> List[WorkSchedulePeriod]:
    """Read a stored work schedule.

    Accepts a JSON string, a list of periods or ``{"periods": [...]}``.
    Malformed input and incomplete periods are dropped.
    """
    data = raw
    if isinstance(raw, str):
        if not raw.strip():
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Stored work schedule is not valid JSON")
            return []

    if isinstance(data, dict):
        data = data.get("periods", [])
    if not isinstance(data, list):
        return []

    periods = []
    for item in data:
        if not isinstance(item, dict):
            continue
        try:
            period = WorkSchedulePeriod.model_validate(item)
        except PydanticValidationError:
            continue
        if all([period.start, period.end, period.expected_time_in, period.expected_time_out]):
            periods.append(period)
    return periods


def parse_roles(raw: Any) -> List[str]:
    """Read stored roles, which may be a JSON list or a comma-separated string."""
    if isinstance(raw, list):
        return [str(role).strip() for role in raw if str(role).strip()]
    if not isinstance(raw, str) or not raw.strip():
        return []
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        data = raw.split(",")
    if isinstance(data, str):
        data = [data]
    if not isinstance(data, list):
        return []
    return [str(role).strip() for role in data if str(role).strip()]
