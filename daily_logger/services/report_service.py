"""Report aggregation: collect a user's days over a date range into one document."""

from __future__ import annotations

import logging
from typing import List, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from daily_logger.core.db import transaction
from daily_logger.core.exceptions import EntityNotFoundError
from daily_logger.repositories import day_repository, user_repository
from daily_logger.schemas import DayRecord, ExportOptions, KeyContribution, ReportDocument
from daily_logger.services.date_format_service import (
    format_date,
    get_dates_in_range,
    parse_date,
    parse_roles,
    parse_work_schedule,
)

logger = logging.getLogger(__name__)


def _resolve_responsibilities(
    db: Session,
    user_id: int,
    supplied: str | None,
    options: ExportOptions,
) -> str | None:
    text = (supplied or "").strip()
    existing = user_repository.read_responsibilities_summary(db, user_id)

    # 日本語: 未登録の場合のみ入力値を保存 / English: Persist the supplied text only when none is stored yet
    if text and options.include_responsibilities_summary and existing is None:
        try:
            with transaction(db):
                user_repository.create_responsibilities_summary(db, user_id, text)
        except SQLAlchemyError:
            logger.exception("Error creating responsibilities summary for user %s", user_id)

    if text:
        return text
    if existing is not None and existing.content.strip():
        return existing.content
    return None


def collect_daily_log(db: Session, start, end, *, include_special_activities: bool = True) -> List[DayRecord]:
    """Every recorded day between ``start`` and ``end``; dates without a day are skipped."""
    start_date = parse_date(start)
    end_date = parse_date(end)
    day_ids = {day.date: day.day_id for day in day_repository.read_days_in_range(db, start_date, end_date)}

    daily_log = []
    for date in get_dates_in_range(start_date, end_date):
        day_id = day_ids.get(date)
        if day_id is None:
            continue
        try:
            record = day_repository.read_day(db, day_id)
        except SQLAlchemyError:
            logger.exception("Failed to read day %s; omitting it from the report", date.isoformat())
            continue
        if record is None:
            continue
        if not include_special_activities:
            record = record.model_copy(update={"special_activities": []})
        daily_log.append(record)
    return daily_log


def build_report(
    db: Session,
    user_id: int,
    start,
    end,
    options: ExportOptions,
    responsibilities: str | None = None,
    key_contributions: Sequence[KeyContribution] = (),
    conclusions: str | None = None,
) -> ReportDocument:
    """Assemble the report document.

    Optional sections are filled only when their option flag is set and there
    is something to show. Raises ``EntityNotFoundError`` for an unknown user.
    """
    user = user_repository.read_user(db, user_id)
    if user is None:
        raise EntityNotFoundError("User not found.")

    start_date = parse_date(start)
    end_date = parse_date(end)
    responsibilities_text = _resolve_responsibilities(db, user_id, responsibilities, options)
    daily_log = collect_daily_log(
        db, start_date, end_date, include_special_activities=options.include_special_activities
    )

    document = ReportDocument(
        title=f"Monthly Job Report For {user.name}",
        user_name=user.name,
        reporting_period=f"{format_date(start_date)} – {format_date(end_date)}",
    )

    roles = parse_roles(user.roles_positions)
    if options.include_roles and roles:
        document.roles = ", ".join(roles)

    if options.include_work_schedule:
        schedule = parse_work_schedule(user.work_schedule)
        if schedule:
            document.work_schedule = schedule

    if options.include_responsibilities_summary and responsibilities_text:
        document.responsibilities = responsibilities_text

    contributions = [item for item in key_contributions if item.title.strip() or item.content.strip()]
    if options.include_key_contributions and contributions:
        document.key_contributions = contributions

    if options.include_daily_log and daily_log:
        document.daily_log = daily_log

    if options.include_conclusions and conclusions and conclusions.strip():
        document.conclusions = conclusions.strip()

    return document
