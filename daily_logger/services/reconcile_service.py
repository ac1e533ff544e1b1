"""Day reconciliation: bring a day's stored activities in line with the editor."""

from __future__ import annotations

import datetime
import logging
from typing import Iterable, List, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from daily_logger.core.db import transaction
from daily_logger.repositories import day_repository
from daily_logger.schemas import ActivityInput, DayRecord, DayTimes
from daily_logger.services.date_format_service import normalize_time, parse_date

logger = logging.getLogger(__name__)


def _normalize_entry(entry: ActivityInput) -> ActivityInput:
    return entry.model_copy(
        update={
            "time_start": normalize_time(entry.time_start),
            "time_end": normalize_time(entry.time_end),
        }
    )


def _entry_key(entry) -> tuple:
    return (entry.content, entry.category, entry.time_start, entry.time_end)


def _apply_deletions(db: Session, day_id: int, ids: Iterable[int], *, special: bool) -> set:
    owned = set(
        day_repository.day_special_activity_ids(db, day_id)
        if special
        else day_repository.day_activity_ids(db, day_id)
    )
    deleted = set()
    for identifier in ids:
        # 日本語: 他の日の行は削除しない / English: Never delete rows that belong to another day
        if identifier not in owned:
            logger.warning("Skipping deletion of unknown activity %s for day %s", identifier, day_id)
            continue
        day_repository.delete_activity(db, identifier, special=special)
        deleted.add(identifier)
    return deleted


def _upsert_entries(
    db: Session,
    day_id: int,
    entries: Sequence[ActivityInput],
    *,
    special: bool,
    deleted_ids: set = frozenset(),
) -> None:
    existing = day_repository.list_day_activities(db, day_id, special=special)
    by_id = {day_repository.activity_pk(row): row for row in existing}
    claimed = {entry.id for entry in entries if entry.id is not None and entry.id in by_id}

    for entry in entries:
        # 日本語: 同じ保存で削除した行は作り直さない / English: Rows deleted in this save are not recreated
        if entry.id is not None and entry.id in deleted_ids:
            logger.info("Skipping activity %s deleted in the same save", entry.id)
            continue
        if entry.id is not None and entry.id in by_id:
            day_repository.update_activity(db, entry.id, entry, special=special)
            continue
        if entry.id is not None:
            logger.warning("Activity %s is not part of day %s; saving it as a new entry", entry.id, day_id)

        # 日本語: 同一内容の未使用行があれば再利用(再送信を冪等にする) / English: Reuse an identical unclaimed row so resubmits are idempotent
        match = None
        for row_id, row in by_id.items():
            if row_id not in claimed and _entry_key(row) == _entry_key(entry):
                match = row_id
                break
        if match is not None:
            claimed.add(match)
            continue

        new_id = day_repository.create_activity(db, day_id, entry, special=special)
        claimed.add(new_id)


def reconcile_day(
    db: Session,
    date,
    day_times: DayTimes,
    activities: Sequence[ActivityInput],
    special_activities: Sequence[ActivityInput] = (),
    deleted_activity_ids: Iterable[int] = (),
    deleted_special_activity_ids: Iterable[int] = (),
    *,
    prune_empty: bool = False,
) -> bool:
    """Create, update and delete a day's rows in one transaction.

    The day is created on first save. Deletions only touch rows owned by the
    day. Entries with an id are updated in place; entries without one reuse
    an identical stored row or are inserted. When ``prune_empty`` is set, a day
    left with no activities at all is removed.
    """
    try:
        target_date = parse_date(date)
    except ValueError:
        logger.warning("Rejected reconcile for invalid date %r", date)
        return False

    time_in = normalize_time(day_times.time_in)
    time_out = normalize_time(day_times.time_out)
    regular = [_normalize_entry(entry) for entry in activities]
    special = [_normalize_entry(entry) for entry in special_activities]

    try:
        with transaction(db):
            day_id = day_repository.day_exists(db, target_date)
            if day_id is None:
                day_id = day_repository.create_day(db, target_date, time_in, time_out)
            day_repository.update_day(db, day_id, time_in, time_out)

            deleted = _apply_deletions(db, day_id, deleted_activity_ids, special=False)
            deleted_special = _apply_deletions(db, day_id, deleted_special_activity_ids, special=True)

            _upsert_entries(db, day_id, regular, special=False, deleted_ids=deleted)
            _upsert_entries(db, day_id, special, special=True, deleted_ids=deleted_special)

            if prune_empty and not day_repository.day_activity_ids(db, day_id):
                if not day_repository.day_special_activity_ids(db, day_id):
                    day_repository.delete_day(db, day_id)
                    logger.info("Pruned empty day %s", target_date.isoformat())
    except SQLAlchemyError:
        logger.exception("Failed to reconcile day %s", target_date.isoformat())
        return False

    logger.info("Reconciled day %s", target_date.isoformat())
    return True


def save_activities(
    db: Session,
    date,
    day_times: DayTimes,
    activities: Sequence[ActivityInput],
    special_activities: Sequence[ActivityInput] = (),
) -> bool:
    """Append activities to a day, creating the day if needed."""
    if not activities:
        logger.warning("Activities list cannot be empty.")
        return False
    try:
        target_date = parse_date(date)
    except ValueError:
        logger.warning("Rejected save for invalid date %r", date)
        return False

    try:
        with transaction(db):
            day_id = day_repository.day_exists(db, target_date)
            if day_id is None:
                day_id = day_repository.create_day(
                    db, target_date, normalize_time(day_times.time_in), normalize_time(day_times.time_out)
                )
            for entry in activities:
                day_repository.create_activity(db, day_id, _normalize_entry(entry))
            for entry in special_activities:
                day_repository.create_activity(db, day_id, _normalize_entry(entry), special=True)
    except SQLAlchemyError:
        logger.exception("Failed to save activities for %s", target_date.isoformat())
        return False

    logger.info("Successfully saved all activities for day ID: %s", day_id)
    return True


def fetch_day(db: Session, date) -> DayRecord | None:
    target_date = parse_date(date)
    day_id = day_repository.day_exists(db, target_date)
    if day_id is None:
        return None
    return day_repository.read_day(db, day_id)


def fetch_active_days(db: Session) -> List[datetime.date]:
    return [date for _, date in day_repository.read_days(db)]


def delete_day(db: Session, date) -> bool:
    target_date = parse_date(date)
    try:
        with transaction(db):
            day_id = day_repository.day_exists(db, target_date)
            if day_id is None:
                return False
            day_repository.delete_day(db, day_id)
    except SQLAlchemyError:
        logger.exception("Failed to delete day %s", target_date.isoformat())
        return False
    return True
