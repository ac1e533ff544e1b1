"""Persistence helpers for days and their activities.

Every function takes the caller's ``Session`` and only flushes; committing is
left to the service that owns the transaction.
"""

from __future__ import annotations

import datetime
import logging
from typing import List, Tuple

from sqlmodel import Session, select

from daily_logger.models import Activity, Day, SpecialActivity
from daily_logger.schemas import ActivityInput, ActivityRecord, DayRecord

logger = logging.getLogger(__name__)


def _activity_model(special: bool):
    return SpecialActivity if special else Activity


def activity_pk(row) -> int:
    # 日本語: 通常/特別で主キー名が異なる / English: Primary key column differs per activity table
    if isinstance(row, SpecialActivity):
        return row.sp_activity_id
    return row.activity_id


def _activity_pk_column(special: bool):
    return SpecialActivity.sp_activity_id if special else Activity.activity_id


def create_day(
    db: Session,
    date: datetime.date,
    time_in: str | None = None,
    time_out: str | None = None,
) -> int:
    day = Day(date=date, time_in=time_in, time_out=time_out)
    db.add(day)
    db.flush()
    logger.info("Day created with ID: %s", day.day_id)
    return day.day_id


def day_exists(db: Session, date: datetime.date) -> int | None:
    return db.exec(select(Day.day_id).where(Day.date == date)).first()


def list_day_activities(db: Session, day_id: int, special: bool = False) -> list:
    model = _activity_model(special)
    return list(
        db.exec(select(model).where(model.day_id == day_id).order_by(_activity_pk_column(special))).all()
    )


def _to_record(row) -> ActivityRecord:
    return ActivityRecord(
        id=activity_pk(row),
        content=row.content,
        category=row.category,
        time_start=row.time_start,
        time_end=row.time_end,
    )


def read_day(db: Session, day_id: int) -> DayRecord | None:
    day = db.get(Day, day_id)
    if day is None:
        return None
    return DayRecord(
        day_id=day.day_id,
        date=day.date.isoformat(),
        time_in=day.time_in,
        time_out=day.time_out,
        activities=[_to_record(row) for row in list_day_activities(db, day_id)],
        special_activities=[_to_record(row) for row in list_day_activities(db, day_id, special=True)],
    )


def read_days(db: Session) -> List[Tuple[int, datetime.date]]:
    rows = db.exec(select(Day.day_id, Day.date).order_by(Day.date)).all()
    return [(day_id, date) for day_id, date in rows]


def read_days_in_range(db: Session, start: datetime.date, end: datetime.date) -> List[Day]:
    return list(db.exec(select(Day).where(Day.date >= start, Day.date <= end).order_by(Day.date)).all())


def update_day(db: Session, day_id: int, time_in: str | None, time_out: str | None) -> bool:
    day = db.get(Day, day_id)
    if day is None:
        return False
    day.time_in = time_in
    day.time_out = time_out
    db.add(day)
    db.flush()
    return True


def delete_day(db: Session, day_id: int) -> bool:
    day = db.get(Day, day_id)
    if day is None:
        return False
    # 日本語: 所有するアクティビティは外部キーで連鎖削除 / English: Owned activities go with it via ON DELETE CASCADE
    db.delete(day)
    db.flush()
    logger.info("Day %s deleted", day_id)
    return True


def create_activity(db: Session, day_id: int, entry: ActivityInput, special: bool = False) -> int:
    model = _activity_model(special)
    row = model(
        content=entry.content,
        category=entry.category,
        time_start=entry.time_start,
        time_end=entry.time_end,
        day_id=day_id,
    )
    db.add(row)
    db.flush()
    return activity_pk(row)


def update_activity(db: Session, activity_id: int, entry: ActivityInput, special: bool = False) -> bool:
    row = db.get(_activity_model(special), activity_id)
    if row is None:
        return False
    row.content = entry.content
    row.category = entry.category
    row.time_start = entry.time_start
    row.time_end = entry.time_end
    db.add(row)
    db.flush()
    return True


def delete_activity(db: Session, activity_id: int, special: bool = False) -> bool:
    row = db.get(_activity_model(special), activity_id)
    if row is None:
        return False
    db.delete(row)
    db.flush()
    return True


def day_activity_ids(db: Session, day_id: int) -> List[int]:
    return list(db.exec(select(Activity.activity_id).where(Activity.day_id == day_id)).all())


def day_special_activity_ids(db: Session, day_id: int) -> List[int]:
    return list(db.exec(select(SpecialActivity.sp_activity_id).where(SpecialActivity.day_id == day_id)).all())
