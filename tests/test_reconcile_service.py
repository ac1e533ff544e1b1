import datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select

from daily_logger.models import Activity, Day, SpecialActivity
from daily_logger.repositories import day_repository
from daily_logger.schemas import ActivityInput, DayTimes
from daily_logger.services.reconcile_service import (
    delete_day,
    fetch_active_days,
    fetch_day,
    reconcile_day,
    save_activities,
)

JULY_7 = datetime.date(2025, 7, 7)
SHIFT = DayTimes(time_in="06:30:00", time_out="14:30:00")


def _orientation(**overrides):
    values = {"content": "Orientation", "time_start": "07:00:00", "time_end": "14:30:00"}
    values.update(overrides)
    return ActivityInput(**values)


def test_reconcile_creates_day_and_activity(db):
    assert reconcile_day(db, JULY_7, SHIFT, [_orientation()]) is True

    days = db.exec(select(Day)).all()
    activities = db.exec(select(Activity)).all()
    assert len(days) == 1
    assert days[0].date == JULY_7
    assert days[0].time_in == "06:30:00"
    assert days[0].time_out == "14:30:00"
    assert len(activities) == 1
    assert activities[0].day_id == days[0].day_id
    assert activities[0].content == "Orientation"


def test_reconcile_normalizes_raw_clock_input(db):
    reconcile_day(
        db,
        "07.07.2025",
        DayTimes(time_in="06.30", time_out="14.30"),
        [_orientation(time_start="07.00", time_end="14.30")],
    )

    day = fetch_day(db, JULY_7)
    assert day.time_in == "06:30:00"
    assert day.activities[0].time_start == "07:00:00"
    assert day.activities[0].time_end == "14:30:00"


def test_resubmitting_the_same_state_is_idempotent(db):
    reconcile_day(db, JULY_7, SHIFT, [_orientation()])
    reconcile_day(db, JULY_7, SHIFT, [_orientation()])

    assert len(db.exec(select(Day)).all()) == 1
    assert len(db.exec(select(Activity)).all()) == 1


def test_entries_with_ids_are_updated_in_place(db):
    reconcile_day(db, JULY_7, SHIFT, [_orientation()])
    activity_id = fetch_day(db, JULY_7).activities[0].id

    reconcile_day(db, JULY_7, SHIFT, [_orientation(id=activity_id, content="Orientation and safety briefing")])

    day = fetch_day(db, JULY_7)
    assert [(a.id, a.content) for a in day.activities] == [(activity_id, "Orientation and safety briefing")]


def test_deletions_remove_listed_rows(db):
    reconcile_day(db, JULY_7, SHIFT, [_orientation(), ActivityInput(content="Cable management")])
    day = fetch_day(db, JULY_7)
    cable_id = [a.id for a in day.activities if a.content == "Cable management"][0]

    reconcile_day(db, JULY_7, SHIFT, [], deleted_activity_ids=[cable_id])

    assert [a.content for a in fetch_day(db, JULY_7).activities] == ["Orientation"]


def test_deletions_never_touch_another_days_rows(db):
    other_date = datetime.date(2025, 7, 8)
    reconcile_day(db, other_date, SHIFT, [ActivityInput(content="Fixed ethernet issues")])
    foreign_id = fetch_day(db, other_date).activities[0].id

    reconcile_day(db, JULY_7, SHIFT, [_orientation()], deleted_activity_ids=[foreign_id])

    assert [a.content for a in fetch_day(db, other_date).activities] == ["Fixed ethernet issues"]


def test_special_activities_are_stored_separately(db):
    reconcile_day(
        db,
        JULY_7,
        SHIFT,
        [_orientation()],
        [ActivityInput(content="Visited the TV room", category="Training")],
    )

    day = fetch_day(db, JULY_7)
    assert [a.content for a in day.special_activities] == ["Visited the TV room"]
    assert day.special_activities[0].category == "Training"
    assert len(db.exec(select(SpecialActivity)).all()) == 1


def test_empty_day_is_kept_unless_pruned(db):
    reconcile_day(db, JULY_7, SHIFT, [_orientation()])
    activity_id = fetch_day(db, JULY_7).activities[0].id

    reconcile_day(db, JULY_7, SHIFT, [], deleted_activity_ids=[activity_id])
    assert fetch_day(db, JULY_7) is not None

    reconcile_day(db, JULY_7, SHIFT, [], prune_empty=True)
    assert fetch_day(db, JULY_7) is None


def test_invalid_date_is_rejected(db):
    assert reconcile_day(db, "not a date", SHIFT, [_orientation()]) is False
    assert db.exec(select(Day)).all() == []


def test_delete_day_cascades_to_activities(db):
    reconcile_day(db, JULY_7, SHIFT, [_orientation()], [ActivityInput(content="Visited the TV room")])

    assert delete_day(db, JULY_7) is True

    assert db.exec(select(Day)).all() == []
    assert db.exec(select(Activity)).all() == []
    assert db.exec(select(SpecialActivity)).all() == []


def test_delete_day_for_unknown_date_returns_false(db):
    assert delete_day(db, JULY_7) is False


def test_save_activities_appends_and_rejects_empty_list(db):
    assert save_activities(db, JULY_7, SHIFT, []) is False

    assert save_activities(db, JULY_7, SHIFT, [_orientation()]) is True
    assert save_activities(db, JULY_7, SHIFT, [ActivityInput(content="Observed editing")]) is True

    assert [a.content for a in fetch_day(db, JULY_7).activities] == ["Orientation", "Observed editing"]


def test_fetch_active_days_is_sorted(db):
    reconcile_day(db, datetime.date(2025, 7, 9), SHIFT, [_orientation()])
    reconcile_day(db, JULY_7, SHIFT, [_orientation()])

    assert fetch_active_days(db) == [JULY_7, datetime.date(2025, 7, 9)]


def test_failed_insert_rolls_back_the_whole_reconcile(db, monkeypatch):
    reconcile_day(db, JULY_7, SHIFT, [_orientation()])
    orientation_id = fetch_day(db, JULY_7).activities[0].id

    def _fail_insert(*args, **kwargs):
        raise SQLAlchemyError("disk full")

    monkeypatch.setattr(day_repository, "create_activity", _fail_insert)
    saved = reconcile_day(
        db,
        JULY_7,
        DayTimes(time_in="08:00:00", time_out="16:00:00"),
        [ActivityInput(content="Cable management")],
        deleted_activity_ids=[orientation_id],
    )

    assert saved is False
    day = fetch_day(db, JULY_7)
    assert day.time_in == "06:30:00"
    assert day.time_out == "14:30:00"
    assert [(a.id, a.content) for a in day.activities] == [(orientation_id, "Orientation")]


def test_entry_deleted_in_the_same_save_is_not_recreated(db):
    reconcile_day(db, JULY_7, SHIFT, [_orientation()])
    orientation_id = fetch_day(db, JULY_7).activities[0].id

    saved = reconcile_day(
        db,
        JULY_7,
        SHIFT,
        [_orientation(id=orientation_id)],
        deleted_activity_ids=[orientation_id],
    )

    assert saved is True
    assert fetch_day(db, JULY_7).activities == []
    assert db.exec(select(Activity)).all() == []
