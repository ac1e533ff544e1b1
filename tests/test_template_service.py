import datetime

import pytest

from daily_logger.core.exceptions import EntityNotFoundError, ValidationError
from daily_logger.models import LogTemplate
from daily_logger.schemas import ActivityInput, DayTimes, LogTemplateContent, TemplateSummary
from daily_logger.services.reconcile_service import reconcile_day
from daily_logger.services.template_service import (
    apply_template,
    create_template,
    create_template_from_day,
    delete_templates,
    filter_templates,
    list_templates,
    parse_template_content,
)

JULY_7 = datetime.date(2025, 7, 7)
BLANK_SNAPSHOT = {"dayData": {}, "activities": []}


def _record_shift(db):
    reconcile_day(
        db,
        JULY_7,
        DayTimes(time_in="07:30", time_out="14:30"),
        [
            ActivityInput(content="Installed editing software", time_start="07:30", time_end="10:00"),
            ActivityInput(content="Ad hoc IT support", time_start="10:00", time_end="14:30", category="Support"),
        ],
    )


def test_template_from_day_round_trips_into_editor_buffer(db):
    _record_shift(db)

    template_id = create_template_from_day(db, "Standard Shift", JULY_7, color_code="#4CAF50")
    applied = apply_template(db, "log", template_id)

    assert applied.name == "Standard Shift"
    assert applied.color_code == "#4CAF50"
    content = LogTemplateContent.model_validate(applied.content)
    assert content.day_data.time_in == "07:30:00"
    assert content.day_data.time_out == "14:30:00"
    assert [(a.content, a.time_start, a.time_end, a.category) for a in content.activities] == [
        ("Installed editing software", "07:30:00", "10:00:00", None),
        ("Ad hoc IT support", "10:00:00", "14:30:00", "Support"),
    ]


def test_applied_template_carries_no_row_ids(db):
    _record_shift(db)
    template_id = create_template_from_day(db, "Standard Shift", JULY_7)

    applied = apply_template(db, "log", template_id)

    assert all("id" not in activity for activity in applied.content["activities"])
    assert "dayData" in applied.content
    assert "specialActivities" in applied.content


def test_applying_twice_leaves_the_template_unchanged(db):
    _record_shift(db)
    template_id = create_template_from_day(db, "Standard Shift", JULY_7)

    first = apply_template(db, "log", template_id)
    second = apply_template(db, "log", template_id)

    assert first == second


def test_template_from_missing_day_raises(db):
    with pytest.raises(EntityNotFoundError):
        create_template_from_day(db, "Nothing", JULY_7)


def test_create_template_requires_name(db):
    with pytest.raises(ValidationError):
        create_template(db, "log", "   ", {"activities": []})


def test_unknown_kind_is_rejected(db):
    with pytest.raises(ValidationError):
        list_templates(db, "weekly")


def test_default_color_is_gray(db):
    create_template(db, "export", "Monthly defaults", {"conclusions": "All good"})

    [summary] = list_templates(db, "export")
    assert summary.color_code == "#8E8E93"


def test_malformed_stored_content_yields_none(db):
    template = LogTemplate(name="Broken", color_code="#FF3B30", content_json="{not json")
    db.add(template)
    db.commit()

    assert apply_template(db, "log", template.log_template_id) is None


def test_apply_unknown_template_returns_none(db):
    assert apply_template(db, "log", 999) is None


def test_parse_template_content_defaults_missing_version_to_one():
    content = parse_template_content("log", '{"dayData": {"time_in": "07:30:00"}, "activities": []}')

    assert content.version == 1
    assert content.day_data.time_in == "07:30:00"


def test_parse_template_content_accepts_newer_version():
    content = parse_template_content("export", {"version": 2, "conclusions": "Done"})

    assert content.version == 2
    assert content.conclusions == "Done"


def test_batch_delete_reports_counts(db):
    first = create_template(db, "log", "Morning", BLANK_SNAPSHOT)
    second = create_template(db, "log", "Evening", BLANK_SNAPSHOT)

    result = delete_templates(db, "log", [first, second])
    assert result.succeeded == 2
    assert result.failed == 0
    assert result.message == "Successfully deleted 2 template(s)."
    assert list_templates(db, "log") == []


def test_batch_delete_partial_failure_keeps_successes(db):
    kept = create_template(db, "log", "Morning", BLANK_SNAPSHOT)

    result = delete_templates(db, "log", [kept, 404])

    assert result.succeeded == 1
    assert result.failed == 1
    assert result.message == "Deleted 1 template(s). 1 deletion(s) failed."


def test_batch_delete_all_failed(db):
    result = delete_templates(db, "export", [1, 2])

    assert result.succeeded == 0
    assert result.message == "Failed to delete any templates."


def test_filter_templates_matches_name_and_color_name():
    templates = [
        TemplateSummary(id=1, name="Standard Shift", color_code="#4CAF50", date_created="2025-07-07T08:00:00"),
        TemplateSummary(id=2, name="Night Shift", color_code="#007AFF", date_created="2025-07-07T08:00:00"),
    ]

    assert [t.id for t in filter_templates(templates, "standard")] == [1]
    assert [t.id for t in filter_templates(templates, "blue")] == [2]
    assert [t.id for t in filter_templates(templates, "")] == [1, 2]


@pytest.mark.parametrize("content", [{}, {"dayData": {}}, {"activities": []}, ""])
def test_create_log_template_requires_snapshot_shape(db, content):
    with pytest.raises(ValidationError):
        create_template(db, "log", "Empty", content)

    assert list_templates(db, "log") == []


def test_stored_snapshot_without_keys_still_applies(db):
    template = LogTemplate(name="Legacy", color_code="#FF3B30", content_json='{"version": 1}')
    db.add(template)
    db.commit()

    applied = apply_template(db, "log", template.log_template_id)

    assert applied.content["activities"] == []


def test_template_created_timestamp_is_utc(db):
    assert create_template(db, "log", "Morning", BLANK_SNAPSHOT) is not None
    db.expire_all()

    [summary] = list_templates(db, "log")
    created = datetime.datetime.fromisoformat(summary.date_created)
    assert created.utcoffset() == datetime.timedelta(0)
