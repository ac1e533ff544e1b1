"""Log and export template services."""

from __future__ import annotations

import datetime
import json
import logging
from typing import Iterable, List

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from daily_logger.core.config import COLOR_OPTIONS, DEFAULT_TEMPLATE_COLOR
from daily_logger.core.db import transaction
from daily_logger.core.exceptions import EntityNotFoundError, ValidationError
from daily_logger.repositories import template_repository
from daily_logger.schemas import (
    TEMPLATE_CONTENT_VERSION,
    ActivityInput,
    AppliedTemplate,
    BatchDeleteResult,
    DayData,
    ExportTemplateContent,
    LogTemplateContent,
    TemplateSummary,
)
from daily_logger.services import reconcile_service

logger = logging.getLogger(__name__)

# 日本語: 保存時に行IDを落とす(テンプレートは元の行を参照しない) / English: Row ids never go into a snapshot
_STRIP_IDS = {
    "activities": {"__all__": {"id"}},
    "special_activities": {"__all__": {"id"}},
}

_CONTENT_MODELS = {
    "log": LogTemplateContent,
    "export": ExportTemplateContent,
}

# 日本語: 書き込み時に必須のキー(別名, フィールド名) / English: Keys a new snapshot must carry (alias, field name)
_REQUIRED_ON_WRITE = {
    "log": (("dayData", "day_data"), ("activities", "activities")),
    "export": (),
}


def _content_model(kind: str):
    try:
        return _CONTENT_MODELS[kind]
    except KeyError:
        raise ValidationError(f"Unknown template kind: {kind!r}") from None


def parse_template_content(kind: str, raw, *, require_snapshot: bool = False):
    """Validate template content from a JSON string or a decoded dict.

    With ``require_snapshot`` the keys a new snapshot must carry are checked;
    stored rows are read leniently so older snapshots still load.
    """
    model = _content_model(kind)
    data = raw
    if isinstance(raw, (str, bytes)):
        try:
            data = json.loads(raw or "{}")
        except json.JSONDecodeError as exc:
            raise ValidationError("Template content is not valid JSON.") from exc
    if not isinstance(data, dict):
        raise ValidationError("Template content must be a JSON object.")
    if require_snapshot:
        missing = [keys[0] for keys in _REQUIRED_ON_WRITE[kind] if not any(key in data for key in keys)]
        if missing:
            raise ValidationError(f"Template content is missing: {', '.join(missing)}.")
    try:
        content = model.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError("Template content does not match the expected shape.") from exc
    if content.version > TEMPLATE_CONTENT_VERSION:
        logger.warning(
            "Template content version %s is newer than supported version %s",
            content.version,
            TEMPLATE_CONTENT_VERSION,
        )
    return content


def serialize_template_content(content) -> str:
    if isinstance(content, LogTemplateContent):
        return content.model_dump_json(by_alias=True, exclude=_STRIP_IDS)
    return content.model_dump_json(by_alias=True)


def create_template(
    db: Session,
    kind: str,
    name: str,
    content,
    description: str | None = None,
    color_code: str | None = None,
) -> int | None:
    """Store a named snapshot. Returns the new id, or ``None`` on a storage failure."""
    if not (name or "").strip():
        raise ValidationError("Template name is required.")
    parsed = content
    if not isinstance(content, _content_model(kind)):
        parsed = parse_template_content(kind, content, require_snapshot=True)

    try:
        with transaction(db):
            template_id = template_repository.create_template(
                db,
                kind,
                name=name.strip(),
                description=(description or "").strip() or None,
                color_code=color_code or DEFAULT_TEMPLATE_COLOR,
                content_json=serialize_template_content(parsed),
            )
    except SQLAlchemyError:
        logger.exception("Failed to create %s template %r", kind, name)
        return None
    return template_id


def snapshot_day(db: Session, date) -> LogTemplateContent | None:
    day = reconcile_service.fetch_day(db, date)
    if day is None:
        return None

    def _entries(records) -> List[ActivityInput]:
        return [
            ActivityInput(
                content=record.content,
                category=record.category,
                time_start=record.time_start,
                time_end=record.time_end,
            )
            for record in records
        ]

    return LogTemplateContent(
        day_data=DayData(date=day.date, time_in=day.time_in, time_out=day.time_out),
        activities=_entries(day.activities),
        special_activities=_entries(day.special_activities),
    )


def create_template_from_day(
    db: Session,
    name: str,
    date,
    description: str | None = None,
    color_code: str | None = None,
) -> int | None:
    snapshot = snapshot_day(db, date)
    if snapshot is None:
        raise EntityNotFoundError(f"No day recorded for {date}.")
    return create_template(db, "log", name, snapshot, description=description, color_code=color_code)


def apply_template(db: Session, kind: str, template_id: int) -> AppliedTemplate | None:
    """Read a template back as plain editable data.

    Unknown ids and unreadable content both give ``None``; the stored row is
    never modified.
    """
    _content_model(kind)
    template = template_repository.read_template(db, kind, template_id)
    if template is None:
        return None
    try:
        content = parse_template_content(kind, template.content_json)
    except ValidationError:
        logger.exception("Failed to parse template content JSON for %s template %s", kind, template_id)
        return None

    if isinstance(content, LogTemplateContent):
        payload = content.model_dump(by_alias=True, exclude=_STRIP_IDS)
    else:
        payload = content.model_dump(by_alias=True)
    return AppliedTemplate(
        name=template.name,
        color_code=template.color_code or DEFAULT_TEMPLATE_COLOR,
        content=payload,
    )


def _created_iso(value: datetime.datetime) -> str:
    # 日本語: SQLiteはタイムゾーンを落として返す / English: SQLite hands the value back without tzinfo
    if value.tzinfo is None:
        value = value.replace(tzinfo=datetime.timezone.utc)
    return value.isoformat()


def list_templates(db: Session, kind: str) -> List[TemplateSummary]:
    _content_model(kind)
    return [
        TemplateSummary(
            id=template_repository.template_id(template),
            name=template.name,
            description=template.description,
            color_code=template.color_code or DEFAULT_TEMPLATE_COLOR,
            date_created=_created_iso(template.date_created),
        )
        for template in template_repository.list_templates(db, kind)
    ]


def color_name(color_code: str | None) -> str:
    return COLOR_OPTIONS.get((color_code or "").upper(), "Unknown")


def filter_templates(templates: List[TemplateSummary], query: str) -> List[TemplateSummary]:
    """Match the query against template names and colour names."""
    needle = (query or "").strip().lower()
    if not needle:
        return list(templates)
    return [
        template
        for template in templates
        if needle in template.name.lower() or needle in color_name(template.color_code).lower()
    ]


def _delete_message(succeeded: int, failed: int) -> str:
    if failed == 0:
        return f"Successfully deleted {succeeded} template(s)."
    if succeeded == 0:
        return "Failed to delete any templates."
    return f"Deleted {succeeded} template(s). {failed} deletion(s) failed."


def delete_templates(db: Session, kind: str, ids: Iterable[int]) -> BatchDeleteResult:
    """Delete each template independently and report the counts."""
    _content_model(kind)
    succeeded = 0
    failed = 0
    for identifier in ids:
        try:
            with transaction(db):
                deleted = template_repository.delete_template(db, kind, identifier)
        except SQLAlchemyError:
            logger.exception("Failed to delete %s template %s", kind, identifier)
            deleted = False
        if deleted:
            succeeded += 1
        else:
            failed += 1
    return BatchDeleteResult(succeeded=succeeded, failed=failed, message=_delete_message(succeeded, failed))
