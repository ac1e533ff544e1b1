"""HTTP handler implementations used by the routers.

Routers stay thin: they resolve dependencies and pass the service functions in
as ``*_fn`` keyword arguments, which keeps these handlers easy to test.
"""

from __future__ import annotations

import datetime
import logging
from pathlib import Path

from fastapi import HTTPException
from fastapi.responses import FileResponse
from sqlmodel import Session

from daily_logger.core.exceptions import EntityNotFoundError, ValidationError
from daily_logger.schemas import (
    AccountUpdate,
    BatchDeleteRequest,
    DaySaveRequest,
    DayTimes,
    ExportRequest,
    QuickSaveRequest,
    SignUpRequest,
    TemplateCreate,
    TemplateFromDay,
)

logger = logging.getLogger(__name__)


def _parse_date_str(date_str: str) -> datetime.date:
    try:
        return datetime.datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid date format")


# ---------------------------------------------------------------------------
# Days
# ---------------------------------------------------------------------------


def api_active_days(db: Session, *, fetch_active_days_fn):
    return {"days": [date.isoformat() for date in fetch_active_days_fn(db)]}


def api_day_detail(date_str: str, db: Session, *, fetch_day_fn):
    date_obj = _parse_date_str(date_str)
    day = fetch_day_fn(db, date_obj)
    if day is None:
        raise HTTPException(status_code=404, detail="Day not found")
    return day.model_dump()


def api_reconcile_day(date_str: str, payload: DaySaveRequest, db: Session, *, reconcile_day_fn, fetch_day_fn):
    date_obj = _parse_date_str(date_str)
    saved = reconcile_day_fn(
        db,
        date_obj,
        DayTimes(time_in=payload.time_in, time_out=payload.time_out),
        payload.activities,
        payload.special_activities,
        payload.deleted_activity_ids,
        payload.deleted_special_activity_ids,
        prune_empty=payload.prune_empty,
    )
    if not saved:
        raise HTTPException(status_code=500, detail="Failed to save day changes.")
    day = fetch_day_fn(db, date_obj)
    return {"status": "ok", "day": day.model_dump() if day is not None else None}


def api_save_activities(date_str: str, payload: QuickSaveRequest, db: Session, *, save_activities_fn):
    date_obj = _parse_date_str(date_str)
    if not payload.activities:
        raise HTTPException(status_code=400, detail="Activities list cannot be empty.")
    saved = save_activities_fn(
        db,
        date_obj,
        DayTimes(time_in=payload.time_in, time_out=payload.time_out),
        payload.activities,
        payload.special_activities,
    )
    if not saved:
        raise HTTPException(status_code=500, detail="Failed to save activities.")
    return {"status": "ok"}


def api_delete_day(date_str: str, db: Session, *, delete_day_fn):
    date_obj = _parse_date_str(date_str)
    if not delete_day_fn(db, date_obj):
        raise HTTPException(status_code=404, detail="Day not found")
    return {"status": "ok"}


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------


def api_list_templates(kind: str, db: Session, *, list_templates_fn, filter_templates_fn, query: str | None = None):
    try:
        templates = list_templates_fn(db, kind)
    except ValidationError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    if query:
        templates = filter_templates_fn(templates, query)
    return {"templates": [template.model_dump() for template in templates]}


def api_create_template(kind: str, payload: TemplateCreate, db: Session, *, create_template_fn):
    try:
        template_id = create_template_fn(
            db,
            kind,
            payload.name,
            payload.content,
            description=payload.description,
            color_code=payload.color_code,
        )
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    if template_id is None:
        raise HTTPException(status_code=500, detail="Failed to create template.")
    return {"status": "ok", "id": template_id}


def api_create_template_from_day(payload: TemplateFromDay, db: Session, *, create_template_from_day_fn):
    date_obj = _parse_date_str(payload.date)
    try:
        template_id = create_template_from_day_fn(
            db,
            payload.name,
            date_obj,
            description=payload.description,
            color_code=payload.color_code,
        )
    except EntityNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    if template_id is None:
        raise HTTPException(status_code=500, detail="Failed to create template.")
    return {"status": "ok", "id": template_id}


def api_apply_template(kind: str, template_id: int, db: Session, *, apply_template_fn):
    try:
        applied = apply_template_fn(db, kind, template_id)
    except ValidationError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    if applied is None:
        raise HTTPException(status_code=404, detail="Template not found or unreadable.")
    return applied.model_dump()


def api_delete_templates(kind: str, payload: BatchDeleteRequest, db: Session, *, delete_templates_fn):
    try:
        result = delete_templates_fn(db, kind, payload.ids)
    except ValidationError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    body = result.model_dump()
    body["status"] = "error" if result.failed and not result.succeeded else "success"
    return body


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


def api_sign_up(payload: SignUpRequest, db: Session, *, sign_up_user_fn):
    response = sign_up_user_fn(db, payload)
    if not response.success:
        status_code = 409 if "already exists" in response.message else 400
        raise HTTPException(status_code=status_code, detail=response.message)
    return response.model_dump()


def api_user_profile(user_id: int, db: Session, *, get_user_profile_fn):
    profile = get_user_profile_fn(db, user_id)
    if profile is None:
        raise HTTPException(status_code=404, detail="User not found.")
    return profile.model_dump()


def api_save_account(user_id: int, payload: AccountUpdate, db: Session, *, save_account_changes_fn):
    response = save_account_changes_fn(db, user_id, payload)
    if not response.success:
        status_code = 404 if response.message == "User not found." else 400
        raise HTTPException(status_code=status_code, detail=response.message)
    return response.model_dump()


def api_responsibilities(user_id: int, db: Session, *, get_responsibilities_summary_fn):
    return {"user_id": user_id, "content": get_responsibilities_summary_fn(db, user_id)}


# ---------------------------------------------------------------------------
# Reports
# ---------------------------------------------------------------------------


def api_report_preview(payload: ExportRequest, db: Session, *, build_report_fn):
    try:
        document = build_report_fn(
            db,
            payload.user_id,
            _parse_date_str(payload.start_date),
            _parse_date_str(payload.end_date),
            payload.options,
            responsibilities=payload.responsibilities,
            key_contributions=payload.key_contributions,
            conclusions=payload.conclusions,
        )
    except EntityNotFoundError:
        raise HTTPException(status_code=404, detail="User not found.")
    return document.model_dump()


def api_report_export(
    payload: ExportRequest,
    db: Session,
    *,
    generate_report_fn,
    export_dir: Path,
    print_engine=None,
):
    result = generate_report_fn(
        db,
        payload.user_id,
        _parse_date_str(payload.start_date),
        _parse_date_str(payload.end_date),
        payload.options,
        responsibilities=payload.responsibilities,
        key_contributions=payload.key_contributions,
        conclusions=payload.conclusions,
        export_dir=export_dir,
        print_engine=print_engine,
    )
    if not result.success:
        status_code = 404 if result.error == "User not found." else 500
        raise HTTPException(status_code=status_code, detail=result.error)
    return FileResponse(result.file_path, media_type=result.media_type, filename=result.file_name)


# ---------------------------------------------------------------------------
# Developer tools
# ---------------------------------------------------------------------------


def api_dev_tables(*, get_all_tables_fn):
    return {"tables": get_all_tables_fn()}


def api_dev_table_dump(table_name: str, db: Session, *, read_all_table_data_fn):
    rows = read_all_table_data_fn(db, table_name)
    if rows is None:
        raise HTTPException(status_code=404, detail=f"Table '{table_name}' does not exist.")
    return {"table": table_name, "rows": rows}


def api_dev_table_reset(table_name: str, db: Session, *, reset_table_fn):
    try:
        reset = reset_table_fn(db, table_name)
        if not reset:
            raise HTTPException(status_code=404, detail=f"Table '{table_name}' does not exist.")
        db.commit()
    except HTTPException:
        raise
    except Exception:
        db.rollback()
        logger.exception("Error resetting table '%s'", table_name)
        raise HTTPException(status_code=500, detail=f"Failed to reset table '{table_name}'.")
    logger.info("Successfully reset table: %s", table_name)
    return {"status": "ok", "message": f"Successfully reset table: {table_name}"}


def api_dev_seed(db: Session, *, seed_demo_log_fn):
    messages = seed_demo_log_fn(db)
    return {"status": "ok", "messages": messages}
