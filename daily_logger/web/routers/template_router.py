"""Log and export template API routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlmodel import Session

from daily_logger.core.db import get_db
from daily_logger.schemas import BatchDeleteRequest, TemplateCreate, TemplateFromDay
from daily_logger.services.template_service import (
    apply_template,
    create_template,
    create_template_from_day,
    delete_templates,
    filter_templates,
    list_templates,
)
from daily_logger.web import handlers as web_handlers

router = APIRouter()


# 日本語: 固定パスを {kind} より先に登録 / English: Register the fixed path before the {kind} routes
@router.post("/api/templates/log/from-day", name="api_create_template_from_day")
def api_create_template_from_day(payload: TemplateFromDay, db: Session = Depends(get_db)):
    return web_handlers.api_create_template_from_day(
        payload,
        db,
        create_template_from_day_fn=create_template_from_day,
    )


@router.get("/api/templates/{kind}", name="api_list_templates")
def api_list_templates(kind: str, q: str | None = None, db: Session = Depends(get_db)):
    return web_handlers.api_list_templates(
        kind,
        db,
        list_templates_fn=list_templates,
        filter_templates_fn=filter_templates,
        query=q,
    )


@router.post("/api/templates/{kind}", name="api_create_template")
def api_create_template(kind: str, payload: TemplateCreate, db: Session = Depends(get_db)):
    return web_handlers.api_create_template(kind, payload, db, create_template_fn=create_template)


@router.get("/api/templates/{kind}/{template_id}/apply", name="api_apply_template")
def api_apply_template(kind: str, template_id: int, db: Session = Depends(get_db)):
    return web_handlers.api_apply_template(kind, template_id, db, apply_template_fn=apply_template)


@router.post("/api/templates/{kind}/delete", name="api_delete_templates")
def api_delete_templates(kind: str, payload: BatchDeleteRequest, db: Session = Depends(get_db)):
    return web_handlers.api_delete_templates(kind, payload, db, delete_templates_fn=delete_templates)
