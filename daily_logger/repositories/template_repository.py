"""Persistence helpers for log and export templates."""

from __future__ import annotations

import logging
from typing import List

from sqlmodel import Session, select

from daily_logger.models import ExportTemplate, LogTemplate

logger = logging.getLogger(__name__)

# 日本語: テンプレート種別 -> (モデル, 主キー列名) / English: Template kind -> (model, primary key attribute)
TEMPLATE_KINDS = {
    "log": (LogTemplate, "log_template_id"),
    "export": (ExportTemplate, "export_template_id"),
}


def _resolve_kind(kind: str):
    try:
        return TEMPLATE_KINDS[kind]
    except KeyError:
        raise ValueError(f"Unknown template kind: {kind!r}") from None


def template_id(template) -> int:
    if isinstance(template, ExportTemplate):
        return template.export_template_id
    return template.log_template_id


def create_template(
    db: Session,
    kind: str,
    *,
    name: str,
    description: str | None,
    color_code: str,
    content_json: str,
) -> int:
    model, _ = _resolve_kind(kind)
    template = model(name=name, description=description, color_code=color_code, content_json=content_json)
    db.add(template)
    db.flush()
    logger.info("%s template created with ID: %s", kind.capitalize(), template_id(template))
    return template_id(template)


def read_template(db: Session, kind: str, identifier: int):
    model, _ = _resolve_kind(kind)
    return db.get(model, identifier)


def list_templates(db: Session, kind: str) -> List:
    model, pk_name = _resolve_kind(kind)
    return list(db.exec(select(model).order_by(getattr(model, pk_name))).all())


def delete_template(db: Session, kind: str, identifier: int) -> bool:
    template = read_template(db, kind, identifier)
    if template is None:
        return False
    db.delete(template)
    db.flush()
    return True
