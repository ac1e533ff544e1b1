"""Log and export template SQLModel models."""

import datetime

from sqlalchemy import DateTime, Text
from sqlmodel import Field, SQLModel


def _utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


# 日本語: 2種類のテンプレートで共通の列 / English: Columns shared by both template tables
class TemplateBase(SQLModel):
    name: str = Field(max_length=100)
    description: str | None = Field(default=None, max_length=500)
    color_code: str | None = Field(default=None, max_length=20)
    content_json: str | None = Field(default=None, sa_type=Text)
    date_created: datetime.datetime = Field(default_factory=_utcnow, sa_type=DateTime(timezone=True))


# 日本語: 1日分の入力状態のスナップショット / English: Snapshot of one day's editable state
class LogTemplate(TemplateBase, table=True):
    __tablename__ = "log_template"

    log_template_id: int | None = Field(default=None, primary_key=True)


# 日本語: 再利用するエクスポート設定 / English: Reusable export settings
class ExportTemplate(TemplateBase, table=True):
    __tablename__ = "export_template"

    export_template_id: int | None = Field(default=None, primary_key=True)
