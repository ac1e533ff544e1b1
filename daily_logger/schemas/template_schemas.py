"""Versioned template content schemas."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from daily_logger.schemas.day_schemas import ActivityInput
from daily_logger.schemas.report_schemas import ExportOptions, KeyContribution

# 日本語: 保存形式の現行バージョン / English: Current on-disk content version
TEMPLATE_CONTENT_VERSION = 1


class DayData(BaseModel):
    date: str | None = None
    time_in: str | None = None
    time_out: str | None = None


class LogTemplateContent(BaseModel):
    """Snapshot of a day's editable state, stored as ``content_json``.

    Wire keys stay camelCase (``dayData``, ``specialActivities``) so snapshots
    written by older clients still load.
    """

    model_config = ConfigDict(populate_by_name=True)

    version: int = TEMPLATE_CONTENT_VERSION
    day_data: DayData = Field(default_factory=DayData, alias="dayData")
    activities: List[ActivityInput] = Field(default_factory=list)
    special_activities: List[ActivityInput] = Field(default_factory=list, alias="specialActivities")


class ExportTemplateContent(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    version: int = TEMPLATE_CONTENT_VERSION
    options: ExportOptions = Field(default_factory=ExportOptions)
    key_contributions: List[KeyContribution] = Field(default_factory=list, alias="keyContributions")
    conclusions: str | None = None


class TemplateCreate(BaseModel):
    name: str
    description: str | None = None
    color_code: str | None = None
    content: dict


class TemplateFromDay(BaseModel):
    name: str
    date: str
    description: str | None = None
    color_code: str | None = None


class TemplateSummary(BaseModel):
    id: int
    name: str
    description: str | None = None
    color_code: str
    date_created: str


class AppliedTemplate(BaseModel):
    """What the editor receives after applying a template; carries no row ids."""

    name: str
    color_code: str
    content: dict


class BatchDeleteRequest(BaseModel):
    ids: List[int] = Field(default_factory=list)


class BatchDeleteResult(BaseModel):
    succeeded: int = 0
    failed: int = 0
    message: str = ""
