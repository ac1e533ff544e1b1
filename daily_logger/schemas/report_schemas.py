"""Export options and the transient report document."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from daily_logger.schemas.day_schemas import DayRecord
from daily_logger.schemas.user_schemas import WorkSchedulePeriod


class KeyContribution(BaseModel):
    title: str
    content: str


class ExportOptions(BaseModel):
    include_roles: bool = True
    include_work_schedule: bool = True
    include_responsibilities_summary: bool = True
    include_key_contributions: bool = True
    include_daily_log: bool = True
    include_special_activities: bool = True
    include_conclusions: bool = True
    # 日本語: pdf | word / English: pdf | word
    output_format: str = "pdf"
    # 日本語: 未知のスタイルは professional へフォールバック / English: Unknown styles fall back to professional
    document_format: str = "professional"


class ReportDocument(BaseModel):
    """In-memory report built per export request; never persisted."""

    title: str
    user_name: str
    roles: str | None = None
    reporting_period: str
    work_schedule: List[WorkSchedulePeriod] | None = None
    responsibilities: str | None = None
    key_contributions: List[KeyContribution] | None = None
    daily_log: List[DayRecord] | None = None
    conclusions: str | None = None


class ExportRequest(BaseModel):
    user_id: int
    start_date: str
    end_date: str
    options: ExportOptions = Field(default_factory=ExportOptions)
    responsibilities: str | None = None
    key_contributions: List[KeyContribution] = Field(default_factory=list)
    conclusions: str | None = None


class ExportResult(BaseModel):
    success: bool
    file_path: str | None = None
    file_name: str | None = None
    media_type: str | None = None
    error: str | None = None
