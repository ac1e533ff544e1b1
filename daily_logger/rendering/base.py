"""Renderer strategy base and the shared section pipeline."""

from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from daily_logger.core.exceptions import ExportError
from daily_logger.schemas import ExportOptions, KeyContribution, ReportDocument
from daily_logger.services.date_format_service import (
    format_activity_prefix,
    format_date,
    format_work_schedule_period,
    parse_date,
    weekday_name,
)

logger = logging.getLogger(__name__)

NOT_RECORDED = "Not recorded"

# 日本語: 全スタイル共通のセクション順 / English: Section order shared by every style
SECTION_ORDER = (
    "roles",
    "work_schedule",
    "responsibilities",
    "key_contributions",
    "daily_log",
    "conclusions",
)

SECTION_TITLES = {
    "roles": "Position",
    "work_schedule": "Work Schedule",
    "responsibilities": "Monthly Summary of Responsibilities",
    "key_contributions": "Key Contributions",
    "daily_log": "Detailed Daily Log",
    "conclusions": "Conclusion",
    "special_activities": "Special Activities",
}


@dataclass
class ActivityLine:
    prefix: str
    content: str
    category: str | None = None


@dataclass
class DayView:
    formatted_date: str
    weekday: str
    time_in: str
    time_out: str
    activities: List[ActivityLine] = field(default_factory=list)
    special_activities: List[ActivityLine] = field(default_factory=list)

    @property
    def heading(self) -> str:
        return f"{self.formatted_date} - {self.weekday.upper()}"


@dataclass
class ReportView:
    """Presentation-ready report: every string is final, every section already gated."""

    title: str
    user_name: str
    reporting_period: str
    generated_on: str
    roles: str | None = None
    work_schedule: List[str] = field(default_factory=list)
    responsibilities: str | None = None
    key_contributions: List[KeyContribution] = field(default_factory=list)
    days: List[DayView] = field(default_factory=list)
    conclusions: str | None = None

    @property
    def sections(self) -> List[str]:
        present = {
            "roles": bool(self.roles),
            "work_schedule": bool(self.work_schedule),
            "responsibilities": bool(self.responsibilities),
            "key_contributions": bool(self.key_contributions),
            "daily_log": bool(self.days),
            "conclusions": bool(self.conclusions),
        }
        return [name for name in SECTION_ORDER if present[name]]


def _activity_lines(records) -> List[ActivityLine]:
    return [
        ActivityLine(
            prefix=format_activity_prefix(record.time_start, record.time_end),
            content=record.content,
            category=record.category,
        )
        for record in records
    ]


def build_report_view(
    document: ReportDocument,
    options: ExportOptions,
    generated_on: datetime.date | None = None,
) -> ReportView:
    """Gate every optional section on its option flag and format the rest.

    A section whose flag is false is left out even when the document carries
    data for it.
    """
    view = ReportView(
        title=document.title,
        user_name=document.user_name,
        reporting_period=document.reporting_period,
        generated_on=format_date(generated_on or datetime.date.today()),
    )
    if options.include_roles and document.roles:
        view.roles = document.roles
    if options.include_work_schedule and document.work_schedule:
        view.work_schedule = [format_work_schedule_period(period) for period in document.work_schedule]
    if options.include_responsibilities_summary and document.responsibilities:
        view.responsibilities = document.responsibilities
    if options.include_key_contributions and document.key_contributions:
        view.key_contributions = list(document.key_contributions)
    if options.include_daily_log and document.daily_log:
        for record in document.daily_log:
            date = parse_date(record.date)
            view.days.append(
                DayView(
                    formatted_date=format_date(date),
                    weekday=weekday_name(date),
                    time_in=record.time_in or NOT_RECORDED,
                    time_out=record.time_out or NOT_RECORDED,
                    activities=_activity_lines(record.activities),
                    special_activities=(
                        _activity_lines(record.special_activities) if options.include_special_activities else []
                    ),
                )
            )
    if options.include_conclusions and document.conclusions:
        view.conclusions = document.conclusions
    return view


class ReportRenderer:
    """One output format in one visual style.

    Subclasses implement :meth:`render_view`; ordering and gating of sections
    happen once in :func:`build_report_view`.
    """

    output_format = ""
    extension = ""
    media_type = "application/octet-stream"

    def __init__(self, style: str = "professional") -> None:
        self.style = style

    def render_view(self, view: ReportView) -> bytes:
        raise NotImplementedError

    def render(self, document: ReportDocument, options: ExportOptions) -> bytes:
        try:
            return self.render_view(build_report_view(document, options))
        except (ValueError, TypeError, LookupError) as exc:
            raise ExportError(f"Could not render {self.output_format} report: {exc}") from exc

    def write(self, document: ReportDocument, options: ExportOptions, path: Path) -> Path:
        payload = self.render(document, options)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(payload)
        except OSError as exc:
            raise ExportError(f"Could not write report to {path}") from exc
        logger.info("Report written to %s", path)
        return path
