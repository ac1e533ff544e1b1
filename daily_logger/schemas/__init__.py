"""Pydantic schemas shared by services, renderers and routes."""

from .day_schemas import (
    ActivityInput,
    ActivityRecord,
    DayRecord,
    DaySaveRequest,
    DayTimes,
    QuickSaveRequest,
)
from .report_schemas import ExportOptions, ExportRequest, ExportResult, KeyContribution, ReportDocument
from .template_schemas import (
    TEMPLATE_CONTENT_VERSION,
    AppliedTemplate,
    BatchDeleteRequest,
    BatchDeleteResult,
    DayData,
    ExportTemplateContent,
    LogTemplateContent,
    TemplateCreate,
    TemplateFromDay,
    TemplateSummary,
)
from .user_schemas import AccountUpdate, ServiceResponse, SignUpRequest, UserProfile, WorkSchedulePeriod

__all__ = [
    "ActivityInput",
    "ActivityRecord",
    "DayRecord",
    "DaySaveRequest",
    "DayTimes",
    "QuickSaveRequest",
    "ExportOptions",
    "ExportRequest",
    "ExportResult",
    "KeyContribution",
    "ReportDocument",
    "TEMPLATE_CONTENT_VERSION",
    "AppliedTemplate",
    "BatchDeleteRequest",
    "BatchDeleteResult",
    "DayData",
    "ExportTemplateContent",
    "LogTemplateContent",
    "TemplateCreate",
    "TemplateFromDay",
    "TemplateSummary",
    "AccountUpdate",
    "ServiceResponse",
    "SignUpRequest",
    "UserProfile",
    "WorkSchedulePeriod",
]
