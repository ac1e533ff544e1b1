"""SQLModel exports for Daily Logger."""

from .day_models import Activity, Day, SpecialActivity
from .template_models import ExportTemplate, LogTemplate
from .user_models import ResponsibilitiesSummary, User

__all__ = [
    "User",
    "ResponsibilitiesSummary",
    "Day",
    "Activity",
    "SpecialActivity",
    "LogTemplate",
    "ExportTemplate",
]
