"""Service-layer exports.

``export_service`` sits above the renderers and is imported directly.
"""

from .date_format_service import (
    format_activity_prefix,
    format_date,
    format_short_date,
    get_dates_in_range,
    normalize_date,
    normalize_time,
    parse_work_schedule,
)
from .reconcile_service import delete_day, fetch_active_days, fetch_day, reconcile_day, save_activities
from .report_service import build_report
from .seed_service import seed_demo_log, seed_demo_user
from .template_service import (
    apply_template,
    create_template,
    create_template_from_day,
    delete_templates,
    filter_templates,
    list_templates,
    snapshot_day,
)
from .user_service import (
    get_responsibilities_summary,
    get_user_profile,
    save_account_changes,
    sign_up_user,
    validate_account_update,
)

__all__ = [
    "format_activity_prefix",
    "format_date",
    "format_short_date",
    "get_dates_in_range",
    "normalize_date",
    "normalize_time",
    "parse_work_schedule",
    "delete_day",
    "fetch_active_days",
    "fetch_day",
    "reconcile_day",
    "save_activities",
    "build_report",
    "seed_demo_log",
    "seed_demo_user",
    "apply_template",
    "create_template",
    "create_template_from_day",
    "delete_templates",
    "filter_templates",
    "list_templates",
    "snapshot_day",
    "get_responsibilities_summary",
    "get_user_profile",
    "save_account_changes",
    "sign_up_user",
    "validate_account_update",
]
