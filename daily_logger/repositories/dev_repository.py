"""Table dump and reset helpers for the developer tools."""

from __future__ import annotations

import logging
from typing import Dict, List

from sqlalchemy import delete as sa_delete
from sqlmodel import Session, select

from daily_logger.models import (
    Activity,
    Day,
    ExportTemplate,
    LogTemplate,
    ResponsibilitiesSummary,
    SpecialActivity,
    User,
)

logger = logging.getLogger(__name__)

# 日本語: 操作を許可するテーブル一覧(任意のSQLは受け付けない) / English: Only these tables may be dumped or reset
ALL_TABLES = {
    "User": User,
    "Day": Day,
    "Activity": Activity,
    "Special_Activity": SpecialActivity,
    "Responsibilities_Summary": ResponsibilitiesSummary,
    "Log_Template": LogTemplate,
    "Export_Template": ExportTemplate,
}


def get_all_tables() -> List[str]:
    return list(ALL_TABLES)


def read_all_table_data(db: Session, table_name: str) -> List[Dict] | None:
    model = ALL_TABLES.get(table_name)
    if model is None:
        logger.warning("Table '%s' does not exist.", table_name)
        return None
    rows = db.exec(select(model)).all()
    return [row.model_dump(mode="json") for row in rows]


def reset_table(db: Session, table_name: str) -> bool:
    model = ALL_TABLES.get(table_name)
    if model is None:
        logger.warning("Table '%s' does not exist.", table_name)
        return False
    db.execute(sa_delete(model))
    db.flush()
    return True
