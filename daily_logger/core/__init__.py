"""Core package exports."""

from .config import (
    BASE_DIR,
    COLOR_OPTIONS,
    DATABASE_URL,
    DEFAULT_TEMPLATE_COLOR,
    get_export_dir,
    get_log_level,
)
from .db import Session, build_engine, create_session, engine, get_db, init_db, transaction
from .exceptions import (
    DailyLoggerError,
    EntityNotFoundError,
    ExportError,
    StorageError,
    ValidationError,
)

__all__ = [
    "BASE_DIR",
    "COLOR_OPTIONS",
    "DATABASE_URL",
    "DEFAULT_TEMPLATE_COLOR",
    "get_export_dir",
    "get_log_level",
    "engine",
    "Session",
    "build_engine",
    "create_session",
    "get_db",
    "init_db",
    "transaction",
    "DailyLoggerError",
    "EntityNotFoundError",
    "ExportError",
    "StorageError",
    "ValidationError",
]
