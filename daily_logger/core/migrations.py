"""Alembic migration helpers."""

from __future__ import annotations

from pathlib import Path

from sqlalchemy.engine import make_url

from daily_logger.core.config import BASE_DIR

MIGRATIONS_DIR = BASE_DIR / "migrations"


def _build_alembic_config(database_url: str):
    try:
        from alembic.config import Config
    except ModuleNotFoundError as exc:  # pragma: no cover - dependency error path
        raise RuntimeError("Alembic is required. Install dependencies and retry.") from exc

    # 日本語: alembic.ini が無くてもスクリプト位置と URL だけで動かす / English: Work without alembic.ini using script location and URL only
    ini_path = BASE_DIR / "alembic.ini"
    config = Config(str(ini_path)) if ini_path.exists() else Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    config.set_main_option("sqlalchemy.url", database_url)
    return config


def ensure_sqlite_parent_dir(database_url: str) -> None:
    """Create the directory holding a file-backed SQLite database."""
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return
    database = url.database or ""
    if not database or database == ":memory:":
        return
    Path(database).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)


def upgrade_to_head(database_url: str) -> None:
    """Apply migrations to the latest revision."""
    try:
        from alembic import command
    except ModuleNotFoundError as exc:  # pragma: no cover - dependency error path
        raise RuntimeError("Alembic is required. Install dependencies and retry.") from exc

    ensure_sqlite_parent_dir(database_url)
    command.upgrade(_build_alembic_config(database_url), "head")
