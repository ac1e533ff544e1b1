"""Database engine, session and transaction helpers."""

from __future__ import annotations

import os
import threading
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, create_engine

from daily_logger.core.config import DATABASE_URL
from daily_logger.core.exceptions import StorageError
from daily_logger.core.migrations import upgrade_to_head


def _normalize_database_url(database_url: str) -> str:
    # 日本語: 旧 postgres:// を SQLAlchemy 推奨形式へ正規化 / English: Normalize legacy postgres:// URL to SQLAlchemy-friendly form
    normalized_url = (database_url or "").strip()
    if normalized_url.startswith("postgres://"):
        normalized_url = normalized_url.replace("postgres://", "postgresql+psycopg2://", 1)
    if not normalized_url.startswith(("sqlite", "postgresql")):
        raise ValueError("DATABASE_URL must be SQLite (sqlite:///...) or PostgreSQL (postgresql+psycopg2://...).")
    return normalized_url


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    # 日本語: SQLite は接続ごとに外部キー制約を有効化する必要がある / English: SQLite enforces ON DELETE CASCADE only with this pragma
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, **engine_kwargs) -> Engine:
    """Create an engine for ``database_url`` with the SQLite pragmas applied."""
    normalized_url = _normalize_database_url(database_url)
    if normalized_url.startswith("sqlite"):
        connect_args = engine_kwargs.pop("connect_args", {})
        connect_args.setdefault("check_same_thread", False)
        built = create_engine(normalized_url, connect_args=connect_args, **engine_kwargs)
        event.listen(built, "connect", _enable_sqlite_foreign_keys)
        return built
    return create_engine(normalized_url, **engine_kwargs)


def _database_url_from_env() -> str:
    # 日本語: 実行時環境変数を優先 / English: Prefer runtime environment override
    return os.getenv("DATABASE_URL", DATABASE_URL)


# 日本語: プロセス単位で共有する接続プール / English: Per-process engine (connection pool)
_current_database_url = _normalize_database_url(_database_url_from_env())
engine = build_engine(_current_database_url)
_db_initialized = False
_db_init_lock = threading.Lock()


def _ensure_db_initialized() -> None:
    global _db_initialized
    if _db_initialized:
        return
    # 日本語: マイグレーションはプロセス内で一度だけ実行 / English: Run migrations once per process with lock protection
    with _db_init_lock:
        if _db_initialized:
            return
        try:
            upgrade_to_head(_current_database_url)
        except SQLAlchemyError as exc:
            raise StorageError("Database schema could not be initialised.") from exc
        _db_initialized = True


def init_db() -> None:
    _ensure_db_initialized()


def create_session() -> Session:
    # 日本語: 明示的セッション生成(スクリプト等で利用) / English: Explicit session factory (used by scripts)
    _ensure_db_initialized()
    return Session(engine)


def get_db() -> Iterator[Session]:
    # 日本語: FastAPI Depends 用のセッション供給器 / English: Dependency provider for FastAPI routes
    _ensure_db_initialized()
    with Session(engine) as db:
        yield db


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """Commit everything done inside the block, or roll all of it back."""
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
