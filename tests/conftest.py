import sys
from contextlib import contextmanager
from pathlib import Path

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from daily_logger import models as _models  # noqa: E402,F401
from daily_logger.core.db import build_engine  # noqa: E402
from daily_logger.rendering.print_engine import PrintEngine  # noqa: E402


class FakePrintEngine(PrintEngine):
    """Records the HTML it is given and returns a tiny fake PDF."""

    def __init__(self):
        self.printed = []

    def print_to_pdf(self, html: str) -> bytes:
        self.printed.append(html)
        return b"%PDF-1.4\n% fake\n"


@pytest.fixture()
def engine():
    test_engine = build_engine("sqlite://", poolclass=StaticPool)
    SQLModel.metadata.create_all(test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture()
def db(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture()
def print_engine():
    return FakePrintEngine()


@pytest.fixture()
def app_module(monkeypatch):
    from daily_logger import application

    # 日本語: テストではマイグレーションを走らせない / English: Skip Alembic startup migrations in tests
    monkeypatch.setattr(application, "init_db", lambda: None)
    return application


@contextmanager
def _client_with_db(app_module, db, print_engine=None, export_dir=None):
    from fastapi.testclient import TestClient

    from daily_logger.core.db import get_db
    from daily_logger.web.routers.report_router import get_export_directory, get_print_engine

    app = app_module.app
    app.dependency_overrides[get_db] = lambda: db
    if print_engine is not None:
        app.dependency_overrides[get_print_engine] = lambda: print_engine
    if export_dir is not None:
        app.dependency_overrides[get_export_directory] = lambda: export_dir
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def client(app_module, db, print_engine, tmp_path):
    with _client_with_db(app_module, db, print_engine=print_engine, export_dir=tmp_path) as test_client:
        yield test_client
