"""FastAPI application assembly."""

from __future__ import annotations

from fastapi import FastAPI

from daily_logger.core.db import init_db
from daily_logger.web.routers import (
    day_router,
    dev_router,
    report_router,
    template_router,
    user_router,
)


def create_app() -> FastAPI:
    # 日本語: FastAPI アプリ本体を作成 / English: Create root FastAPI application
    app = FastAPI(title="Daily Logger")

    # 日本語: 機能別ルーターを順次登録 / English: Register feature routers
    app.include_router(day_router)
    app.include_router(template_router)
    app.include_router(user_router)
    app.include_router(report_router)
    app.include_router(dev_router)

    @app.on_event("startup")
    def _startup_init_db() -> None:
        # 日本語: 起動時にマイグレーション適用を保証 / English: Ensure migrations are applied on startup
        init_db()

    return app


# 日本語: import 時点で既定アプリを構築 / English: Build default app instance at import time
app = create_app()
