"""Report preview and export routes."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends
from sqlmodel import Session

from daily_logger.core.config import get_export_dir
from daily_logger.core.db import get_db
from daily_logger.rendering.print_engine import PrintEngine
from daily_logger.schemas import ExportRequest
from daily_logger.services.export_service import generate_report
from daily_logger.services.report_service import build_report
from daily_logger.web import handlers as web_handlers

router = APIRouter()


def get_print_engine() -> PrintEngine | None:
    # 日本語: None なら既定の WeasyPrint を使う(テストで差し替え可能) / English: None selects the default WeasyPrint engine; overridable in tests
    return None


def get_export_directory() -> Path:
    return get_export_dir()


@router.post("/api/reports/preview", name="api_report_preview")
def api_report_preview(payload: ExportRequest, db: Session = Depends(get_db)):
    return web_handlers.api_report_preview(payload, db, build_report_fn=build_report)


@router.post("/api/reports/export", name="api_report_export")
def api_report_export(
    payload: ExportRequest,
    db: Session = Depends(get_db),
    print_engine: PrintEngine | None = Depends(get_print_engine),
    export_dir: Path = Depends(get_export_directory),
):
    return web_handlers.api_report_export(
        payload,
        db,
        generate_report_fn=generate_report,
        export_dir=export_dir,
        print_engine=print_engine,
    )
