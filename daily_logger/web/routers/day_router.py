"""Day and activity API routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlmodel import Session

from daily_logger.core.db import get_db
from daily_logger.schemas import DaySaveRequest, QuickSaveRequest
from daily_logger.services.reconcile_service import (
    delete_day,
    fetch_active_days,
    fetch_day,
    reconcile_day,
    save_activities,
)
from daily_logger.web import handlers as web_handlers

router = APIRouter()


@router.get("/api/days", name="api_active_days")
def api_active_days(db: Session = Depends(get_db)):
    return web_handlers.api_active_days(db, fetch_active_days_fn=fetch_active_days)


@router.get("/api/day/{date_str}", name="api_day_detail")
def api_day_detail(date_str: str, db: Session = Depends(get_db)):
    return web_handlers.api_day_detail(date_str, db, fetch_day_fn=fetch_day)


@router.post("/api/day/{date_str}", name="api_reconcile_day")
def api_reconcile_day(date_str: str, payload: DaySaveRequest, db: Session = Depends(get_db)):
    return web_handlers.api_reconcile_day(
        date_str,
        payload,
        db,
        reconcile_day_fn=reconcile_day,
        fetch_day_fn=fetch_day,
    )


@router.post("/api/day/{date_str}/activities", name="api_save_activities")
def api_save_activities(date_str: str, payload: QuickSaveRequest, db: Session = Depends(get_db)):
    return web_handlers.api_save_activities(date_str, payload, db, save_activities_fn=save_activities)


@router.delete("/api/day/{date_str}", name="api_delete_day")
def api_delete_day(date_str: str, db: Session = Depends(get_db)):
    return web_handlers.api_delete_day(date_str, db, delete_day_fn=delete_day)
