"""Developer-mode table inspection and demo seeding routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlmodel import Session

from daily_logger.core.db import get_db
from daily_logger.repositories.dev_repository import get_all_tables, read_all_table_data, reset_table
from daily_logger.services.seed_service import seed_demo_log
from daily_logger.web import handlers as web_handlers

router = APIRouter()


@router.get("/api/dev/tables", name="api_dev_tables")
def api_dev_tables():
    return web_handlers.api_dev_tables(get_all_tables_fn=get_all_tables)


@router.get("/api/dev/tables/{table_name}", name="api_dev_table_dump")
def api_dev_table_dump(table_name: str, db: Session = Depends(get_db)):
    return web_handlers.api_dev_table_dump(table_name, db, read_all_table_data_fn=read_all_table_data)


@router.post("/api/dev/tables/{table_name}/reset", name="api_dev_table_reset")
def api_dev_table_reset(table_name: str, db: Session = Depends(get_db)):
    return web_handlers.api_dev_table_reset(table_name, db, reset_table_fn=reset_table)


@router.post("/api/dev/seed", name="api_dev_seed")
def api_dev_seed(db: Session = Depends(get_db)):
    return web_handlers.api_dev_seed(db, seed_demo_log_fn=seed_demo_log)
