"""Account API routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlmodel import Session

from daily_logger.core.db import get_db
from daily_logger.schemas import AccountUpdate, SignUpRequest
from daily_logger.services.user_service import (
    get_responsibilities_summary,
    get_user_profile,
    save_account_changes,
    sign_up_user,
)
from daily_logger.web import handlers as web_handlers

router = APIRouter()


@router.post("/api/users", name="api_sign_up")
def api_sign_up(payload: SignUpRequest, db: Session = Depends(get_db)):
    return web_handlers.api_sign_up(payload, db, sign_up_user_fn=sign_up_user)


@router.get("/api/users/{user_id}", name="api_user_profile")
def api_user_profile(user_id: int, db: Session = Depends(get_db)):
    return web_handlers.api_user_profile(user_id, db, get_user_profile_fn=get_user_profile)


@router.put("/api/users/{user_id}", name="api_save_account")
def api_save_account(user_id: int, payload: AccountUpdate, db: Session = Depends(get_db)):
    return web_handlers.api_save_account(user_id, payload, db, save_account_changes_fn=save_account_changes)


@router.get("/api/users/{user_id}/responsibilities", name="api_responsibilities")
def api_responsibilities(user_id: int, db: Session = Depends(get_db)):
    return web_handlers.api_responsibilities(
        user_id,
        db,
        get_responsibilities_summary_fn=get_responsibilities_summary,
    )
