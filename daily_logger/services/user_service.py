"""Sign-up, account settings and responsibilities summary services."""

from __future__ import annotations

import json
import logging
import re
from typing import List

import bcrypt
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from daily_logger.core.db import transaction
from daily_logger.repositories import user_repository
from daily_logger.schemas import AccountUpdate, ServiceResponse, SignUpRequest, UserProfile, WorkSchedulePeriod
from daily_logger.services.date_format_service import parse_roles, parse_work_schedule

logger = logging.getLogger(__name__)

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 6


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    if not password or not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # 日本語: 壊れたハッシュは不一致扱い / English: A malformed stored hash never matches
        return False


def _serialize_roles(roles: List[str]) -> str:
    return json.dumps([role.strip() for role in roles if role and role.strip()])


def _serialize_schedule(periods: List[WorkSchedulePeriod]) -> str:
    return json.dumps({"periods": [period.model_dump() for period in periods]})


def sign_up_user(db: Session, request: SignUpRequest) -> ServiceResponse:
    roles = [role for role in request.roles if role and role.strip()]
    if not request.name.strip() or not request.email.strip() or not request.password or not roles:
        return ServiceResponse(success=False, message="Please fill in all required fields.")

    email = request.email.strip()
    try:
        if user_repository.user_exists(db, email) is not None:
            return ServiceResponse(success=False, message="A user with this email already exists.")

        with transaction(db):
            user_id = user_repository.create_user(
                db,
                name=request.name.strip(),
                email=email,
                password_hash=hash_password(request.password),
                roles_positions=_serialize_roles(roles),
                work_schedule=_serialize_schedule(request.work_schedule),
                path_to_icon=request.path_to_icon or None,
            )
    except SQLAlchemyError:
        logger.exception("Failed to create user %s", email)
        return ServiceResponse(success=False, message="Failed to create user. Please try again.")

    return ServiceResponse(success=True, message="Account created successfully!", id=user_id)


def validate_account_update(update: AccountUpdate) -> ServiceResponse:
    """Check an account settings form, stopping at the first problem."""
    if not update.name.strip():
        return ServiceResponse(success=False, message="Name is required.")
    if not update.email.strip():
        return ServiceResponse(success=False, message="Email is required.")
    if not _EMAIL_PATTERN.match(update.email.strip()):
        return ServiceResponse(success=False, message="Please enter a valid email address.")
    if not [role for role in update.roles if role and role.strip()]:
        return ServiceResponse(success=False, message="At least one role is required.")

    if update.new_password:
        if not update.current_password:
            return ServiceResponse(
                success=False, message="Current password is required to set a new password."
            )
        if len(update.new_password) < MIN_PASSWORD_LENGTH:
            return ServiceResponse(
                success=False,
                message=f"New password must be at least {MIN_PASSWORD_LENGTH} characters long.",
            )
        if update.new_password != update.confirm_password:
            return ServiceResponse(success=False, message="New passwords do not match.")

    if not update.work_schedule:
        return ServiceResponse(success=False, message="At least one work period is required.")
    for period in update.work_schedule:
        if not all([period.start, period.end, period.expected_time_in, period.expected_time_out]):
            return ServiceResponse(success=False, message="All work schedule fields must be filled.")

    return ServiceResponse(success=True, message="Validation passed.")


def save_account_changes(db: Session, user_id: int, update: AccountUpdate) -> ServiceResponse:
    validation = validate_account_update(update)
    if not validation.success:
        return validation

    user = user_repository.read_user(db, user_id)
    if user is None:
        return ServiceResponse(success=False, message="User not found.")

    password_hash = user.password_hash
    if update.new_password:
        if not verify_password(update.current_password or "", user.password_hash):
            return ServiceResponse(success=False, message="Current password is incorrect.")
        password_hash = hash_password(update.new_password)

    email = update.email.strip()
    try:
        existing_id = user_repository.user_exists(db, email)
        if existing_id is not None and existing_id != user_id:
            return ServiceResponse(success=False, message="A user with this email already exists.")

        with transaction(db):
            user_repository.update_user(
                db,
                user_id,
                name=update.name.strip(),
                email=email,
                password_hash=password_hash,
                path_to_icon=update.path_to_icon if update.path_to_icon is not None else user.path_to_icon,
                roles_positions=_serialize_roles(update.roles),
                work_schedule=_serialize_schedule(update.work_schedule),
            )

            # 日本語: 内容がある場合のみ更新、未作成なら新規作成 / English: Update the summary, or create it when absent
            content = (update.responsibilities or "").strip()
            if content:
                summary_id = user_repository.responsibilities_summary_exists(db, user_id)
                if summary_id is None:
                    user_repository.create_responsibilities_summary(db, user_id, content)
                else:
                    user_repository.update_responsibilities_summary(db, summary_id, content)
    except SQLAlchemyError:
        logger.exception("Failed to save account changes for user %s", user_id)
        return ServiceResponse(success=False, message="An unexpected error occurred while saving changes.")

    logger.info("Account %s updated", user_id)
    return ServiceResponse(success=True, message="Account updated successfully!", id=user_id)


def get_responsibilities_summary(db: Session, user_id: int) -> str | None:
    summary = user_repository.read_responsibilities_summary(db, user_id)
    if summary is None:
        return None
    return summary.content


def get_user_profile(db: Session, user_id: int) -> UserProfile | None:
    user = user_repository.read_user(db, user_id)
    if user is None:
        return None
    return UserProfile(
        user_id=user.user_id,
        name=user.name,
        email=user.email,
        path_to_icon=user.path_to_icon,
        roles=parse_roles(user.roles_positions),
        work_schedule=parse_work_schedule(user.work_schedule),
    )
