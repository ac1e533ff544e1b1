"""Persistence helpers for users and responsibilities summaries."""

from __future__ import annotations

import logging

from sqlmodel import Session, select

from daily_logger.models import ResponsibilitiesSummary, User

logger = logging.getLogger(__name__)


def create_user(
    db: Session,
    *,
    name: str,
    email: str,
    password_hash: str,
    roles_positions: str | None = None,
    work_schedule: str | None = None,
    path_to_icon: str | None = None,
) -> int:
    user = User(
        name=name,
        email=email,
        password_hash=password_hash,
        roles_positions=roles_positions,
        work_schedule=work_schedule,
        path_to_icon=path_to_icon,
    )
    db.add(user)
    db.flush()
    logger.info("User created with ID: %s", user.user_id)
    return user.user_id


def user_exists(db: Session, email: str) -> int | None:
    return db.exec(select(User.user_id).where(User.email == email)).first()


def read_user(db: Session, user_id: int) -> User | None:
    return db.get(User, user_id)


def update_user(db: Session, user_id: int, **fields) -> bool:
    user = db.get(User, user_id)
    if user is None:
        return False
    for key, value in fields.items():
        if not hasattr(user, key):
            raise AttributeError(f"User has no column {key!r}")
        setattr(user, key, value)
    db.add(user)
    db.flush()
    return True


def create_responsibilities_summary(db: Session, user_id: int, content: str) -> int:
    summary = ResponsibilitiesSummary(user_id=user_id, content=content)
    db.add(summary)
    db.flush()
    logger.info("Responsibilities summary created with ID: %s", summary.responsibilities_id)
    return summary.responsibilities_id


def responsibilities_summary_exists(db: Session, user_id: int) -> int | None:
    return db.exec(
        select(ResponsibilitiesSummary.responsibilities_id).where(ResponsibilitiesSummary.user_id == user_id)
    ).first()


def read_responsibilities_summary(db: Session, user_id: int) -> ResponsibilitiesSummary | None:
    return db.exec(
        select(ResponsibilitiesSummary)
        .where(ResponsibilitiesSummary.user_id == user_id)
        .order_by(ResponsibilitiesSummary.responsibilities_id)
    ).first()


def update_responsibilities_summary(db: Session, responsibilities_id: int, content: str) -> bool:
    summary = db.get(ResponsibilitiesSummary, responsibilities_id)
    if summary is None:
        return False
    summary.content = content
    db.add(summary)
    db.flush()
    return True
