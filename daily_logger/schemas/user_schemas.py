"""User and account schemas."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class WorkSchedulePeriod(BaseModel):
    """Recurring weekly period such as Monday to Friday, 07:00 - 15:00."""

    start: str
    end: str
    expected_time_in: str
    expected_time_out: str


class SignUpRequest(BaseModel):
    name: str
    email: str
    password: str
    roles: List[str] = Field(default_factory=list)
    work_schedule: List[WorkSchedulePeriod] = Field(default_factory=list)
    path_to_icon: str | None = None


class AccountUpdate(BaseModel):
    name: str
    email: str
    roles: List[str] = Field(default_factory=list)
    work_schedule: List[WorkSchedulePeriod] = Field(default_factory=list)
    responsibilities: str | None = None
    path_to_icon: str | None = None
    current_password: str | None = None
    new_password: str | None = None
    confirm_password: str | None = None


class UserProfile(BaseModel):
    user_id: int
    name: str
    email: str
    path_to_icon: str | None = None
    roles: List[str] = Field(default_factory=list)
    work_schedule: List[WorkSchedulePeriod] = Field(default_factory=list)


class ServiceResponse(BaseModel):
    """Outcome of a write operation with a message safe to show to the user."""

    success: bool
    message: str
    id: int | None = None
