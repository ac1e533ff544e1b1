"""Day and activity payload schemas."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DayTimes(BaseModel):
    time_in: str | None = None
    time_out: str | None = None


class ActivityInput(BaseModel):
    """One activity as submitted by the editor.

    ``id`` is set for rows that already exist; clock times are normalised to
    ``HH:MM:SS`` by the reconcile service before they are written.
    """

    id: int | None = None
    content: str
    category: str | None = None
    time_start: str | None = None
    time_end: str | None = None

    @field_validator("content")
    @classmethod
    def _content_not_blank(cls, value: str) -> str:
        stripped = (value or "").strip()
        if not stripped:
            raise ValueError("Activity content must not be empty.")
        return stripped

    @field_validator("category", "time_start", "time_end")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        stripped = str(value).strip()
        return stripped or None


class DaySaveRequest(BaseModel):
    """Full desired state of one day plus explicit deletions."""

    time_in: str | None = None
    time_out: str | None = None
    activities: List[ActivityInput] = Field(default_factory=list)
    special_activities: List[ActivityInput] = Field(default_factory=list)
    deleted_activity_ids: List[int] = Field(default_factory=list)
    deleted_special_activity_ids: List[int] = Field(default_factory=list)
    prune_empty: bool = False


class QuickSaveRequest(BaseModel):
    time_in: str | None = None
    time_out: str | None = None
    activities: List[ActivityInput] = Field(default_factory=list)
    special_activities: List[ActivityInput] = Field(default_factory=list)


class ActivityRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    content: str
    category: str | None = None
    time_start: str | None = None
    time_end: str | None = None


class DayRecord(BaseModel):
    """A persisted day with its owned activities."""

    day_id: int
    date: str
    time_in: str | None = None
    time_out: str | None = None
    activities: List[ActivityRecord] = Field(default_factory=list)
    special_activities: List[ActivityRecord] = Field(default_factory=list)
