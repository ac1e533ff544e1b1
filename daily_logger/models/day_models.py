"""Day and activity SQLModel models."""

import datetime

from sqlalchemy import Column, ForeignKey, Integer, Text
from sqlmodel import Field, Relationship, SQLModel


# 日本語: 1日分の勤務記録の集約ルート / English: Aggregate root for one calendar date's work session
class Day(SQLModel, table=True):
    __tablename__ = "day"

    # 日本語: 日付は一意、時刻は HH:MM:SS 文字列 / English: Unique date, clock times stored as HH:MM:SS strings
    day_id: int | None = Field(default=None, primary_key=True)
    date: datetime.date = Field(unique=True, index=True)
    time_in: str | None = Field(default=None, max_length=8)
    time_out: str | None = Field(default=None, max_length=8)

    activities: list["Activity"] = Relationship(
        back_populates="day",
        sa_relationship_kwargs={"cascade": "all, delete-orphan", "passive_deletes": True},
    )
    special_activities: list["SpecialActivity"] = Relationship(
        back_populates="day",
        sa_relationship_kwargs={"cascade": "all, delete-orphan", "passive_deletes": True},
    )


# 日本語: 日に紐づく通常アクティビティ / English: Regular activity owned by a day
class Activity(SQLModel, table=True):
    __tablename__ = "activity"

    activity_id: int | None = Field(default=None, primary_key=True)
    content: str = Field(sa_column=Column(Text, nullable=False))
    time_start: str | None = Field(default=None, max_length=8)
    time_end: str | None = Field(default=None, max_length=8)
    category: str | None = Field(default=None, max_length=100)
    day_id: int | None = Field(
        default=None,
        sa_column=Column(Integer, ForeignKey("day.day_id", ondelete="CASCADE"), index=True),
    )

    day: Day | None = Relationship(back_populates="activities")


# 日本語: 特別扱いのアクティビティ(構造は通常と同じ) / English: Visually distinguished activity with the same shape
class SpecialActivity(SQLModel, table=True):
    __tablename__ = "special_activity"

    sp_activity_id: int | None = Field(default=None, primary_key=True)
    content: str = Field(sa_column=Column(Text, nullable=False))
    time_start: str | None = Field(default=None, max_length=8)
    time_end: str | None = Field(default=None, max_length=8)
    category: str | None = Field(default=None, max_length=100)
    day_id: int | None = Field(
        default=None,
        sa_column=Column(Integer, ForeignKey("day.day_id", ondelete="CASCADE"), index=True),
    )

    day: Day | None = Relationship(back_populates="special_activities")
