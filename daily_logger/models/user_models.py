"""User and responsibilities SQLModel models."""


from sqlalchemy import Column, ForeignKey, Integer, Text
from sqlmodel import Field, SQLModel


# 日本語: 長期間存在する利用者(削除はしない) / English: Long-lived root entity, never hard-deleted
class User(SQLModel, table=True):
    __tablename__ = "user"

    # 日本語: 役職とスケジュールは JSON 文字列で保持 / English: Roles and work schedule are serialized JSON strings
    user_id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=100)
    email: str = Field(max_length=255, unique=True, index=True)
    password_hash: str = Field(max_length=255)
    path_to_icon: str | None = Field(default=None, max_length=500)
    roles_positions: str | None = Field(default=None, sa_column=Column(Text))
    work_schedule: str | None = Field(default=None, sa_column=Column(Text))


# 日本語: 利用者ごとの担当業務サマリ / English: Free-text responsibilities summary per user
class ResponsibilitiesSummary(SQLModel, table=True):
    __tablename__ = "responsibilities_summary"

    responsibilities_id: int | None = Field(default=None, primary_key=True)
    content: str = Field(sa_column=Column(Text, nullable=False))
    user_id: int | None = Field(
        default=None,
        sa_column=Column(Integer, ForeignKey("user.user_id", ondelete="CASCADE"), index=True),
    )
