"""Task ORM — the single persisted entity.

Invariants:
    - id is an integer primary key assigned by the storage engine, never reused
      (sqlite_autoincrement emits AUTOINCREMENT, so deleted ids are not handed out again)
    - title is non-nullable text, stored already trimmed
    - done is a boolean (0/1 on SQLite), false on creation

Design Decisions:
    - Both Python-side default and server_default for done: ORM inserts and raw SQL agree
"""

from sqlalchemy import Boolean, Integer, Text, false
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Task(Base):
    """Task row — a titled, completable unit of work."""
    __tablename__ = "tasks"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    done: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false(),
    )
