# src/scoreforge/db/models.py

"""Database models for the ScoreForge preference store."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, declarative_base, mapped_column

Base = declarative_base()


# ===============================================
# Mixins for Common Columns
# ===============================================


class TimestampMixin:
    """Mixin providing created_at and updated_at timestamp columns."""

    created_at: Mapped[datetime] = mapped_column(
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        default=None,
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=True,
    )


# ===============================================
# Key-Value Table
# ===============================================


class PlayerPref(Base, TimestampMixin):
    """A single string value stored under a string key.

    High score lists live here as JSON text under keys such as
    ``Highscores-<level>``; other callers may share the table with their
    own key prefixes.
    """

    __tablename__ = "player_prefs"
    key: Mapped[str] = mapped_column(String, primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False, default="")

    def __init__(self, key: str, value: str, **kw: Any):
        super().__init__(**kw)
        self.key = key
        self.value = value
