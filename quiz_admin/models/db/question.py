"""
Question and ComprehensionGroup storage models.

Content blocks and options are stored verbatim as JSON arrays; the
database enforces nothing about their shape.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

import sqlalchemy as sa
from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.types import TypeDecorator

from quiz_admin.database import Base
from quiz_admin.utils.json_utils import compact_json_dump, json_load


def _new_id() -> str:
    return uuid.uuid4().hex


class ContentJSON(TypeDecorator):
    """JSON array column stored as text."""

    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return compact_json_dump(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return json_load(value)


class ComprehensionGroup(Base):
    """Reading passage shared by a group of questions."""

    __tablename__ = "comprehension_groups"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=_new_id)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    title_hi: Mapped[str] = mapped_column(String(255), nullable=False)
    passage_content: Mapped[list] = mapped_column(ContentJSON, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    # Relationships
    questions: Mapped[list["Question"]] = relationship(
        "Question", back_populates="comprehension_group"
    )


class Question(Base):
    """Structured multiple-choice question."""

    __tablename__ = "questions"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=_new_id)
    exam_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    topic_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    subtopic_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    question_content: Mapped[list] = mapped_column(ContentJSON, nullable=False)
    options: Mapped[list] = mapped_column(ContentJSON, nullable=False)
    correct_option: Mapped[int] = mapped_column(nullable=False)
    explanation_content: Mapped[list] = mapped_column(
        ContentJSON, nullable=False, default=lambda: []
    )
    difficulty: Mapped[str] = mapped_column(String(10), nullable=False, index=True)
    is_pyq: Mapped[bool] = mapped_column(default=False, nullable=False)
    year: Mapped[int | None] = mapped_column(nullable=True)
    tier: Mapped[str | None] = mapped_column(String(50), nullable=True)
    shift: Mapped[str | None] = mapped_column(String(50), nullable=True)
    comprehension_group_id: Mapped[str | None] = mapped_column(
        ForeignKey("comprehension_groups.id", ondelete="SET NULL"), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    # Relationships
    comprehension_group: Mapped["ComprehensionGroup | None"] = relationship(
        "ComprehensionGroup", back_populates="questions"
    )

    def __repr__(self) -> str:
        return f"<Question(id={self.id}, topic_id='{self.topic_id}', difficulty='{self.difficulty}')>"
