"""Question-related Pydantic models."""
from enum import Enum

from pydantic import BaseModel, Field

from quiz_admin.models.content import (
    ContentBlock,
    QuestionOption,
    create_text_block,
    create_text_option,
)


class Difficulty(str, Enum):
    """Question difficulty level."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


def _default_question_content() -> list[ContentBlock]:
    return [create_text_block()]


def _default_options() -> list[QuestionOption]:
    return [create_text_option() for _ in range(4)]


class QuestionForm(BaseModel):
    """Question as submitted by the question editor.

    Defaults match a freshly opened editor: one empty text block and four
    empty text options.
    """

    exam_id: str = ""
    subject_id: str = ""
    topic_id: str = ""
    subtopic_id: str | None = None
    question_content: list[ContentBlock] = Field(default_factory=_default_question_content)
    options: list[QuestionOption] = Field(default_factory=_default_options)
    correct_option: int = 0
    explanation_content: list[ContentBlock] = Field(default_factory=list)
    difficulty: Difficulty = Difficulty.MEDIUM
    is_pyq: bool = False
    year: int | None = None
    tier: str | None = None
    shift: str | None = None
    tags: list[str] = Field(default_factory=list)
    comprehension_group_id: str | None = None


class ComprehensionGroupForm(BaseModel):
    """Reading passage shared by several questions."""

    title: str = ""
    title_hi: str = ""
    passage_content: list[ContentBlock] = Field(default_factory=_default_question_content)
