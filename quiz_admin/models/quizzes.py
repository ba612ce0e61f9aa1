"""Quiz builder Pydantic models."""
from pydantic import BaseModel, Field

from quiz_admin.config import QUIZ_DEFAULT_MARKS


class Section(BaseModel):
    """Named group of questions inside a quiz."""

    id: str
    name: str
    name_hi: str
    display_order: int
    is_new: bool = True


class SelectedQuestion(BaseModel):
    """Question picked for a quiz, with its marks and section."""

    temp_id: str
    question_id: str
    marks: int = QUIZ_DEFAULT_MARKS
    section_id: str | None = None
    preview: str = ""


class ScopeItem(BaseModel):
    """Subject, topic or subtopic used to seed sections from the quiz scope."""

    id: str
    name: str
    name_hi: str


class SectionRow(BaseModel):
    quiz_id: str
    temp_id: str
    name: str
    name_hi: str
    display_order: int


class QuizQuestionRow(BaseModel):
    quiz_id: str
    section_temp_id: str | None
    question_id: str
    display_order: int
    marks: int


class QuizBuildRequest(BaseModel):
    """Builder state submitted for saving."""

    quiz_id: str
    sections: list[Section] = Field(default_factory=list)
    questions: list[SelectedQuestion] = Field(default_factory=list)


class QuizBuildResponse(BaseModel):
    sections: list[SectionRow]
    questions: list[QuizQuestionRow]
    total_marks: int
