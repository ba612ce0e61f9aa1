"""In-memory quiz composition: sections, selected questions, order and marks."""
import logging
import uuid
from typing import Iterable

from quiz_admin.config import QUIZ_DEFAULT_MARKS
from quiz_admin.models.quizzes import (
    QuizBuildResponse,
    QuizQuestionRow,
    ScopeItem,
    Section,
    SectionRow,
    SelectedQuestion,
)
from quiz_admin.utils.validation import is_valid_bilingual_content

logger = logging.getLogger(__name__)


class QuizBuilderError(ValueError):
    """Raised when a builder action is rejected."""


def _temp_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


class QuizBuilder:
    """Holds the sections and questions of one quiz while it is being edited.

    Questions keep their list position as the quiz order; a question with
    ``section_id=None`` is unsectioned.
    """

    def __init__(
        self,
        quiz_id: str,
        sections: Iterable[Section] = (),
        questions: Iterable[SelectedQuestion] = (),
    ) -> None:
        self.quiz_id = quiz_id
        self.sections: list[Section] = list(sections)
        self.questions: list[SelectedQuestion] = list(questions)

    # Sections

    def add_section(self, name: str, name_hi: str) -> Section:
        if not is_valid_bilingual_content(name, name_hi):
            raise QuizBuilderError("Please fill in both English and Hindi names")
        section = Section(
            id=_temp_id("temp"),
            name=name.strip(),
            name_hi=name_hi.strip(),
            display_order=len(self.sections) + 1,
        )
        self.sections.append(section)
        return section

    def rename_section(self, section_id: str, name: str, name_hi: str) -> Section:
        if not is_valid_bilingual_content(name, name_hi):
            raise QuizBuilderError("Please fill in both English and Hindi names")
        index = self._section_index(section_id)
        section = self.sections[index].model_copy(
            update={"name": name.strip(), "name_hi": name_hi.strip()}
        )
        self.sections[index] = section
        return section

    def delete_section(self, section_id: str) -> None:
        """Delete a section; its questions become unsectioned."""
        self._section_index(section_id)
        self.sections = [s for s in self.sections if s.id != section_id]
        self.questions = [
            q.model_copy(update={"section_id": None}) if q.section_id == section_id else q
            for q in self.questions
        ]

    def sections_from_scope(self, items: Iterable[ScopeItem]) -> list[Section]:
        """Append one section per subject/topic/subtopic of the quiz scope."""
        items = list(items)
        if not items:
            raise QuizBuilderError("No items found to create sections from")
        start = len(self.sections)
        created = [
            Section(
                id=_temp_id("temp"),
                name=item.name,
                name_hi=item.name_hi,
                display_order=start + position,
            )
            for position, item in enumerate(items, start=1)
        ]
        self.sections.extend(created)
        logger.info("Created %s sections for quiz %s", len(created), self.quiz_id)
        return created

    # Questions

    def add_question(
        self, question_id: str, preview: str = "", marks: int = QUIZ_DEFAULT_MARKS
    ) -> SelectedQuestion:
        if any(q.question_id == question_id for q in self.questions):
            raise QuizBuilderError("This question is already added to the quiz")
        selected = SelectedQuestion(
            temp_id=_temp_id(f"new-{question_id}"),
            question_id=question_id,
            marks=max(1, marks),
            preview=preview,
        )
        self.questions.append(selected)
        return selected

    def remove_question(self, temp_id: str) -> None:
        self._question_index(temp_id)
        self.questions = [q for q in self.questions if q.temp_id != temp_id]

    def update_marks(self, temp_id: str, marks: int) -> SelectedQuestion:
        """Set marks for a question; values below 1 are raised to 1."""
        index = self._question_index(temp_id)
        updated = self.questions[index].model_copy(update={"marks": max(1, marks)})
        self.questions[index] = updated
        return updated

    def assign_to_section(self, temp_id: str, section_id: str | None) -> SelectedQuestion:
        if section_id is not None:
            self._section_index(section_id)
        index = self._question_index(temp_id)
        updated = self.questions[index].model_copy(update={"section_id": section_id})
        self.questions[index] = updated
        return updated

    def move_question(self, temp_id: str, target_index: int) -> None:
        """Move a question to target_index (clamped to the list bounds)."""
        current_index = self._question_index(temp_id)
        target_index = max(0, min(target_index, len(self.questions) - 1))
        if current_index == target_index:
            return
        question = self.questions.pop(current_index)
        self.questions.insert(target_index, question)

    def questions_in_section(self, section_id: str | None) -> list[SelectedQuestion]:
        return [q for q in self.questions if q.section_id == section_id]

    def total_marks(self) -> int:
        return sum(q.marks for q in self.questions)

    # Saving

    def build_rows(self) -> QuizBuildResponse:
        """Produce the section and quiz-question rows to persist, in order."""
        if not self.questions:
            raise QuizBuilderError("Please add at least one question to the quiz")

        section_ids = {section.id for section in self.sections}
        section_rows = [
            SectionRow(
                quiz_id=self.quiz_id,
                temp_id=section.id,
                name=section.name,
                name_hi=section.name_hi,
                display_order=section.display_order,
            )
            for section in self.sections
        ]
        question_rows = [
            QuizQuestionRow(
                quiz_id=self.quiz_id,
                section_temp_id=q.section_id if q.section_id in section_ids else None,
                question_id=q.question_id,
                display_order=position,
                marks=q.marks,
            )
            for position, q in enumerate(self.questions, start=1)
        ]
        return QuizBuildResponse(
            sections=section_rows,
            questions=question_rows,
            total_marks=self.total_marks(),
        )

    def _section_index(self, section_id: str) -> int:
        for index, section in enumerate(self.sections):
            if section.id == section_id:
                return index
        raise QuizBuilderError("Section not found")

    def _question_index(self, temp_id: str) -> int:
        for index, question in enumerate(self.questions):
            if question.temp_id == temp_id:
                return index
        raise QuizBuilderError("Question not found in quiz")
