"""Service layer for question forms and their stored representation."""
import logging
from datetime import datetime, timezone

from quiz_admin.config import MIN_YEAR
from quiz_admin.models.content import dump_content, parse_content_blocks, parse_question_options
from quiz_admin.models.db.question import ComprehensionGroup, Question
from quiz_admin.models.questions import ComprehensionGroupForm, Difficulty, QuestionForm
from quiz_admin.utils.validation import (
    is_required,
    is_valid_year,
    validate_content_blocks,
    validate_question_options,
)

logger = logging.getLogger(__name__)


def validate_question_form(form: QuestionForm) -> dict[str, str]:
    """Validate a question form.

    Returns a mapping of form field to message; an empty mapping means the
    question may be saved. The explanation is optional, but once it has
    blocks they must pass the same checks as the question content. This is
    deliberately stricter than the editing UI, which never checks it.
    """
    errors: dict[str, str] = {}

    content_errors = validate_content_blocks(form.question_content)
    if content_errors:
        errors["question_content"] = ", ".join(content_errors)

    option_errors = validate_question_options(form.options)
    if option_errors:
        errors["options"] = ", ".join(option_errors)

    if form.options and not 0 <= form.correct_option < len(form.options):
        errors["correct_option"] = (
            f"Correct option must be between 1 and {len(form.options)}"
        )

    if form.explanation_content:
        explanation_errors = validate_content_blocks(form.explanation_content)
        if explanation_errors:
            errors["explanation_content"] = ", ".join(explanation_errors)

    if not is_required(form.exam_id):
        errors["exam_id"] = "Exam is required"
    if not is_required(form.subject_id):
        errors["subject_id"] = "Subject is required"
    if not is_required(form.topic_id):
        errors["topic_id"] = "Topic is required"

    if form.is_pyq:
        # Tier and shift are optional
        if not form.year:
            errors["year"] = "Year is required for PYQ questions"
        elif not is_valid_year(form.year):
            next_year = datetime.now(timezone.utc).year + 1
            errors["year"] = f"Year must be between {MIN_YEAR} and {next_year}"

    if errors:
        logger.info("Question form rejected: %s", ", ".join(sorted(errors)))
    return errors


def validate_comprehension_group(group: ComprehensionGroupForm) -> dict[str, str]:
    errors: dict[str, str] = {}
    if not is_required(group.title):
        errors["title"] = "Title (English) is required"
    if not is_required(group.title_hi):
        errors["title_hi"] = "Title (Hindi) is required"
    passage_errors = validate_content_blocks(group.passage_content)
    if passage_errors:
        errors["passage_content"] = ", ".join(passage_errors)
    return errors


def question_to_record(form: QuestionForm) -> Question:
    """Build a storage row from a question form (blocks stored verbatim)."""
    return Question(
        exam_id=form.exam_id,
        topic_id=form.topic_id,
        subtopic_id=form.subtopic_id or None,
        question_content=dump_content(form.question_content),
        options=dump_content(form.options),
        correct_option=form.correct_option,
        explanation_content=dump_content(form.explanation_content),
        difficulty=form.difficulty.value,
        is_pyq=form.is_pyq,
        year=form.year if form.is_pyq else None,
        tier=form.tier if form.is_pyq else None,
        shift=form.shift if form.is_pyq else None,
        comprehension_group_id=form.comprehension_group_id or None,
    )


def record_to_question(record: Question, subject_id: str = "") -> QuestionForm:
    """Load a storage row back into an editable question form."""
    return QuestionForm(
        exam_id=record.exam_id,
        subject_id=subject_id,
        topic_id=record.topic_id,
        subtopic_id=record.subtopic_id,
        question_content=parse_content_blocks(record.question_content),
        options=parse_question_options(record.options),
        correct_option=record.correct_option,
        explanation_content=parse_content_blocks(record.explanation_content),
        difficulty=Difficulty(record.difficulty),
        is_pyq=record.is_pyq,
        year=record.year,
        tier=record.tier,
        shift=record.shift,
        comprehension_group_id=record.comprehension_group_id,
    )


def comprehension_group_to_record(group: ComprehensionGroupForm) -> ComprehensionGroup:
    return ComprehensionGroup(
        title=group.title.strip(),
        title_hi=group.title_hi.strip(),
        passage_content=dump_content(group.passage_content),
    )
