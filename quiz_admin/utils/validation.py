"""Validation utilities.

The content and option validators return a list of human-readable
problems (empty list == valid) and never raise; callers decide whether
to block the action.
"""
import math
from datetime import datetime, timezone
from typing import Any, Sequence
from urllib.parse import urlparse

from quiz_admin.config import (
    MAX_OPTIONS,
    MIN_OPTIONS,
    MIN_YEAR,
    QUIZ_SCOPES,
    QUIZ_TYPES,
)
from quiz_admin.models.content import (
    ContentBlock,
    QuestionOption,
    is_image_block,
    is_image_option,
    is_mixed_option,
    is_text_block,
    is_text_option,
)
from quiz_admin.models.responses import ValidationResult


def _is_blank(value: str | None) -> bool:
    return not value or not value.strip()


def validate_content_blocks(blocks: Sequence[ContentBlock] | None) -> list[str]:
    """Check that every text block is bilingual and every image has a URL."""
    errors: list[str] = []

    if not blocks:
        errors.append("At least one content block is required")
        return errors

    for index, block in enumerate(blocks, start=1):
        if is_text_block(block):
            if _is_blank(block.content):
                errors.append(f"Text block {index}: English content is required")
            if _is_blank(block.content_hi):
                errors.append(f"Text block {index}: Hindi content is required")
        elif is_image_block(block):
            if _is_blank(block.url):
                errors.append(f"Image block {index}: Image URL is required")

    return errors


def validate_question_options(
    options: Sequence[QuestionOption] | None,
    min_options: int = MIN_OPTIONS,
    max_options: int = MAX_OPTIONS,
) -> list[str]:
    """Check option count and per-option completeness.

    Too few options is reported alone; too many is reported and the
    per-option checks still run. The correct-answer index is not checked here.
    """
    errors: list[str] = []

    if not options or len(options) < min_options:
        errors.append(f"At least {min_options} options are required")
        return errors

    if len(options) > max_options:
        errors.append(f"Maximum {max_options} options are allowed")

    for index, option in enumerate(options, start=1):
        if is_text_option(option) or is_mixed_option(option):
            if _is_blank(option.content):
                errors.append(f"Option {index}: English text is required")
            if _is_blank(option.content_hi):
                errors.append(f"Option {index}: Hindi text is required")
        if is_image_option(option) or is_mixed_option(option):
            if _is_blank(option.image_url):
                errors.append(f"Option {index}: Image URL is required")

    return errors


# Field predicates


def is_required(value: Any) -> bool:
    """Return True if value is present (non-blank string, non-empty list)."""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (list, tuple)):
        return len(value) > 0
    return True


def is_valid_url(url: str) -> bool:
    """Return True for absolute URLs with a scheme and a location."""
    if not isinstance(url, str):
        return False
    try:
        parsed = urlparse(url.strip())
    except ValueError:
        return False
    if not parsed.scheme:
        return False
    return bool(parsed.netloc or parsed.path)


def is_valid_number(value: Any) -> bool:
    if isinstance(value, bool) or value is None:
        return False
    try:
        number = float(value)
    except (TypeError, ValueError):
        return False
    return math.isfinite(number)


def is_positive_number(value: Any) -> bool:
    return is_valid_number(value) and float(value) > 0


def is_in_range(value: float, minimum: float, maximum: float) -> bool:
    return minimum <= value <= maximum


def is_valid_year(year: int) -> bool:
    """Accept years from 1900 up to next year."""
    current_year = datetime.now(timezone.utc).year
    return MIN_YEAR <= year <= current_year + 1


def is_valid_bilingual_content(en: str | None, hi: str | None) -> bool:
    return is_required(en) and is_required(hi)


def validate_quiz(quiz: dict[str, Any]) -> ValidationResult:
    """Validate quiz metadata submitted by the quiz form."""
    errors: list[str] = []

    if not is_required(quiz.get("title")):
        errors.append("Quiz title (English) is required")
    if not is_required(quiz.get("title_hi")):
        errors.append("Quiz title (Hindi) is required")

    if quiz.get("type") not in QUIZ_TYPES:
        errors.append("Valid quiz type is required")

    if quiz.get("scope") not in QUIZ_SCOPES:
        errors.append("Valid quiz scope is required")

    if not is_required(quiz.get("scope_id")):
        errors.append("Scope selection is required")

    if not is_positive_number(quiz.get("duration_minutes")):
        errors.append("Duration must be a positive number")

    if not is_positive_number(quiz.get("total_marks")):
        errors.append("Total marks must be a positive number")

    return ValidationResult(valid=not errors, errors=errors)
