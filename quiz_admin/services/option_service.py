"""Option list editing for the question editor.

Every operation returns a new ``(options, correct_option)`` pair and leaves
its input untouched.
"""
import logging
from typing import Any, Literal, Sequence

from quiz_admin.config import MAX_OPTIONS, MIN_OPTIONS, OPTION_LABELS
from quiz_admin.models.content import (
    QuestionOption,
    create_image_option,
    create_mixed_option,
    create_text_option,
    revise,
)
from quiz_admin.services.content_service import EditLimitError

logger = logging.getLogger(__name__)

OptionKind = Literal["text", "image", "mixed"]


def option_label(index: int) -> str:
    """Display label for a zero-based option index: A-F, then numbers."""
    if 0 <= index < len(OPTION_LABELS):
        return OPTION_LABELS[index]
    return str(index + 1)


def add_option(
    options: Sequence[QuestionOption],
    correct_option: int,
    kind: OptionKind = "text",
    max_options: int = MAX_OPTIONS,
) -> tuple[list[QuestionOption], int]:
    if len(options) >= max_options:
        logger.debug("Refusing to add option: maximum is %s", max_options)
        raise EditLimitError(f"Maximum {max_options} options allowed")

    if kind == "text":
        option = create_text_option()
    elif kind == "image":
        option = create_image_option()
    elif kind == "mixed":
        option = create_mixed_option()
    else:
        raise ValueError(f"Unknown option type: {kind}")
    return [*options, option], correct_option


def remove_option(
    options: Sequence[QuestionOption],
    correct_option: int,
    index: int,
    min_options: int = MIN_OPTIONS,
) -> tuple[list[QuestionOption], int]:
    """Remove an option and keep the correct answer pointing at the same choice.

    Removing the correct option itself resets the answer to the first option.
    """
    if len(options) <= min_options:
        logger.debug("Refusing to remove option %s: minimum is %s", index, min_options)
        raise EditLimitError(f"At least {min_options} options required")
    if not 0 <= index < len(options):
        raise IndexError(f"Option index out of range: {index}")

    remaining = [option for position, option in enumerate(options) if position != index]
    if correct_option == index:
        new_correct = 0
    elif correct_option > index:
        new_correct = correct_option - 1
    else:
        new_correct = correct_option
    return remaining, new_correct


def update_option(
    options: Sequence[QuestionOption], index: int, **changes: Any
) -> list[QuestionOption]:
    result = list(options)
    result[index] = revise(result[index], **changes)
    return result
