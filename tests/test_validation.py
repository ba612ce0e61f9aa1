from datetime import datetime, timezone

from quiz_admin.models.content import (
    create_image_block,
    create_image_option,
    create_mixed_option,
    create_table_block,
    create_text_block,
    create_text_option,
)
from quiz_admin.utils import validation


def _valid_text_options(count: int) -> list:
    return [create_text_option(f"Option {n}", f"विकल्प {n}") for n in range(count)]


def test_complete_blocks_are_valid() -> None:
    blocks = [
        create_text_block("What is shown?", "क्या दिखाया गया है?"),
        create_image_block("https://cdn.example.com/q.png"),
        create_table_block(None),
    ]
    assert validation.validate_content_blocks(blocks) == []


def test_empty_blocks_require_one_block() -> None:
    assert validation.validate_content_blocks([]) == [
        "At least one content block is required"
    ]
    assert validation.validate_content_blocks(None) == [
        "At least one content block is required"
    ]


def test_missing_hindi_reports_only_hindi() -> None:
    blocks = [
        create_text_block("First", "पहला"),
        create_text_block("Second", "   "),
    ]
    errors = validation.validate_content_blocks(blocks)
    assert errors == ["Text block 2: Hindi content is required"]
    assert not any("English" in error for error in errors)


def test_blank_text_block_reports_both_languages() -> None:
    assert validation.validate_content_blocks([create_text_block()]) == [
        "Text block 1: English content is required",
        "Text block 1: Hindi content is required",
    ]


def test_image_block_requires_url() -> None:
    assert validation.validate_content_blocks([create_image_block("")]) == [
        "Image block 1: Image URL is required"
    ]


def test_table_blocks_are_not_checked() -> None:
    assert validation.validate_content_blocks([create_table_block()]) == []


def test_two_text_options_pass() -> None:
    opt = create_text_option("Paris", "पेरिस")
    assert validation.validate_question_options([opt, create_text_option("Lyon", "ल्यों")]) == []


def test_single_option_short_circuits() -> None:
    errors = validation.validate_question_options([create_text_option()])
    assert errors == ["At least 2 options are required"]


def test_no_options() -> None:
    assert validation.validate_question_options([]) == ["At least 2 options are required"]
    assert validation.validate_question_options(None) == ["At least 2 options are required"]


def test_too_many_options_continues_checking() -> None:
    assert validation.validate_question_options(_valid_text_options(7)) == [
        "Maximum 6 options are allowed"
    ]

    options = _valid_text_options(6) + [create_text_option("Seventh", "")]
    assert validation.validate_question_options(options) == [
        "Maximum 6 options are allowed",
        "Option 7: Hindi text is required",
    ]


def test_mixed_option_missing_image_only() -> None:
    options = [
        create_mixed_option("Tower", "मीनार", ""),
        create_text_option("Bridge", "पुल"),
    ]
    assert validation.validate_question_options(options) == [
        "Option 1: Image URL is required"
    ]


def test_blank_mixed_option_reports_all_fields() -> None:
    options = [create_mixed_option(), create_image_option("")]
    assert validation.validate_question_options(options) == [
        "Option 1: English text is required",
        "Option 1: Hindi text is required",
        "Option 1: Image URL is required",
        "Option 2: Image URL is required",
    ]


def test_custom_option_bounds() -> None:
    options = _valid_text_options(3)
    assert validation.validate_question_options(options, min_options=4) == [
        "At least 4 options are required"
    ]
    assert validation.validate_question_options(options, max_options=2) == [
        "Maximum 2 options are allowed"
    ]


def test_field_predicates() -> None:
    assert validation.is_required("x")
    assert not validation.is_required("  ")
    assert not validation.is_required(None)
    assert not validation.is_required([])
    assert validation.is_required(0)

    assert validation.is_valid_url("https://example.com/a.png")
    assert not validation.is_valid_url("not a url")

    assert validation.is_positive_number("3")
    assert not validation.is_positive_number(0)
    assert not validation.is_valid_number("abc")
    assert not validation.is_valid_number(float("inf"))

    assert validation.is_in_range(3, 0, 3)
    assert not validation.is_in_range(4, 0, 3)

    next_year = datetime.now(timezone.utc).year + 1
    assert validation.is_valid_year(next_year)
    assert not validation.is_valid_year(next_year + 1)
    assert not validation.is_valid_year(1899)

    assert validation.is_valid_bilingual_content("Math", "गणित")
    assert not validation.is_valid_bilingual_content("Math", "")


def test_validate_quiz() -> None:
    quiz = {
        "title": "Daily Quiz",
        "title_hi": "दैनिक प्रश्नोत्तरी",
        "type": "daily",
        "scope": "topic",
        "scope_id": "topic-1",
        "duration_minutes": 10,
        "total_marks": 20,
    }
    result = validation.validate_quiz(quiz)
    assert result.valid
    assert result.errors == []

    result = validation.validate_quiz({**quiz, "title_hi": "", "type": "weekly", "total_marks": 0})
    assert not result.valid
    assert result.errors == [
        "Quiz title (Hindi) is required",
        "Valid quiz type is required",
        "Total marks must be a positive number",
    ]
