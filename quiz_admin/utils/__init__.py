"""Utility modules."""
from quiz_admin.utils.json_utils import (
    json_dump,
    json_load,
    compact_json_dump,
    read_json_file,
)
from quiz_admin.utils.validation import (
    is_required,
    is_valid_bilingual_content,
    is_valid_url,
    validate_content_blocks,
    validate_question_options,
    validate_quiz,
)

__all__ = [
    "json_dump",
    "json_load",
    "compact_json_dump",
    "read_json_file",
    "is_required",
    "is_valid_bilingual_content",
    "is_valid_url",
    "validate_content_blocks",
    "validate_question_options",
    "validate_quiz",
]
