"""Pydantic models."""
from quiz_admin.models.content import (
    ContentBlock,
    ImageBlock,
    ImageOption,
    MixedOption,
    QuestionOption,
    TableBlock,
    TextBlock,
    TextOption,
)
from quiz_admin.models.questions import ComprehensionGroupForm, Difficulty, QuestionForm
from quiz_admin.models.quizzes import (
    QuizBuildRequest,
    QuizBuildResponse,
    QuizQuestionRow,
    ScopeItem,
    Section,
    SectionRow,
    SelectedQuestion,
)
from quiz_admin.models.requests import BlocksRequest, OptionsRequest
from quiz_admin.models.responses import (
    ExtractedContent,
    FieldValidationResult,
    ValidationResult,
)

__all__ = [
    "BlocksRequest",
    "ComprehensionGroupForm",
    "ContentBlock",
    "Difficulty",
    "ExtractedContent",
    "FieldValidationResult",
    "ImageBlock",
    "ImageOption",
    "MixedOption",
    "OptionsRequest",
    "QuestionForm",
    "QuestionOption",
    "QuizBuildRequest",
    "QuizBuildResponse",
    "QuizQuestionRow",
    "ScopeItem",
    "Section",
    "SectionRow",
    "SelectedQuestion",
    "TableBlock",
    "TextBlock",
    "TextOption",
    "ValidationResult",
]
