"""Question validation endpoints."""
from fastapi import APIRouter

from quiz_admin.models.questions import ComprehensionGroupForm, QuestionForm
from quiz_admin.models.responses import FieldValidationResult
from quiz_admin.services.question_service import (
    validate_comprehension_group,
    validate_question_form,
)

router = APIRouter(prefix="/api/questions", tags=["questions"])


@router.post("/validate")
def validate_question(form: QuestionForm) -> FieldValidationResult:
    """Validate a question before it is saved."""
    errors = validate_question_form(form)
    return FieldValidationResult(valid=not errors, errors=errors)


@router.post("/comprehension-groups/validate")
def validate_group(group: ComprehensionGroupForm) -> FieldValidationResult:
    """Validate a comprehension passage before it is saved."""
    errors = validate_comprehension_group(group)
    return FieldValidationResult(valid=not errors, errors=errors)
