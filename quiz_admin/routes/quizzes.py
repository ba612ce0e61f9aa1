"""Quiz validation and builder endpoints."""
from fastapi import APIRouter, Body, HTTPException

from quiz_admin.models.quizzes import QuizBuildRequest, QuizBuildResponse
from quiz_admin.models.responses import ValidationResult
from quiz_admin.services.quiz_builder import QuizBuilder, QuizBuilderError
from quiz_admin.utils.validation import validate_quiz

router = APIRouter(prefix="/api/quizzes", tags=["quizzes"])


@router.post("/validate")
def validate_quiz_metadata(
    payload: dict[str, object] = Body(...),
) -> ValidationResult:
    """Validate quiz metadata."""
    return validate_quiz(payload)


@router.post("/build")
def build_quiz(payload: QuizBuildRequest) -> QuizBuildResponse:
    """Turn builder state into ordered section and question rows."""
    builder = QuizBuilder(payload.quiz_id, payload.sections, payload.questions)
    try:
        return builder.build_rows()
    except QuizBuilderError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
