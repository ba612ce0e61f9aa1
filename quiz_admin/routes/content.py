"""Content block and option endpoints."""
from fastapi import APIRouter

from quiz_admin.models.requests import BlocksRequest, OptionsRequest
from quiz_admin.models.responses import ExtractedContent, ValidationResult
from quiz_admin.services.content_service import (
    extract_text_from_blocks,
    extract_text_from_blocks_hindi,
    get_image_urls,
)
from quiz_admin.utils.validation import validate_content_blocks, validate_question_options

router = APIRouter(prefix="/api/content", tags=["content"])


@router.post("/blocks/validate")
def validate_blocks(payload: BlocksRequest) -> ValidationResult:
    """Validate a content block list."""
    errors = validate_content_blocks(payload.blocks)
    return ValidationResult(valid=not errors, errors=errors)


@router.post("/options/validate")
def validate_options(payload: OptionsRequest) -> ValidationResult:
    """Validate a question option list."""
    errors = validate_question_options(payload.options)
    return ValidationResult(valid=not errors, errors=errors)


@router.post("/extract")
def extract_content(payload: BlocksRequest) -> ExtractedContent:
    """Flatten blocks to plain bilingual text and image URLs."""
    return ExtractedContent(
        text=extract_text_from_blocks(payload.blocks),
        text_hi=extract_text_from_blocks_hindi(payload.blocks),
        image_urls=get_image_urls(payload.blocks),
    )
