"""Pydantic response models."""
from pydantic import BaseModel


class ValidationResult(BaseModel):
    """Outcome of a list-style validation."""

    valid: bool
    errors: list[str]


class FieldValidationResult(BaseModel):
    """Outcome of a form validation, keyed by form field."""

    valid: bool
    errors: dict[str, str]


class ExtractedContent(BaseModel):
    """Plain-text view of a block list."""

    text: str
    text_hi: str
    image_urls: list[str]
