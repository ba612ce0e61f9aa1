"""Pydantic request models."""
from pydantic import BaseModel, Field

from quiz_admin.models.content import ContentBlock, QuestionOption


class BlocksRequest(BaseModel):
    """Content block list submitted by the block editor."""

    blocks: list[ContentBlock] = Field(default_factory=list)


class OptionsRequest(BaseModel):
    """Option list submitted by the option builder."""

    options: list[QuestionOption] = Field(default_factory=list)
