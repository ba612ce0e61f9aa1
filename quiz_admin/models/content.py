"""Structured content blocks and question options.

Question bodies, explanations and comprehension passages are stored as
ordered lists of content blocks; answer choices as lists of options. Both
are tagged unions selected by the ``type`` field and are immutable values:
editing a block or option produces a new one (see ``revise``).
"""
from typing import Annotated, Any, Iterable, Literal, TypeGuard, TypeVar, Union

from pydantic import BaseModel, Field, TypeAdapter, field_validator


class ContentValue(BaseModel):
    """Base class for block and option variants."""

    class Config:
        frozen = True

    @field_validator(
        "content", "content_hi", "url", "image_url", mode="before", check_fields=False
    )
    @classmethod
    def _null_text_as_empty(cls, value: Any) -> Any:
        # Editor payloads send null for fields not filled in yet
        return "" if value is None else value


# Content blocks


class TextBlock(ContentValue):
    """Bilingual prose segment."""

    type: Literal["text"] = "text"
    content: str = ""
    content_hi: str = ""


class ImageBlock(ContentValue):
    """Hosted image reference with optional bilingual caption."""

    type: Literal["image"] = "image"
    url: str = ""
    alt: str | None = None
    caption: str | None = None
    caption_hi: str | None = None


class TableBlock(ContentValue):
    """Opaque tabular payload."""

    type: Literal["table"] = "table"
    data: Any = None
    caption: str | None = None
    caption_hi: str | None = None


ContentBlock = Annotated[
    Union[TextBlock, ImageBlock, TableBlock], Field(discriminator="type")
]


# Question options


class TextOption(ContentValue):
    type: Literal["text"] = "text"
    content: str = ""
    content_hi: str = ""


class ImageOption(ContentValue):
    type: Literal["image"] = "image"
    image_url: str = ""
    alt: str | None = None


class MixedOption(ContentValue):
    """Option that carries bilingual text and an image together."""

    type: Literal["mixed"] = "mixed"
    content: str = ""
    content_hi: str = ""
    image_url: str = ""
    alt: str | None = None


QuestionOption = Annotated[
    Union[TextOption, ImageOption, MixedOption], Field(discriminator="type")
]

_blocks_adapter = TypeAdapter(list[ContentBlock])
_options_adapter = TypeAdapter(list[QuestionOption])

V = TypeVar("V", bound=ContentValue)


# Type guards


def is_text_block(block: ContentBlock) -> TypeGuard[TextBlock]:
    return block.type == "text"


def is_image_block(block: ContentBlock) -> TypeGuard[ImageBlock]:
    return block.type == "image"


def is_table_block(block: ContentBlock) -> TypeGuard[TableBlock]:
    return block.type == "table"


def is_text_option(option: QuestionOption) -> TypeGuard[TextOption]:
    return option.type == "text"


def is_image_option(option: QuestionOption) -> TypeGuard[ImageOption]:
    return option.type == "image"


def is_mixed_option(option: QuestionOption) -> TypeGuard[MixedOption]:
    return option.type == "mixed"


# Factories


def create_text_block(content: str = "", content_hi: str = "") -> TextBlock:
    return TextBlock(content=content, content_hi=content_hi)


def create_image_block(
    url: str = "", alt: str = "", caption: str = "", caption_hi: str = ""
) -> ImageBlock:
    return ImageBlock(url=url, alt=alt, caption=caption, caption_hi=caption_hi)


def create_table_block(
    data: Any = None, caption: str = "", caption_hi: str = ""
) -> TableBlock:
    return TableBlock(data=data, caption=caption, caption_hi=caption_hi)


def create_text_option(content: str = "", content_hi: str = "") -> TextOption:
    return TextOption(content=content, content_hi=content_hi)


def create_image_option(image_url: str = "", alt: str = "") -> ImageOption:
    return ImageOption(image_url=image_url, alt=alt)


def create_mixed_option(
    content: str = "", content_hi: str = "", image_url: str = "", alt: str = ""
) -> MixedOption:
    return MixedOption(
        content=content, content_hi=content_hi, image_url=image_url, alt=alt
    )


# Raw JSON conversion


def parse_content_blocks(raw: object) -> list[ContentBlock]:
    """Parse a JSON array of block dicts into typed blocks.

    ``None`` is treated as an empty list. Raises ``pydantic.ValidationError``
    for unknown ``type`` tags or wrongly typed fields.
    """
    if raw is None:
        return []
    return _blocks_adapter.validate_python(raw)


def parse_question_options(raw: object) -> list[QuestionOption]:
    """Parse a JSON array of option dicts into typed options."""
    if raw is None:
        return []
    return _options_adapter.validate_python(raw)


def dump_content(values: Iterable[ContentValue]) -> list[dict[str, Any]]:
    """Dump blocks or options to the JSON-ready form stored verbatim."""
    return [value.model_dump(mode="json") for value in values]


def revise(value: V, **changes: Any) -> V:
    """Return a copy of value with changes applied, validated like parsed input.

    The variant cannot change: a different ``type`` tag raises
    ``pydantic.ValidationError``, as do wrongly typed fields.
    """
    return type(value).model_validate({**value.model_dump(), **changes})
