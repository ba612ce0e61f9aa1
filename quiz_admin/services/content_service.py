"""Service layer for structured content: extraction, search and editing."""
import logging
from typing import Any, Callable, Iterable, Literal, Sequence, TypeVar

from quiz_admin.config import MIN_CONTENT_BLOCKS, PREVIEW_LENGTH
from quiz_admin.models.content import (
    ContentBlock,
    create_image_block,
    create_table_block,
    create_text_block,
    is_image_block,
    is_text_block,
    revise,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

BlockKind = Literal["text", "image", "table"]
Direction = Literal["up", "down"]


class EditLimitError(ValueError):
    """Raised when an edit would break the block or option count limits."""


# Extraction


def extract_text_from_blocks(blocks: Iterable[ContentBlock]) -> str:
    """Join the English text of all text blocks, in block order."""
    return " ".join(block.content for block in blocks if is_text_block(block))


def extract_text_from_blocks_hindi(blocks: Iterable[ContentBlock]) -> str:
    """Join the Hindi text of all text blocks, in block order."""
    return " ".join(block.content_hi for block in blocks if is_text_block(block))


def get_image_urls(blocks: Iterable[ContentBlock]) -> list[str]:
    """Return image block URLs, in block order."""
    return [block.url for block in blocks if is_image_block(block)]


def extract_search_text(blocks: Iterable[ContentBlock]) -> str:
    """Both languages of every text block, as matched by question search."""
    return " ".join(
        f"{block.content} {block.content_hi}"
        for block in blocks
        if is_text_block(block)
    )


def matches_search(blocks: Iterable[ContentBlock], term: str | None) -> bool:
    """Case-insensitive substring match of term against the block text."""
    if term is None or not term.strip():
        return True
    return term.lower() in extract_search_text(blocks).lower()


def filter_by_search(
    items: Iterable[T],
    term: str | None,
    key: Callable[[T], Iterable[ContentBlock]],
) -> list[T]:
    """Keep items whose content blocks match the search term, in order."""
    return [item for item in items if matches_search(key(item), term)]


def preview_text(blocks: Iterable[ContentBlock], limit: int = PREVIEW_LENGTH) -> str:
    """Short English preview for question lists."""
    return extract_text_from_blocks(blocks)[:limit]


def text_to_blocks(text: str | None, text_hi: str | None = "") -> list[ContentBlock]:
    """Convert plain bilingual text to a single text block."""
    return [create_text_block(text or "", text_hi or "")]


# Block editing


def add_block(blocks: Sequence[ContentBlock], kind: BlockKind = "text") -> list[ContentBlock]:
    """Append an empty block of the given kind."""
    if kind == "text":
        block = create_text_block()
    elif kind == "image":
        block = create_image_block()
    elif kind == "table":
        block = create_table_block()
    else:
        raise ValueError(f"Unknown block type: {kind}")
    return [*blocks, block]


def remove_block(
    blocks: Sequence[ContentBlock],
    index: int,
    min_blocks: int = MIN_CONTENT_BLOCKS,
) -> list[ContentBlock]:
    """Remove the block at index, keeping at least min_blocks."""
    if len(blocks) <= min_blocks:
        logger.debug("Refusing to remove block %s: minimum is %s", index, min_blocks)
        raise EditLimitError(f"At least {min_blocks} block(s) required")
    if not 0 <= index < len(blocks):
        raise IndexError(f"Block index out of range: {index}")
    return [block for position, block in enumerate(blocks) if position != index]


def move_block(
    blocks: Sequence[ContentBlock], index: int, direction: Direction
) -> list[ContentBlock]:
    """Swap a block with its neighbour. Moving past either end is a no-op."""
    new_index = index - 1 if direction == "up" else index + 1
    result = list(blocks)
    if not 0 <= index < len(result) or not 0 <= new_index < len(result):
        return result
    result[index], result[new_index] = result[new_index], result[index]
    return result


def update_block(
    blocks: Sequence[ContentBlock], index: int, **changes: Any
) -> list[ContentBlock]:
    """Return a new list with the block at index replaced by an updated copy.

    Raises ``pydantic.ValidationError`` when the changes do not fit the block.
    """
    result = list(blocks)
    result[index] = revise(result[index], **changes)
    return result
