# builds default text blocks and slides, and applies partial edits to them
import logging
import uuid
from typing import Callable, Optional, Union, Dict, Any

from .backgrounds import generate_background
from .config import (
    DEFAULT_STYLE, DEFAULT_BLOCK_TEXT, DEFAULT_SLIDE_TEXT, NEW_BLOCK_TEXT, StyleDefaults,
)
from .models import Background, BlockPatch, Position, Size, Slide, TextBlock

logger = logging.getLogger(__name__)

BackgroundFactory = Callable[[], Background]

# nested parts of a block that merge field by field instead of being replaced
NESTED_FIELDS = ("shadow", "position", "size")


# opaque unique id for slides, blocks and backgrounds
def new_id() -> str:
    return uuid.uuid4().hex


# create a text block carrying the baseline style
def create_text_block(text: str = DEFAULT_BLOCK_TEXT, style: StyleDefaults = DEFAULT_STYLE) -> TextBlock:
    """Create a text block with the given text and baseline style"""
    return TextBlock(
        id=new_id(),
        text=text,
        font_size=style.font_size,
        font_family=style.font_family,
        color=style.color,
        font_weight=style.font_weight,
        font_style=style.font_style,
        align=style.align,
        shadow=style.shadow.model_copy(),
        position=style.position.model_copy(),
        size=style.size.model_copy(),
        background_opacity=style.background_opacity,
    )


# create a slide with a fresh background and a single text block
def create_slide(
    text: str = DEFAULT_SLIDE_TEXT,
    background: Optional[Background] = None,
    style: StyleDefaults = DEFAULT_STYLE,
    background_factory: BackgroundFactory = generate_background,
) -> Slide:
    """Create a slide holding one block of text"""
    return Slide(
        id=new_id(),
        background=background.model_copy() if background else background_factory(),
        text_blocks=[create_text_block(text, style)],
    )


# merge a partial edit into a block and return the new block
def apply_patch(block: TextBlock, patch: Union[BlockPatch, Dict[str, Any]]) -> TextBlock:
    """
    Apply a partial update to a text block.

    Top-level fields that are set on the patch replace the block's value.
    ``shadow``, ``position`` and ``size`` merge field by field, so a patch of
    ``{"position": {"x": 10}}`` moves the block horizontally and keeps ``y``.
    The block id never changes. The result is validated again.
    """
    if isinstance(patch, dict):
        patch = BlockPatch.model_validate(patch)

    changes = patch.model_dump(exclude_none=True)
    merged = block.model_dump()
    for field, value in changes.items():
        if field in NESTED_FIELDS:
            merged[field] = {**merged[field], **value}
        else:
            merged[field] = value

    return TextBlock.model_validate(merged)


# copy a slide with new slide and block ids
def duplicate_slide(slide: Slide) -> Slide:
    """Deep copy a slide, giving the copy and its blocks fresh ids"""
    duplicated = slide.model_copy(deep=True)
    duplicated.id = new_id()
    for block in duplicated.text_blocks:
        block.id = new_id()
    return duplicated


# append a new free-form block, stacked below the existing ones
def add_text_block(slide: Slide, text: str = NEW_BLOCK_TEXT, style: StyleDefaults = DEFAULT_STYLE) -> Slide:
    """Return a copy of the slide with one more text block"""
    updated = slide.model_copy(deep=True)
    block = create_text_block(text, style)
    block.position = Position(x=60, y=60 + len(updated.text_blocks) * 40)
    block.size = Size(width=360, height=220)
    updated.text_blocks.append(block)
    logger.debug(f"Added block {block.id} to slide {slide.id}")
    return updated


# swap a slide's background for a new random one
def regenerate_background(slide: Slide, background_factory: BackgroundFactory = generate_background) -> Slide:
    updated = slide.model_copy(deep=True)
    updated.background = background_factory()
    return updated
