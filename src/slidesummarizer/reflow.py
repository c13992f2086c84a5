# smart reflow: carries text that overflows a slide into the following slides
import logging
from typing import List

from .config import TEXT_LIMIT, DEFAULT_STYLE, StyleDefaults
from .models import Slide
from .slide_factory import create_text_block
from .text_limits import clamp_to_limit, distribute_overflow, validate_limit

logger = logging.getLogger(__name__)


# copy slides so the caller's sequence is never touched; seed empty slides
def _copy_with_primary_blocks(slides: List[Slide], style: StyleDefaults) -> List[Slide]:
    copies = []
    for slide in slides:
        copy = slide.model_copy(deep=True)
        if not copy.text_blocks:
            copy.text_blocks = [create_text_block("", style)]
        copies.append(copy)
    return copies


def smart_reflow(slides: List[Slide], limit: int = TEXT_LIMIT, style: StyleDefaults = DEFAULT_STYLE) -> List[Slide]:
    """
    Enforce the character limit on every slide's primary block.

    Text past the limit is cut at a sentence or word boundary and prepended
    to the next slide's primary block, cascading until it fits. Overflow on
    the last slide has nowhere to go and is dropped. Slides already passed
    are not revisited, so new overflow upstream needs another call.
    """
    limit = validate_limit(limit)
    result = _copy_with_primary_blocks(slides, style)
    carried = 0

    for index in range(len(result)):
        pointer = index
        block = result[pointer].text_blocks[0]

        while len(block.text) > limit:
            keep, overflow = distribute_overflow(block.text, limit)
            block.text = keep
            if not overflow:
                break

            if pointer + 1 >= len(result):
                block.text = clamp_to_limit(keep, limit)
                logger.debug(f"Dropped {len(overflow)} overflow characters on the last slide")
                break

            next_slide = result[pointer + 1]
            if not next_slide.text_blocks:
                next_slide.text_blocks.insert(0, create_text_block("", style))

            pointer += 1
            block = next_slide.text_blocks[0]
            block.text = f"{overflow}\n{block.text}".strip()
            carried += 1

    logger.debug(f"Reflowed {len(result)} slides, carried overflow {carried} times")
    return result
