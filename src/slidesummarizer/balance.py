# balance: spreads all primary-block text evenly over the existing slides
import logging
import math
from typing import List

from .config import TEXT_LIMIT
from .models import Slide
from .text_limits import clamp_to_limit, validate_limit

logger = logging.getLogger(__name__)


def balance_slides(slides: List[Slide], limit: int = TEXT_LIMIT) -> List[Slide]:
    """
    Redistribute the combined slide text word by word across the same slides.

    Each slide takes words while ``len(text) + len(word) + 1 < target``,
    where ``target`` is the combined length divided by the slide count
    (rounded up). A slide that takes nothing gets exactly one word. Words
    left over at the end go to the last slide, which is then clamped to the
    limit. Non-primary blocks and backgrounds are kept as they are.
    """
    limit = validate_limit(limit)
    combined = " ".join(slide.text for slide in slides if slide.text).strip()
    result = [slide.model_copy(deep=True) for slide in slides]
    if not combined:
        return result

    target = math.ceil(len(combined) / len(slides))
    words = combined.split(" ")
    for slide in result:
        if slide.text_blocks:
            slide.text_blocks[0].text = ""

    pointer = 0
    for slide in result:
        block = slide.primary_block
        if block is None:
            continue
        text = ""
        while pointer < len(words) and len(text) + len(words[pointer]) + 1 < target:
            text = f"{text} {words[pointer]}".strip()
            pointer += 1
        if not text:
            # always take one word so every slide moves the pointer forward
            text = words[pointer] if pointer < len(words) else ""
            pointer += 1
        block.text = text

    if pointer < len(words):
        remainder = " ".join(words[pointer:])
        last = result[-1].primary_block
        if last is not None:
            merged = f"{last.text} {remainder}".strip()
            last.text = clamp_to_limit(merged, limit)
            logger.debug(f"Moved {len(words) - pointer} leftover words to the last slide")

    logger.debug(f"Balanced {len(words)} words over {len(result)} slides (target {target} chars)")
    return result
