"""
Readability scoring

WCAG 2.x contrast ratio between a text colour and a slide's accent colour.
"""

import logging
import re
from typing import Tuple

from .config import READABILITY_THRESHOLD, TEXT_LIMIT
from .models import Slide, SlideInspection, TextBlock

logger = logging.getLogger(__name__)

# sRGB channel weights for relative luminance
RED_WEIGHT = 0.2126
GREEN_WEIGHT = 0.7152
BLUE_WEIGHT = 0.0722

HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    """
    Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa`` into 0-255 channels.

    The leading ``#`` is optional and alpha is ignored. Anything that is not
    a hex colour reads as black.
    """
    digits = color.strip().lstrip("#")
    if not HEX_DIGITS.fullmatch(digits) or len(digits) not in (3, 4, 6, 8):
        logger.warning(f"Unrecognised colour {color!r}, reading it as black")
        return 0, 0, 0

    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits[:3])
    value = int(digits[:6], 16)
    return (value >> 16) & 255, (value >> 8) & 255, value & 255


def _linearize(channel: int) -> float:
    value = channel / 255
    if value <= 0.03928:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def relative_luminance(color: str) -> float:
    red, green, blue = (_linearize(channel) for channel in hex_to_rgb(color))
    return RED_WEIGHT * red + GREEN_WEIGHT * green + BLUE_WEIGHT * blue


def readability_score(color_a: str, color_b: str) -> float:
    """Contrast ratio of two colours, rounded to two decimals (1.0 to 21.0)"""
    first = relative_luminance(color_a) + 0.05
    second = relative_luminance(color_b) + 0.05
    ratio = max(first, second) / min(first, second)
    return round(ratio, 2)


def is_readable(color_a: str, color_b: str, threshold: float = READABILITY_THRESHOLD) -> bool:
    return readability_score(color_a, color_b) >= threshold


# check one block against its slide's accent colour and the text limit
def inspect_block(slide: Slide, block: TextBlock, limit: int = TEXT_LIMIT,
                  threshold: float = READABILITY_THRESHOLD) -> SlideInspection:
    """Report contrast and length warnings for a block on a slide"""
    ratio = readability_score(block.color, slide.background.accent)
    inspection = SlideInspection(
        slide_id=slide.id,
        block_id=block.id,
        contrast_ratio=ratio,
        text_length=len(block.text),
    )
    if ratio < threshold:
        inspection.readability_warning = f"Contrast {ratio}:1 is low, change the colour or add a shadow"
    if len(block.text) > limit:
        inspection.text_limit_warning = (
            f"Text is over the {limit} character limit, smart reflow will move the excess"
        )
    return inspection
