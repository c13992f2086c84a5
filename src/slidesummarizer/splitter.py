# turns a summary bundle into the first set of slides, one idea per slide
import logging
from typing import List

from .backgrounds import generate_background
from .config import TEXT_LIMIT, PLACEHOLDER_TEXT, DEFAULT_STYLE, StyleDefaults
from .models import Slide, SummaryBundle
from .slide_factory import BackgroundFactory, create_slide
from .text_limits import clamp_to_limit, validate_count, validate_limit

logger = logging.getLogger(__name__)


# pick the strings that become slide texts: key ideas first, headline otherwise
def _prioritized_entries(bundle: SummaryBundle) -> List[str]:
    key_ideas = [idea.strip() for idea in bundle.key_ideas if idea and idea.strip()]
    if key_ideas:
        return key_ideas
    headline = bundle.headline.strip()
    return [headline] if headline else []


def split_to_slides(
    bundle: SummaryBundle,
    count: int,
    limit: int = TEXT_LIMIT,
    background_factory: BackgroundFactory = generate_background,
    style: StyleDefaults = DEFAULT_STYLE,
) -> List[Slide]:
    """
    Build one slide per key idea, up to ``count`` slides.

    Each entry is clamped to the character limit. When fewer entries than
    ``count`` survive, fewer slides are returned. When there is nothing to
    show at all, ``count`` placeholder slides are returned instead.
    """
    count = validate_count(count)
    limit = validate_limit(limit)

    sanitized = [clamp_to_limit(entry, limit) for entry in _prioritized_entries(bundle)]
    sanitized = [entry for entry in sanitized if entry]

    if not sanitized:
        logger.info(f"Summary is empty, creating {count} placeholder slides")
        return [
            create_slide(PLACEHOLDER_TEXT, style=style, background_factory=background_factory)
            for _ in range(count)
        ]

    effective_count = min(count, len(sanitized))
    slides = [
        create_slide(text, style=style, background_factory=background_factory)
        for text in sanitized[:effective_count]
    ]
    logger.info(f"Split summary into {len(slides)} slides ({len(sanitized)} candidates)")
    return slides
