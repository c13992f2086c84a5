# library of ready-made slide styles
import logging
from typing import Dict, List, Optional

from .backgrounds import MINIMALIST, PASTEL, NEON, KRAFT, make_background
from .config import TEMPLATE_STYLE
from .models import Background, Slide, TemplatePreset
from .slide_factory import create_slide, duplicate_slide

logger = logging.getLogger(__name__)


# build template slides that all share one background
def _template_slides(texts: List[str], background: Background) -> List[Slide]:
    return [create_slide(text, background=background, style=TEMPLATE_STYLE) for text in texts]


# build a fresh copy of the template library
def build_template_library() -> List[TemplatePreset]:
    return [
        TemplatePreset(
            id="minimalism",
            name="Minimalism",
            description="Clean grey background and strict typography.",
            palette_hint=MINIMALIST["label"],
            slides=_template_slides(
                ["Focus on what matters", "Leave plenty of air", "Use short thoughts", "Add a strong takeaway"],
                make_background(MINIMALIST),
            ),
        ),
        TemplatePreset(
            id="pastel",
            name="Pastel gradient",
            description="Soft blends and calm colours.",
            palette_hint=PASTEL["label"],
            slides=_template_slides(
                ["A gentle opening", "The main idea", "A practical tip", "The final insight"],
                make_background(PASTEL),
            ),
        ),
        TemplatePreset(
            id="neon",
            name="Dark neon",
            description="Deep background with bright accents.",
            palette_hint=NEON["label"],
            slides=_template_slides(
                ["A bold headline", "A clear statement", "A short list", "A call to action"],
                make_background(NEON),
            ),
        ),
        TemplatePreset(
            id="kraft",
            name="Kraft texture",
            description="Warm paper background with a handmade touch.",
            palette_hint=KRAFT["label"],
            slides=_template_slides(
                ["Add some warmth", "Tell a story", "Highlight the emotions", "Close with atmosphere"],
                make_background(KRAFT),
            ),
        ),
    ]


TEMPLATE_LIBRARY: List[TemplatePreset] = build_template_library()
_TEMPLATES_BY_ID: Dict[str, TemplatePreset] = {template.id: template for template in TEMPLATE_LIBRARY}


def get_template(template_id: str) -> Optional[TemplatePreset]:
    return _TEMPLATES_BY_ID.get(template_id)


# copy a template's slides with new ids so the library is never aliased
def apply_template(template: TemplatePreset) -> List[Slide]:
    """Return fresh copies of a template's slides"""
    slides = [duplicate_slide(slide) for slide in template.slides]
    logger.info(f"Applied template '{template.id}' ({len(slides)} slides)")
    return slides
