# named background palettes and the random background picker
import logging
import random
import uuid
from typing import Dict, List, Optional
from urllib.parse import quote

from .models import Background

logger = logging.getLogger(__name__)

# subtle fractal noise laid over every gradient
NOISE = quote(
    '<svg xmlns="http://www.w3.org/2000/svg" width="400" height="400">'
    '<filter id="n" x="0" y="0">'
    '<feTurbulence type="fractalNoise" baseFrequency="0.8" numOctaves="4" stitchTiles="stitch"/>'
    '<feColorMatrix type="saturate" values="0"/>'
    '<feComponentTransfer><feFuncA type="linear" slope="0.18"/></feComponentTransfer>'
    '</filter>'
    '<rect width="100%" height="100%" filter="url(#n)" opacity="0.6"/>'
    '</svg>'
)


def _with_noise(gradient: str) -> str:
    return f'{gradient}, url("data:image/svg+xml,{NOISE}")'


# palette entries: css fill, accent colour used for contrast scoring, label
MINIMALIST = {
    "css": _with_noise("linear-gradient(135deg, #fdfbfb 0%, #ebedee 100%)"),
    "accent": "#111322",
    "label": "Minimal mist",
}

PASTEL = {
    "css": _with_noise("linear-gradient(120deg, #fad0c4 0%, #ffd1ff 100%)"),
    "accent": "#861657",
    "label": "Pastel breeze",
}

NEON = {
    "css": _with_noise("radial-gradient(circle at 30% 30%, #003973 0%, #e5e5be 100%)"),
    "accent": "#f3ffbd",
    "label": "Dark neon",
}

KRAFT = {
    "css": _with_noise("linear-gradient(135deg, #f1ece4 0%, #d8c4a0 43%, #c0a080 100%)"),
    "accent": "#5f4b32",
    "label": "Kraft texture",
}

GRADIENTS = [
    {
        "css": _with_noise("linear-gradient(120deg, #f6d365 0%, #fda085 100%)"),
        "accent": "#c7512c",
        "label": "Sunset bloom",
    },
    {
        "css": _with_noise("radial-gradient(circle at 20% 20%, #d9afd9 0%, #97d9e1 100%)"),
        "accent": "#764ba2",
        "label": "Pastel cloud",
    },
    {
        "css": _with_noise("linear-gradient(135deg, #0f0c29 0%, #302b63 50%, #24243e 100%)"),
        "accent": "#88e1ff",
        "label": "Neon night",
    },
    KRAFT,
]

# kraft is listed twice, so it comes up twice as often
BACKGROUND_POOL: List[Dict[str, str]] = [MINIMALIST, PASTEL, NEON, KRAFT, *GRADIENTS]


# turn a palette entry into a background with its own id
def make_background(palette: Dict[str, str]) -> Background:
    return Background(
        id=uuid.uuid4().hex,
        css=palette["css"],
        accent=palette["accent"],
        label=palette["label"],
    )


# pick a random palette; pass an rng for repeatable picks
def generate_background(rng: Optional[random.Random] = None) -> Background:
    """Generate a fresh background from a random palette"""
    chooser = rng or random
    palette = chooser.choice(BACKGROUND_POOL)
    logger.debug(f"Picked background palette: {palette['label']}")
    return make_background(palette)
