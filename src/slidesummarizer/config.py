# shared constants, baseline styles and runtime settings
import os
from dataclasses import dataclass
from typing import Dict, Any

from pydantic import BaseModel, ConfigDict

from .models import (
    AspectRatio, FontWeight, FontStyle, Alignment,
    TextShadow, Position, Size,
)

# maximum length of a slide's primary text; splitter, reflow and balance share it
TEXT_LIMIT = 100

# contrast ratio below which text is flagged as hard to read
READABILITY_THRESHOLD = 4.5

# slide counts offered to the user
DEFAULT_SLIDE_COUNT = 6
MIN_SLIDE_COUNT = 4
MAX_SLIDE_COUNT = 12

# fixed texts used when there is nothing better to show
PLACEHOLDER_TEXT = "Text will appear after summarization"
DEFAULT_BLOCK_TEXT = "New text"
DEFAULT_SLIDE_TEXT = "Add text"
NEW_BLOCK_TEXT = "New text block"
WELCOME_TEXT = "Paste a long text, press Summarize and get beautiful slides."
SHORT_TEXT_FALLBACK = "The text is too short to summarize."

# canvas size and export resolution for every aspect ratio
ASPECT_RATIOS: Dict[AspectRatio, Dict[str, Any]] = {
    AspectRatio.SQUARE: {"width": 1080, "height": 1080, "label": "Instagram post"},
    AspectRatio.PORTRAIT: {"width": 1080, "height": 1350, "label": "Instagram portrait"},
    AspectRatio.STORY: {"width": 1080, "height": 1920, "label": "Stories/Reels"},
    AspectRatio.WIDESCREEN: {"width": 1920, "height": 1080, "label": "Presentation"},
    AspectRatio.CLASSIC: {"width": 1350, "height": 900, "label": "Classic photo"},
}

FONT_OPTIONS = [
    "Manrope",
    "Inter",
    "Montserrat",
    "PT Sans",
    "PT Serif",
    "Noto Sans",
    "Noto Serif",
    "IBM Plex Sans",
    "IBM Plex Serif",
    "Ubuntu",
    "Rubik",
    "Raleway",
    "Fira Sans",
    "Fira Sans Condensed",
    "Open Sans",
    "Playfair Display",
    "Merriweather",
    "Source Sans Pro",
    "Space Grotesk",
    "Bitter",
]


# immutable baseline style handed to the block factory
class StyleDefaults(BaseModel):
    model_config = ConfigDict(frozen=True)

    font_size: float = 40
    font_family: str = "Manrope"
    color: str = "#ffffff"
    font_weight: FontWeight = FontWeight.BOLD
    font_style: FontStyle = FontStyle.NORMAL
    align: Alignment = Alignment.LEFT
    shadow: TextShadow = TextShadow(enabled=True, blur=24, x=0, y=18, color="#000000", opacity=0.35)
    position: Position = Position(x=80, y=120)
    size: Size = Size(width=420, height=360)
    background_opacity: float = 0


# style used for slides created from scratch or from a summary
DEFAULT_STYLE = StyleDefaults()

# style used by the template library
TEMPLATE_STYLE = StyleDefaults(
    font_size=36,
    font_family="Space Grotesk",
    shadow=TextShadow(enabled=True, blur=24, x=0, y=10, color="#000000", opacity=0.35),
    size=Size(width=400, height=320),
)


# runtime settings, read from the environment
@dataclass
class Settings:
    provider: str = "local"
    ollama_base_url: str = "http://localhost:11434"
    ollama_model: str = "llama3"
    output_dir: str = "outputs"


# build settings from environment variables, falling back to defaults
def get_settings() -> Settings:
    """Read settings from the environment"""
    return Settings(
        provider=os.environ.get("SLIDESUMMARIZER_PROVIDER", "local").strip().lower(),
        ollama_base_url=os.environ.get("OLLAMA_BASE_URL", "http://localhost:11434"),
        ollama_model=os.environ.get("OLLAMA_MODEL", "llama3"),
        output_dir=os.environ.get("SLIDESUMMARIZER_OUTPUT_DIR", "outputs"),
    )
