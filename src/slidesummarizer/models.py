# pydantic models for slides, text blocks, summaries and api payloads
from pydantic import BaseModel, Field
from typing import List, Dict, Any, Optional
from enum import Enum

# smallest width/height a text block may have, in layout units
MIN_BLOCK_SIZE = 40


# enum for font weight
class FontWeight(str, Enum):
    NORMAL = "normal"
    BOLD = "bold"


# enum for font style
class FontStyle(str, Enum):
    NORMAL = "normal"
    ITALIC = "italic"


# enum for horizontal text alignment
class Alignment(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


# enum for the supported slide aspect ratios
class AspectRatio(str, Enum):
    SQUARE = "1:1"
    PORTRAIT = "4:5"
    STORY = "9:16"
    WIDESCREEN = "16:9"
    CLASSIC = "3:2"


# enum for bitmap export formats
class ExportFormat(str, Enum):
    PNG = "png"
    JPEG = "jpeg"


# enum for the editor colour theme
class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


# model for the drop shadow behind a text block
class TextShadow(BaseModel):
    enabled: bool = True
    blur: float = Field(0, ge=0)
    x: float = 0
    y: float = 0
    color: str = "#000000"
    opacity: float = Field(0.35, ge=0, le=1)


# model for a point on the slide canvas
class Position(BaseModel):
    x: float = 0
    y: float = 0


# model for the box a text block occupies
class Size(BaseModel):
    width: float = Field(MIN_BLOCK_SIZE, ge=MIN_BLOCK_SIZE)
    height: float = Field(MIN_BLOCK_SIZE, ge=MIN_BLOCK_SIZE)


# model for a positioned, styled span of text on one slide
class TextBlock(BaseModel):
    id: str
    text: str = ""
    font_size: float = Field(gt=0)
    font_family: str
    color: str
    font_weight: FontWeight = FontWeight.BOLD
    font_style: FontStyle = FontStyle.NORMAL
    align: Alignment = Alignment.LEFT
    shadow: TextShadow
    position: Position
    size: Size
    background_opacity: float = Field(0, ge=0, le=1)


# model for a slide background (fill + accent colour used for contrast)
class Background(BaseModel):
    id: str
    css: str
    accent: str
    label: str


# model for a single slide; the first text block is the primary one
class Slide(BaseModel):
    id: str
    background: Background
    text_blocks: List[TextBlock] = []

    @property
    def primary_block(self) -> Optional[TextBlock]:
        return self.text_blocks[0] if self.text_blocks else None

    @property
    def text(self) -> str:
        block = self.primary_block
        return block.text if block else ""


# model for the output of summarization
class SummaryBundle(BaseModel):
    headline: str = ""
    key_ideas: List[str] = []  # ranked, most important first
    bullets: List[str] = []

    def is_empty(self) -> bool:
        return not self.headline.strip() and not any(idea.strip() for idea in self.key_ideas)


# model for a ready-made slide style
class TemplatePreset(BaseModel):
    id: str
    name: str
    description: str
    palette_hint: str
    slides: List[Slide]


# model for the whole editor project
class ProjectState(BaseModel):
    input_text: str = ""
    slide_count: int = Field(6, ge=0)
    slides: List[Slide]
    active_slide_id: Optional[str] = None
    aspect_ratio: AspectRatio = AspectRatio.PORTRAIT
    summary_bundle: Optional[SummaryBundle] = None
    theme: Theme = Theme.DARK
    quality: int = Field(90, ge=50, le=100)
    format: ExportFormat = ExportFormat.PNG

    @property
    def active_slide(self) -> Optional[Slide]:
        for slide in self.slides:
            if slide.id == self.active_slide_id:
                return slide
        return self.slides[0] if self.slides else None


# partial update for a shadow; unset fields keep their value
class ShadowPatch(BaseModel):
    enabled: Optional[bool] = None
    blur: Optional[float] = None
    x: Optional[float] = None
    y: Optional[float] = None
    color: Optional[str] = None
    opacity: Optional[float] = None


# partial update for a position
class PositionPatch(BaseModel):
    x: Optional[float] = None
    y: Optional[float] = None


# partial update for a size
class SizePatch(BaseModel):
    width: Optional[float] = None
    height: Optional[float] = None


# partial update for a text block; nested parts merge field by field
class BlockPatch(BaseModel):
    text: Optional[str] = None
    font_size: Optional[float] = None
    font_family: Optional[str] = None
    color: Optional[str] = None
    font_weight: Optional[FontWeight] = None
    font_style: Optional[FontStyle] = None
    align: Optional[Alignment] = None
    shadow: Optional[ShadowPatch] = None
    position: Optional[PositionPatch] = None
    size: Optional[SizePatch] = None
    background_opacity: Optional[float] = None


# result of checking a block against its slide
class SlideInspection(BaseModel):
    slide_id: str
    block_id: str
    contrast_ratio: float
    text_length: int
    readability_warning: Optional[str] = None
    text_limit_warning: Optional[str] = None


# request model for summarizing text into slides
class SummarizeRequest(BaseModel):
    text: str
    slide_count: int = Field(6, ge=0)
    provider: Optional[str] = None


# request model for splitting an existing bundle into slides
class SplitRequest(BaseModel):
    bundle: SummaryBundle
    slide_count: int = Field(6, ge=0)


# request model for reflow and balance
class SlidesRequest(BaseModel):
    slides: List[Slide]
    limit: Optional[int] = Field(None, ge=0)


# request model for patching one block of one slide
class PatchBlockRequest(BaseModel):
    slide: Slide
    block_id: str
    patch: BlockPatch


# request model for the contrast check
class ReadabilityRequest(BaseModel):
    color: str
    background: str


# response model for the contrast check
class ReadabilityResponse(BaseModel):
    ratio: float
    readable: bool
    threshold: float


# response model for anything that produces slides
class SlidesResponse(BaseModel):
    success: bool
    message: str
    slides: List[Slide] = []
    summary_bundle: Optional[SummaryBundle] = None
    processing_time: float = 0.0


# response model for project statistics
class ProjectStatistics(BaseModel):
    total_slides: int
    total_blocks: int
    total_characters: int
    average_characters_per_slide: float
    slides_over_limit: int
    empty_slides: int
    metadata: Dict[str, Any] = {}
