import time
import logging
from typing import Optional, List, Union, Dict, Any

from .backgrounds import generate_background
from .balance import balance_slides
from .config import TEXT_LIMIT, DEFAULT_STYLE, StyleDefaults, Settings, get_settings
from .exceptions import (
    SlideSummarizerError, SlideNotFoundError, BlockNotFoundError, TemplateNotFoundError,
)
from .models import (
    BlockPatch, ProjectState, ProjectStatistics, Slide, SlideInspection,
    SlidesResponse, SummaryBundle, TextBlock,
)
from .project_store import ProjectStore
from .readability import inspect_block
from .reflow import smart_reflow
from .slide_factory import (
    BackgroundFactory, add_text_block, apply_patch, duplicate_slide, regenerate_background,
)
from .splitter import split_to_slides
from .summarizer import SummaryProvider, get_summary_provider
from .templates import apply_template, get_template
from .text_limits import validate_count

logger = logging.getLogger(__name__)


# slide processing service wires summarization, splitting, reflow and balance over a project
class SlideProcessingService:
    def __init__(
        self,
        provider: Optional[SummaryProvider] = None,
        store: Optional[ProjectStore] = None,
        settings: Optional[Settings] = None,
        limit: int = TEXT_LIMIT,
        style: StyleDefaults = DEFAULT_STYLE,
        background_factory: BackgroundFactory = generate_background,
    ):
        self.settings = settings or get_settings()
        self.provider = provider or get_summary_provider(self.settings)
        self.store = store or ProjectStore(self.settings.output_dir)
        self.limit = limit
        self.style = style
        self.background_factory = background_factory

    # ------------------------------------------------------------------
    # summary -> slides
    # ------------------------------------------------------------------

    def split(self, bundle: SummaryBundle, slide_count: int) -> List[Slide]:
        return split_to_slides(
            bundle, slide_count, self.limit,
            background_factory=self.background_factory, style=self.style,
        )

    def summarize_text(self, text: str, slide_count: int) -> SlidesResponse:
        """Main pipeline: summarize text and split it into slides"""
        start_time = time.time()

        try:
            slide_count = validate_count(slide_count)
            logger.info(f"Starting summarization ({len(text)} characters, {slide_count} slides)")

            # Step 1: summarize
            logger.info("Step 1: Summarizing text...")
            bundle = self.provider.summarize(text, slide_count)
            logger.info(f"  ✓ Headline: {bundle.headline[:60]}")
            logger.info(f"  ✓ Key ideas: {len(bundle.key_ideas)}")

            # Step 2: split into slides
            logger.info("Step 2: Splitting into slides...")
            slides = self.split(bundle, slide_count)
            logger.info(f"  ✓ Created {len(slides)} slides")

            processing_time = time.time() - start_time
            return SlidesResponse(
                success=True,
                message="Text summarized successfully",
                slides=slides,
                summary_bundle=bundle,
                processing_time=processing_time,
            )

        except SlideSummarizerError as e:
            processing_time = time.time() - start_time
            logger.error(f"✗ ERROR: {str(e)}")
            return SlidesResponse(
                success=False,
                message=f"Error summarizing text: {str(e)}",
                processing_time=processing_time,
            )

    def summarize(self, project: ProjectState, text: Optional[str] = None,
                  slide_count: Optional[int] = None) -> ProjectState:
        """Summarize the project's input text and replace its slides"""
        text = project.input_text if text is None else text
        slide_count = validate_count(project.slide_count if slide_count is None else slide_count)
        if not text.strip():
            logger.info("No input text, keeping current slides")
            return project.model_copy(deep=True)

        bundle = self.provider.summarize(text, slide_count)
        slides = self.split(bundle, slide_count)
        return project.model_copy(update={
            "input_text": text,
            "slide_count": slide_count,
            "summary_bundle": bundle,
            "slides": slides,
            "active_slide_id": slides[0].id if slides else None,
        }, deep=True)

    # ------------------------------------------------------------------
    # distribution
    # ------------------------------------------------------------------

    def reflow(self, project: ProjectState, limit: Optional[int] = None) -> ProjectState:
        slides = smart_reflow(project.slides, self.limit if limit is None else limit, self.style)
        return self._with_slides(project, slides)

    def balance(self, project: ProjectState) -> ProjectState:
        return self._with_slides(project, balance_slides(project.slides, self.limit))

    def apply_template(self, project: ProjectState, template_id: str) -> ProjectState:
        template = get_template(template_id)
        if template is None:
            raise TemplateNotFoundError(template_id)
        slides = apply_template(template)
        return self._with_slides(project, slides, active_slide_id=slides[0].id)

    # ------------------------------------------------------------------
    # slide and block edits
    # ------------------------------------------------------------------

    def duplicate_slide(self, project: ProjectState, slide_id: str) -> ProjectState:
        """Insert a copy of the slide right after it"""
        index = self._slide_index(project, slide_id)
        slides = list(project.slides)
        slides.insert(index + 1, duplicate_slide(slides[index]))
        return self._with_slides(project, slides)

    def delete_slide(self, project: ProjectState, slide_id: str) -> ProjectState:
        """Remove a slide; the last remaining slide is kept"""
        self._slide_index(project, slide_id)
        if len(project.slides) == 1:
            logger.info("Refusing to delete the only slide")
            return project.model_copy(deep=True)
        slides = [slide for slide in project.slides if slide.id != slide_id]
        return self._with_slides(project, slides, active_slide_id=slides[0].id)

    def add_text_block(self, project: ProjectState, slide_id: str) -> ProjectState:
        index = self._slide_index(project, slide_id)
        slides = list(project.slides)
        slides[index] = add_text_block(slides[index], style=self.style)
        return self._with_slides(project, slides)

    def patch_block(self, project: ProjectState, slide_id: str, block_id: str,
                    patch: Union[BlockPatch, Dict[str, Any]]) -> ProjectState:
        index = self._slide_index(project, slide_id)
        slides = list(project.slides)
        slides[index] = patch_slide_block(slides[index], block_id, patch)
        return self._with_slides(project, slides)

    def regenerate_background(self, project: ProjectState, slide_id: str) -> ProjectState:
        index = self._slide_index(project, slide_id)
        slides = list(project.slides)
        slides[index] = regenerate_background(slides[index], self.background_factory)
        return self._with_slides(project, slides)

    # ------------------------------------------------------------------
    # inspection, statistics and persistence
    # ------------------------------------------------------------------

    def inspect(self, project: ProjectState, slide_id: Optional[str] = None,
                block_id: Optional[str] = None) -> Optional[SlideInspection]:
        """Check the selected block (primary block of the active slide by default)"""
        slide = project.slides[self._slide_index(project, slide_id)] if slide_id else project.active_slide
        if slide is None or not slide.text_blocks:
            return None
        block = _find_block(slide, block_id) if block_id else slide.text_blocks[0]
        return inspect_block(slide, block, self.limit)

    def statistics(self, project: ProjectState) -> ProjectStatistics:
        """Get statistics about the project's slides"""
        total_slides = len(project.slides)
        lengths = [len(slide.text) for slide in project.slides]
        total_characters = sum(lengths)
        return ProjectStatistics(
            total_slides=total_slides,
            total_blocks=sum(len(slide.text_blocks) for slide in project.slides),
            total_characters=total_characters,
            average_characters_per_slide=total_characters / total_slides if total_slides > 0 else 0,
            slides_over_limit=len([length for length in lengths if length > self.limit]),
            empty_slides=len([length for length in lengths if length == 0]),
            metadata={
                "limit": self.limit,
                "aspect_ratio": project.aspect_ratio.value,
                "has_summary": project.summary_bundle is not None,
            },
        )

    def save(self, name: str, project: ProjectState):
        return self.store.save(name, project)

    def load(self, name: str) -> ProjectState:
        return self.store.load(name)

    # ------------------------------------------------------------------

    def _slide_index(self, project: ProjectState, slide_id: str) -> int:
        for index, slide in enumerate(project.slides):
            if slide.id == slide_id:
                return index
        raise SlideNotFoundError(slide_id)

    def _with_slides(self, project: ProjectState, slides: List[Slide],
                     active_slide_id: Optional[str] = None) -> ProjectState:
        active = active_slide_id or project.active_slide_id
        if slides and active not in {slide.id for slide in slides}:
            active = slides[0].id
        # update values are not copied by model_copy, so copy the slides here
        slides = [slide.model_copy(deep=True) for slide in slides]
        return project.model_copy(update={"slides": slides, "active_slide_id": active}, deep=True)


def _find_block(slide: Slide, block_id: str) -> TextBlock:
    for block in slide.text_blocks:
        if block.id == block_id:
            return block
    raise BlockNotFoundError(block_id)


# patch one block of a slide, returning a new slide
def patch_slide_block(slide: Slide, block_id: str, patch: Union[BlockPatch, Dict[str, Any]]) -> Slide:
    target = _find_block(slide, block_id)
    updated = slide.model_copy(deep=True)
    updated.text_blocks = [
        apply_patch(block, patch) if block.id == target.id else block
        for block in updated.text_blocks
    ]
    return updated
