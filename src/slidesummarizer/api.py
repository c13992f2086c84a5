# fastapi web api for text to slides conversion
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
import logging
from typing import List

from . import __version__
from .balance import balance_slides
from .config import READABILITY_THRESHOLD
from .exceptions import (
    InvalidArgumentError, ProjectFormatError, BlockNotFoundError,
)
from .models import (
    ProjectState, ProjectStatistics, ReadabilityRequest, ReadabilityResponse,
    PatchBlockRequest, Slide, SlidesRequest, SlidesResponse, SplitRequest,
    SummarizeRequest, TemplatePreset,
)
from .processing_service import SlideProcessingService, patch_slide_block
from .readability import readability_score
from .reflow import smart_reflow
from .summarizer import get_summary_provider
from .templates import TEMPLATE_LIBRARY, apply_template, get_template

# configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# initialize fastapi application
app = FastAPI(
    title="Slide Summarizer API",
    description="Summarize long text and spread it across social-ready slides",
    version=__version__
)

# add cors middleware to allow cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# initialize processing service
processing_service = SlideProcessingService()


# endpoint to summarize text and split it into slides (sync: the provider may block on http)
@app.post("/summarize", response_model=SlidesResponse)
def summarize(request: SummarizeRequest):
    """Summarize text into a bundle and an initial set of slides"""
    service = processing_service
    if request.provider:
        service = SlideProcessingService(
            provider=get_summary_provider(processing_service.settings, request.provider),
            store=processing_service.store,
            settings=processing_service.settings,
            limit=processing_service.limit,
            style=processing_service.style,
            background_factory=processing_service.background_factory,
        )

    response = service.summarize_text(request.text, request.slide_count)
    if not response.success:
        raise HTTPException(status_code=502, detail=response.message)
    return response


# endpoint to split an existing summary bundle into slides
@app.post("/slides/split", response_model=SlidesResponse)
async def split_slides(request: SplitRequest):
    """Build one slide per key idea"""
    slides = processing_service.split(request.bundle, request.slide_count)
    return SlidesResponse(
        success=True,
        message=f"Created {len(slides)} slides",
        slides=slides,
        summary_bundle=request.bundle,
    )


# endpoint to carry overflowing text forward
@app.post("/slides/reflow", response_model=SlidesResponse)
async def reflow_slides(request: SlidesRequest):
    """Enforce the character limit on every slide"""
    limit = processing_service.limit if request.limit is None else request.limit
    try:
        slides = smart_reflow(request.slides, limit, processing_service.style)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return SlidesResponse(success=True, message="Slides reflowed", slides=slides)


# endpoint to spread text evenly over the slides
@app.post("/slides/balance", response_model=SlidesResponse)
async def balance(request: SlidesRequest):
    """Redistribute all slide text evenly"""
    limit = processing_service.limit if request.limit is None else request.limit
    try:
        slides = balance_slides(request.slides, limit)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return SlidesResponse(success=True, message="Slides balanced", slides=slides)


# endpoint to check text/background contrast
@app.post("/readability", response_model=ReadabilityResponse)
async def readability(request: ReadabilityRequest):
    """Contrast ratio between a text colour and a background colour"""
    ratio = readability_score(request.color, request.background)
    return ReadabilityResponse(
        ratio=ratio,
        readable=ratio >= READABILITY_THRESHOLD,
        threshold=READABILITY_THRESHOLD,
    )


# endpoint to apply a partial edit to one block
@app.post("/blocks/patch", response_model=Slide)
async def patch_block(request: PatchBlockRequest):
    """Merge a partial update into one block of a slide"""
    try:
        return patch_slide_block(request.slide, request.block_id, request.patch)
    except BlockNotFoundError:
        raise HTTPException(status_code=404, detail=f"Block not found: {request.block_id}")
    except ValueError as e:
        # the merged block failed validation (e.g. opacity above 1)
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/templates", response_model=List[TemplatePreset])
async def list_templates():
    """List the template library"""
    return TEMPLATE_LIBRARY


@app.post("/templates/{template_id}/apply", response_model=SlidesResponse)
async def apply_template_slides(template_id: str):
    """Get fresh slides for a template"""
    template = get_template(template_id)
    if template is None:
        raise HTTPException(status_code=404, detail=f"Template not found: {template_id}")
    slides = apply_template(template)
    return SlidesResponse(success=True, message=f"Applied template {template.name}", slides=slides)


# endpoint to persist a project
@app.post("/projects/{name}")
async def save_project(name: str, project: ProjectState):
    """Save a project as JSON"""
    try:
        path = processing_service.save(name, project)
    except OSError as e:
        logger.error(f"Error saving project: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Save failed: {str(e)}")
    return {"message": "Project saved", "name": name, "path": str(path)}


# endpoint to load a persisted project
@app.get("/projects/{name}", response_model=ProjectState)
async def load_project(name: str):
    """Load a saved project"""
    return _load_or_raise(name)


@app.get("/projects/{name}/stats", response_model=ProjectStatistics)
async def project_stats(name: str):
    """Get project statistics"""
    return processing_service.statistics(_load_or_raise(name))


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "slidesummarizer"}


def _load_or_raise(name: str) -> ProjectState:
    if not processing_service.store.exists(name):
        raise HTTPException(status_code=404, detail="Project not found")
    try:
        return processing_service.load(name)
    except ProjectFormatError as e:
        raise HTTPException(status_code=400, detail=str(e))


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
