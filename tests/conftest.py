"""
Shared fixtures for the slidesummarizer test suite.

Backgrounds are random in production; tests inject a fixed one so that
splitter, reflow and balance results are deterministic.
"""

from __future__ import annotations

import itertools
import sys
from pathlib import Path
from typing import List

import pytest

# add src to python path so the tests run without installing the package
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from slidesummarizer.models import Background, Slide  # noqa: E402
from slidesummarizer.slide_factory import create_slide, create_text_block  # noqa: E402


FIXED_ACCENT = "#c7512c"


@pytest.fixture
def fixed_background():
    """Background factory that always returns the same palette with a new id."""
    counter = itertools.count(1)

    def factory() -> Background:
        return Background(
            id=f"bg-{next(counter)}",
            css="linear-gradient(120deg, #f6d365 0%, #fda085 100%)",
            accent=FIXED_ACCENT,
            label="Fixed",
        )

    return factory


@pytest.fixture
def make_slides(fixed_background):
    """Build slides from a list of primary texts."""

    def build(texts: List[str]) -> List[Slide]:
        return [create_slide(text, background_factory=fixed_background) for text in texts]

    return build


@pytest.fixture
def blockless_slide(fixed_background) -> Slide:
    slide = create_slide("", background_factory=fixed_background)
    slide.text_blocks = []
    return slide


@pytest.fixture
def annotated_slide(fixed_background) -> Slide:
    """Slide with a primary block and one free-form annotation."""
    slide = create_slide("primary text", background_factory=fixed_background)
    slide.text_blocks.append(create_text_block("annotation"))
    return slide
