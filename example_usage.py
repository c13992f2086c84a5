#!/usr/bin/env python3
"""
Example usage of the slide summarizer
"""

import sys
from pathlib import Path

# Add src to Python path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from slidesummarizer.processing_service import SlideProcessingService
from slidesummarizer.project_store import create_initial_project

SAMPLE_TEXT = """
Good habits compound. A single workout changes little, but a year of them
changes everything. Start smaller than feels useful. Two minutes of reading a
day beats an hour you never find. Tie the new habit to something you already
do. After coffee, write one sentence. Track the streak, not the result. Missing
once is an accident, missing twice is the start of a new habit. Make the good
choice the easy one and the bad choice a little harder.
"""


def main():
    """Example of how to use the processing service directly"""

    print("This example uses the local summarizer; set SLIDESUMMARIZER_PROVIDER=ollama to use Llama 3")
    print()

    service = SlideProcessingService()

    # summarize the text into six slides
    project = service.summarize(create_initial_project(), SAMPLE_TEXT, 6)
    print(f"✓ Headline: {project.summary_bundle.headline}")
    print(f"✓ Generated {len(project.slides)} slides")

    # spread the text evenly, then make sure nothing is over the limit
    project = service.reflow(service.balance(project))

    print("\nSlides:")
    for i, slide in enumerate(project.slides, 1):
        inspection = service.inspect(project, slide.id)
        print(f"\n{i}. {slide.text}")
        print(f"   {len(slide.text)} chars, contrast {inspection.contrast_ratio}:1 on {slide.background.label}")
        if inspection.readability_warning:
            print(f"   ⚠️  {inspection.readability_warning}")

    path = service.save("example", project)
    print(f"\n✓ Project saved to: {path}")


if __name__ == "__main__":
    main()
