#!/usr/bin/env python3
"""
Simple script to view a saved project in a readable format
"""

import json
import sys
from pathlib import Path


def view_slides(json_file):
    """View slides in a readable format"""

    # Load the project
    with open(json_file, 'r', encoding='utf-8') as f:
        project = json.load(f)

    bundle = project.get('summary_bundle') or {}

    print(f"🎯 PROJECT: {Path(json_file).stem}")
    print("=" * 60)
    print(f"📰 Headline: {bundle.get('headline', '-')}")
    print(f"📐 Aspect ratio: {project['aspect_ratio']}")
    print(f"📊 Total Slides: {len(project['slides'])}")
    print("=" * 60)

    for i, slide in enumerate(project['slides'], 1):
        print(f"\n📌 SLIDE {i}: {slide['background']['label']} (accent {slide['background']['accent']})")
        print(f"   Blocks: {len(slide['text_blocks'])}")
        print("-" * 40)

        for j, block in enumerate(slide['text_blocks'], 1):
            print(f"   {j}. {block['text']}")
            print(f"      🔤 {block['font_family']} {block['font_size']}px {block['color']}, {len(block['text'])} chars")
            print()

        print("-" * 40)


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python view_slides.py <json_file>")
        sys.exit(1)

    json_file = sys.argv[1]
    if not Path(json_file).exists():
        print(f"Error: File not found: {json_file}")
        sys.exit(1)

    view_slides(json_file)
