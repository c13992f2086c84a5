"""
Tests for slidesummarizer.slide_factory and slidesummarizer.backgrounds

Covers:
  - baseline block style
  - slide creation with injected and explicit backgrounds
  - apply_patch field-level merge semantics
  - duplicate / add block / regenerate background
"""

from __future__ import annotations

import random

import pytest
from pydantic import ValidationError

from slidesummarizer.backgrounds import BACKGROUND_POOL, generate_background
from slidesummarizer.config import DEFAULT_STYLE, NEW_BLOCK_TEXT, TEMPLATE_STYLE
from slidesummarizer.models import Alignment, BlockPatch, FontWeight
from slidesummarizer.slide_factory import (
    add_text_block,
    apply_patch,
    create_slide,
    create_text_block,
    duplicate_slide,
    new_id,
    regenerate_background,
)


class TestCreateTextBlock:

    def test_baseline_style(self):
        block = create_text_block("Hello")
        assert block.text == "Hello"
        assert block.font_size == 40
        assert block.font_family == "Manrope"
        assert block.color == "#ffffff"
        assert block.font_weight == FontWeight.BOLD
        assert block.align == Alignment.LEFT
        assert block.shadow.enabled
        assert (block.shadow.blur, block.shadow.x, block.shadow.y) == (24, 0, 18)
        assert block.shadow.opacity == 0.35
        assert (block.position.x, block.position.y) == (80, 120)
        assert (block.size.width, block.size.height) == (420, 360)
        assert block.background_opacity == 0

    def test_template_style(self):
        block = create_text_block("Hello", TEMPLATE_STYLE)
        assert block.font_family == "Space Grotesk"
        assert block.font_size == 36
        assert block.shadow.y == 10

    def test_ids_are_unique(self):
        assert len({create_text_block().id for _ in range(50)}) == 50
        assert new_id() != new_id()

    def test_block_does_not_share_style_objects(self):
        block = create_text_block()
        block.shadow.blur = 1
        block.position.x = 5
        assert DEFAULT_STYLE.shadow.blur == 24
        assert DEFAULT_STYLE.position.x == 80


class TestCreateSlide:

    def test_uses_background_factory(self, fixed_background):
        slide = create_slide("Hi", background_factory=fixed_background)
        assert slide.background.label == "Fixed"
        assert len(slide.text_blocks) == 1
        assert slide.text == "Hi"
        assert slide.primary_block is slide.text_blocks[0]

    def test_explicit_background_is_copied(self, fixed_background):
        background = fixed_background()
        slide = create_slide("Hi", background=background)
        assert slide.background == background
        assert slide.background is not background

    def test_random_background_comes_from_pool(self):
        background = generate_background(random.Random(7))
        assert background.label in {palette["label"] for palette in BACKGROUND_POOL}
        assert background.accent.startswith("#")


class TestApplyPatch:

    def test_top_level_fields_replace(self):
        block = create_text_block("old")
        patched = apply_patch(block, BlockPatch(text="new", color="#000000", align=Alignment.CENTER))
        assert patched.text == "new"
        assert patched.color == "#000000"
        assert patched.align == Alignment.CENTER
        assert patched.font_size == block.font_size

    def test_nested_fields_merge(self):
        block = create_text_block()
        patched = apply_patch(block, {"position": {"x": 10}, "shadow": {"opacity": 0.8}, "size": {"height": 200}})
        assert (patched.position.x, patched.position.y) == (10, 120)
        assert patched.shadow.opacity == 0.8
        assert patched.shadow.blur == 24
        assert (patched.size.width, patched.size.height) == (420, 200)

    def test_source_block_untouched_and_id_kept(self):
        block = create_text_block("old")
        patched = apply_patch(block, {"text": "new", "position": {"y": 1}})
        assert block.text == "old"
        assert block.position.y == 120
        assert patched.id == block.id

    def test_empty_patch_is_identity(self):
        block = create_text_block("same")
        assert apply_patch(block, BlockPatch()) == block

    @pytest.mark.parametrize("patch", [
        {"background_opacity": 1.5},
        {"shadow": {"opacity": -0.1}},
        {"size": {"width": 5}},
        {"font_size": 0},
    ])
    def test_invalid_result_is_rejected(self, patch):
        with pytest.raises(ValidationError):
            apply_patch(create_text_block(), patch)


class TestSlideOperations:

    def test_duplicate_gets_fresh_ids(self, annotated_slide):
        copy = duplicate_slide(annotated_slide)
        assert copy.id != annotated_slide.id
        assert [b.text for b in copy.text_blocks] == [b.text for b in annotated_slide.text_blocks]
        assert not {b.id for b in copy.text_blocks} & {b.id for b in annotated_slide.text_blocks}
        assert copy.background == annotated_slide.background

    def test_add_text_block_stacks_below(self, make_slides):
        slide = make_slides(["one"])[0]
        updated = add_text_block(slide)
        assert len(slide.text_blocks) == 1
        assert len(updated.text_blocks) == 2
        added = updated.text_blocks[1]
        assert added.text == NEW_BLOCK_TEXT
        assert (added.position.x, added.position.y) == (60, 100)
        assert (added.size.width, added.size.height) == (360, 220)

    def test_regenerate_background(self, make_slides, fixed_background):
        slide = make_slides(["one"])[0]
        updated = regenerate_background(slide, fixed_background)
        assert updated.background.id != slide.background.id
        assert updated.text == slide.text
