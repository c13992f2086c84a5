"""Tests for slidesummarizer.templates"""

from __future__ import annotations

from slidesummarizer.config import TEMPLATE_STYLE
from slidesummarizer.templates import TEMPLATE_LIBRARY, apply_template, get_template


class TestTemplateLibrary:

    def test_library_ids(self):
        assert [template.id for template in TEMPLATE_LIBRARY] == ["minimalism", "pastel", "neon", "kraft"]

    def test_template_slides_share_background_and_style(self):
        for template in TEMPLATE_LIBRARY:
            assert len(template.slides) == 4
            assert len({slide.background.css for slide in template.slides}) == 1
            for slide in template.slides:
                assert slide.primary_block.font_family == TEMPLATE_STYLE.font_family
                assert slide.primary_block.font_size == TEMPLATE_STYLE.font_size

    def test_unknown_template(self):
        assert get_template("baroque") is None


class TestApplyTemplate:

    def test_fresh_ids(self):
        template = get_template("neon")
        slides = apply_template(template)

        assert [slide.text for slide in slides] == [slide.text for slide in template.slides]
        assert not {slide.id for slide in slides} & {slide.id for slide in template.slides}
        template_blocks = {block.id for slide in template.slides for block in slide.text_blocks}
        assert not {block.id for slide in slides for block in slide.text_blocks} & template_blocks

    def test_library_not_aliased(self):
        template = get_template("kraft")
        slides = apply_template(template)
        slides[0].text_blocks[0].text = "changed"
        assert template.slides[0].text == "Add some warmth"
