"""
Tests for slidesummarizer.project_store

Covers:
  - the initial welcome project
  - json serialization and validation errors
  - ProjectStore file layout
"""

from __future__ import annotations

import json

import pytest

from slidesummarizer.config import DEFAULT_SLIDE_COUNT, WELCOME_TEXT
from slidesummarizer.exceptions import ProjectFormatError
from slidesummarizer.models import AspectRatio, ProjectState, SummaryBundle
from slidesummarizer.project_store import (
    ProjectStore,
    create_initial_project,
    project_from_json,
    project_to_json,
)


# ---------------------------------------------------------------------------
# initial project
# ---------------------------------------------------------------------------

class TestInitialProject:

    def test_single_welcome_slide(self):
        project = create_initial_project()
        assert len(project.slides) == 1
        assert project.slides[0].text == WELCOME_TEXT
        assert project.active_slide_id == project.slides[0].id
        assert project.slide_count == DEFAULT_SLIDE_COUNT
        assert project.input_text == ""
        assert project.summary_bundle is None


# ---------------------------------------------------------------------------
# json
# ---------------------------------------------------------------------------

class TestProjectJson:

    def test_document_keeps_all_fields(self):
        project = create_initial_project().model_copy(update={
            "aspect_ratio": AspectRatio.STORY,
            "summary_bundle": SummaryBundle(headline="H", key_ideas=["a"]),
        })
        restored = project_from_json(project_to_json(project))
        assert restored == project

    def test_enums_are_written_as_values(self):
        data = json.loads(project_to_json(create_initial_project()))
        assert data["aspect_ratio"] == "4:5"
        assert data["slides"][0]["text_blocks"][0]["font_weight"] == "bold"

    def test_non_ascii_is_kept(self):
        project = create_initial_project()
        project.input_text = "Привет"
        assert "Привет" in project_to_json(project)

    @pytest.mark.parametrize("document", [
        "not json",
        "[]",
        "{}",
        '{"slides": "none"}',
    ])
    def test_rejects_malformed_documents(self, document):
        with pytest.raises(ProjectFormatError):
            project_from_json(document)

    def test_project_without_slides(self):
        project = ProjectState(slides=[], slide_count=0)
        restored = project_from_json(project_to_json(project))
        assert restored == project
        assert restored.slides == []
        assert restored.active_slide_id is None

    def test_rejects_invalid_slide(self):
        data = json.loads(project_to_json(create_initial_project()))
        data["slides"][0]["text_blocks"][0]["background_opacity"] = 3
        with pytest.raises(ProjectFormatError):
            project_from_json(json.dumps(data))


# ---------------------------------------------------------------------------
# store
# ---------------------------------------------------------------------------

class TestProjectStore:

    def test_save_and_load(self, tmp_path):
        store = ProjectStore(tmp_path / "projects")
        project = create_initial_project()

        path = store.save("demo", project)

        assert path == tmp_path / "projects" / "demo.json"
        assert store.exists("demo")
        assert store.load("demo") == project

    def test_name_cannot_escape_output_dir(self, tmp_path):
        store = ProjectStore(tmp_path)
        assert store.path_for("../../etc/demo") == tmp_path / "demo.json"

    def test_missing_file(self, tmp_path):
        store = ProjectStore(tmp_path)
        assert not store.exists("nothing")
        with pytest.raises(OSError):
            store.load("nothing")

    def test_corrupt_file(self, tmp_path):
        (tmp_path / "broken.json").write_text("{oops", encoding="utf-8")
        with pytest.raises(ProjectFormatError):
            ProjectStore(tmp_path).load("broken")
