"""Tests for the slidesummarizer command line"""

from __future__ import annotations

from unittest import mock

import pytest
from rich.console import Console
from typer.testing import CliRunner

from slidesummarizer import cli
from slidesummarizer.cli import app, display_slide_list
from slidesummarizer.models import ProjectState
from slidesummarizer.project_store import ProjectStore
from slidesummarizer.slide_factory import create_slide

TEXT = (
    "First sentence here. Second one follows. Third idea is key. "
    "Fourth idea matters. Fifth idea closes."
)

runner = CliRunner()


@pytest.fixture(autouse=True)
def local_settings(tmp_path, monkeypatch):
    monkeypatch.setenv("SLIDESUMMARIZER_PROVIDER", "local")
    monkeypatch.setenv("SLIDESUMMARIZER_OUTPUT_DIR", str(tmp_path / "outputs"))
    monkeypatch.delenv("OLLAMA_BASE_URL", raising=False)
    monkeypatch.delenv("OLLAMA_MODEL", raising=False)


@pytest.fixture
def project_file(tmp_path):
    slides = [create_slide(text) for text in ["alpha beta gamma delta epsilon zeta eta theta", "iota"]]
    path = tmp_path / "project.json"
    ProjectStore().export_to_json(ProjectState(slides=slides), path)
    return path


# ---------------------------------------------------------------------------
# summarize
# ---------------------------------------------------------------------------

class TestSummarizeCommand:

    def test_writes_project(self, tmp_path):
        source = tmp_path / "article.txt"
        source.write_text(TEXT, encoding="utf-8")
        output = tmp_path / "slides.json"

        result = runner.invoke(app, ["summarize", str(source), "--slides", "2", "--output", str(output)])

        assert result.exit_code == 0, result.output
        assert "Created 2 slides" in result.output
        project = ProjectStore().load_from_json(output)
        assert [slide.text for slide in project.slides] == ["Third idea is key.", "Fourth idea matters."]

    def test_default_output_location(self, tmp_path):
        source = tmp_path / "article.txt"
        source.write_text(TEXT, encoding="utf-8")

        result = runner.invoke(app, ["summarize", str(source), "-n", "1"])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "outputs" / "article.json").exists()

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["summarize", str(tmp_path / "nope.txt")])
        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_empty_file(self, tmp_path):
        source = tmp_path / "empty.txt"
        source.write_text("  \n", encoding="utf-8")
        assert runner.invoke(app, ["summarize", str(source)]).exit_code == 1


# ---------------------------------------------------------------------------
# project commands
# ---------------------------------------------------------------------------

class TestProjectCommands:

    def test_reflow_rewrites_file(self, project_file):
        result = runner.invoke(app, ["reflow", str(project_file), "--limit", "30"])

        assert result.exit_code == 0, result.output
        project = ProjectStore().load_from_json(project_file)
        assert [slide.text for slide in project.slides] == [
            "alpha beta gamma delta",
            "epsilon zeta eta theta\niota",
        ]

    def test_balance_rewrites_file(self, project_file):
        result = runner.invoke(app, ["balance", str(project_file)])

        assert result.exit_code == 0, result.output
        texts = [slide.text for slide in ProjectStore().load_from_json(project_file).slides]
        assert " ".join(texts).split() == "alpha beta gamma delta epsilon zeta eta theta iota".split()

    def test_stats(self, project_file):
        result = runner.invoke(app, ["stats", str(project_file)])
        assert result.exit_code == 0
        assert "Total Slides" in result.output

    def test_show_missing_project(self, tmp_path):
        assert runner.invoke(app, ["show", str(tmp_path / "missing.json")]).exit_code == 1

    def test_show_corrupt_project(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{oops", encoding="utf-8")
        result = runner.invoke(app, ["show", str(path)])
        assert result.exit_code == 1
        assert "Error loading project" in result.output


# ---------------------------------------------------------------------------
# contrast and templates
# ---------------------------------------------------------------------------

class TestInfoCommands:

    def test_contrast(self):
        result = runner.invoke(app, ["contrast", "#000000", "#ffffff"])
        assert result.exit_code == 0
        assert "Contrast 21.0:1" in result.output

    def test_low_contrast(self):
        result = runner.invoke(app, ["contrast", "#777777", "#ffffff"])
        assert "Contrast 4.48:1 is below 4.5:1" in result.output

    def test_templates(self):
        result = runner.invoke(app, ["templates"])
        assert result.exit_code == 0
        assert "minimalism" in result.output


# ---------------------------------------------------------------------------
# provider check
# ---------------------------------------------------------------------------

class TestCheckCommand:

    def test_local_provider(self):
        result = runner.invoke(app, ["check"])
        assert result.exit_code == 0
        assert "Local summarizer needs no model" in result.output

    def test_ollama_responding(self, monkeypatch):
        service_class = mock.Mock()
        service_class.return_value.test_connection.return_value = True
        monkeypatch.setattr(cli, "OllamaLLMService", service_class)

        result = runner.invoke(app, ["check", "--provider", "ollama"])

        assert result.exit_code == 0
        assert "is responding" in result.output
        service_class.assert_called_once_with("http://localhost:11434", "llama3")

    def test_ollama_not_responding(self, monkeypatch):
        service_class = mock.Mock()
        service_class.return_value.test_connection.return_value = False
        monkeypatch.setattr(cli, "OllamaLLMService", service_class)

        result = runner.invoke(app, ["check", "--provider", "ollama"])

        assert result.exit_code == 1
        assert "is not responding" in result.output


# ---------------------------------------------------------------------------
# slide table
# ---------------------------------------------------------------------------

class TestSlideTable:

    def _render(self, monkeypatch, project, *args):
        console = Console(record=True, width=200)
        monkeypatch.setattr(cli, "console", console)
        display_slide_list(project, *args)
        return console.export_text()

    def test_flags_lengths_over_given_limit(self, monkeypatch):
        project = ProjectState(slides=[create_slide("alpha beta gamma delta epsilon zeta eta theta")])
        assert "1 over the 30 character limit" in self._render(monkeypatch, project, 30)

    def test_default_limit(self, monkeypatch):
        project = ProjectState(slides=[create_slide("alpha beta gamma delta epsilon zeta eta theta")])
        assert "over the" not in self._render(monkeypatch, project)

    def test_zero_slide_project_can_be_shown(self, tmp_path):
        source = tmp_path / "article.txt"
        source.write_text(TEXT, encoding="utf-8")
        output = tmp_path / "empty.json"

        assert runner.invoke(app, ["summarize", str(source), "-n", "0", "-o", str(output)]).exit_code == 0
        result = runner.invoke(app, ["show", str(output)])

        assert result.exit_code == 0, result.output
        assert "Slides (0)" in result.output
