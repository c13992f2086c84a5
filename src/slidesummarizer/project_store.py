# saves and loads editor projects as json documents
import json
import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from .config import WELCOME_TEXT, DEFAULT_SLIDE_COUNT
from .exceptions import ProjectFormatError
from .models import ProjectState
from .slide_factory import create_slide

logger = logging.getLogger(__name__)


# starting project: a single slide that explains what to do
def create_initial_project() -> ProjectState:
    slides = [create_slide(WELCOME_TEXT)]
    return ProjectState(
        input_text="",
        slide_count=DEFAULT_SLIDE_COUNT,
        slides=slides,
        active_slide_id=slides[0].id,
    )


# read a project from a json string
def project_from_json(document: str) -> ProjectState:
    """Parse and validate a project document"""
    try:
        data = json.loads(document)
    except json.JSONDecodeError as e:
        raise ProjectFormatError(f"Project is not valid JSON: {str(e)}") from e

    if not isinstance(data, dict):
        raise ProjectFormatError("Project must be a JSON object")

    try:
        return ProjectState.model_validate(data)
    except ValidationError as e:
        raise ProjectFormatError(f"Invalid project: {str(e)}") from e


# write a project to a json string
def project_to_json(project: ProjectState) -> str:
    return json.dumps(project.model_dump(mode="json"), indent=2, ensure_ascii=False)


# stores projects as <output_dir>/<name>.json
class ProjectStore:
    def __init__(self, output_dir: Union[str, Path] = "outputs"):
        self.output_dir = Path(output_dir)

    def path_for(self, name: str) -> Path:
        # keep only the final component so names cannot escape the output dir
        return self.output_dir / f"{Path(name).name}.json"

    # save project to a json file
    def export_to_json(self, project: ProjectState, filepath: Union[str, Path]) -> Path:
        """Export project to JSON file"""
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        filepath.write_text(project_to_json(project), encoding="utf-8")
        logger.info(f"Project exported to {filepath}")
        return filepath

    # load project from a json file
    def load_from_json(self, filepath: Union[str, Path]) -> ProjectState:
        """Load project from JSON file"""
        filepath = Path(filepath)
        try:
            document = filepath.read_text(encoding="utf-8")
        except OSError as e:
            logger.error(f"Error loading project: {str(e)}")
            raise
        return project_from_json(document)

    def save(self, name: str, project: ProjectState) -> Path:
        return self.export_to_json(project, self.path_for(name))

    def load(self, name: str) -> ProjectState:
        return self.load_from_json(self.path_for(name))

    def exists(self, name: str) -> bool:
        return self.path_for(name).exists()
