import typer
from pathlib import Path
from typing import Optional
import logging
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from .config import DEFAULT_SLIDE_COUNT, READABILITY_THRESHOLD, TEXT_LIMIT, get_settings
from .exceptions import SlideSummarizerError
from .llm_service import OllamaLLMService
from .models import ProjectState
from .processing_service import SlideProcessingService
from .project_store import ProjectStore, create_initial_project
from .readability import readability_score
from .summarizer import get_summary_provider
from .templates import TEMPLATE_LIBRARY

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Initialize Typer app
app = typer.Typer(
    name="slidesummarizer",
    help="Summarize long text and spread it across social-ready slides",
    add_completion=False
)

# Initialize console for rich output
console = Console()


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging")):
    """Slide summarizer command line"""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@app.command()
def summarize(
    text_file: str = typer.Argument(..., help="Path to the text file to summarize"),
    slides: int = typer.Option(DEFAULT_SLIDE_COUNT, "--slides", "-n", min=0, help="Number of slides to create"),
    provider: Optional[str] = typer.Option(None, "--provider", "-p", help="Summarization provider: local or ollama"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Where to write the project JSON"),
):
    """Summarize a text file into a slide project"""
    source = Path(text_file)
    if not source.exists():
        console.print(f"[red]Error: File not found: {text_file}[/red]")
        raise typer.Exit(1)

    text = source.read_text(encoding="utf-8")
    if not text.strip():
        console.print("[red]Error: Text file is empty[/red]")
        raise typer.Exit(1)

    settings = get_settings()
    service = SlideProcessingService(provider=get_summary_provider(settings, provider), settings=settings)

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console
        ) as progress:
            progress.add_task("Summarizing text...", total=None)
            project = create_initial_project().model_copy(update={"slide_count": slides})
            project = service.summarize(project, text, slides)
    except SlideSummarizerError as e:
        console.print(f"[red]Error summarizing text: {str(e)}[/red]")
        raise typer.Exit(1)

    output_path = Path(output) if output else Path(settings.output_dir) / f"{source.stem}.json"
    ProjectStore().export_to_json(project, output_path)

    console.print(f"[green]✓ Created {len(project.slides)} slides[/green]")
    display_slide_list(project)
    console.print(f"[green]✓ Project saved to: {output_path}[/green]")


@app.command()
def reflow(
    project_file: str = typer.Argument(..., help="Path to the project JSON file"),
    limit: int = typer.Option(TEXT_LIMIT, "--limit", "-l", min=0, help="Maximum characters per slide"),
):
    """Carry overflowing text forward into the following slides"""
    store = ProjectStore()
    project = load_project(store, project_file)
    project = SlideProcessingService(store=store).reflow(project, limit)
    store.export_to_json(project, project_file)
    console.print("[green]✓ Slides reflowed[/green]")
    display_slide_list(project, limit)


@app.command()
def balance(
    project_file: str = typer.Argument(..., help="Path to the project JSON file"),
):
    """Spread the slide text evenly across all slides"""
    store = ProjectStore()
    project = load_project(store, project_file)
    project = SlideProcessingService(store=store).balance(project)
    store.export_to_json(project, project_file)
    console.print("[green]✓ Slides balanced[/green]")
    display_slide_list(project)


@app.command()
def contrast(
    color: str = typer.Argument(..., help="Text colour, e.g. #ffffff"),
    background: str = typer.Argument(..., help="Background accent colour, e.g. #c7512c"),
):
    """Show the contrast ratio between two colours"""
    ratio = readability_score(color, background)
    if ratio < READABILITY_THRESHOLD:
        console.print(f"[yellow]Contrast {ratio}:1 is below {READABILITY_THRESHOLD}:1[/yellow]")
    else:
        console.print(f"[green]Contrast {ratio}:1[/green]")


@app.command()
def show(
    project_file: str = typer.Argument(..., help="Path to the project JSON file")
):
    """List slides from a project"""
    project = load_project(ProjectStore(), project_file)
    display_slide_list(project)


@app.command()
def stats(
    project_file: str = typer.Argument(..., help="Path to the project JSON file")
):
    """Show statistics for a project"""
    store = ProjectStore()
    project = load_project(store, project_file)
    display_statistics(SlideProcessingService(store=store).statistics(project))


@app.command()
def check(
    provider: Optional[str] = typer.Option(None, "--provider", "-p", help="Summarization provider: local or ollama"),
):
    """Check that the summarization provider is ready"""
    settings = get_settings()
    name = (provider or settings.provider).lower()
    if name != "ollama":
        console.print("[green]✓ Local summarizer needs no model[/green]")
        return

    llm_service = OllamaLLMService(settings.ollama_base_url, settings.ollama_model)
    if not llm_service.test_connection():
        console.print(f"[red]✗ Ollama model {settings.ollama_model} is not responding[/red]")
        raise typer.Exit(1)
    console.print(f"[green]✓ Ollama model {settings.ollama_model} is responding[/green]")


@app.command()
def templates():
    """List the template library"""
    table = Table(title="Templates")
    table.add_column("Id", style="cyan")
    table.add_column("Name", style="magenta")
    table.add_column("Palette")
    table.add_column("Slides", justify="right")

    for template in TEMPLATE_LIBRARY:
        table.add_row(template.id, template.name, template.palette_hint, str(len(template.slides)))

    console.print(table)


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", "--host", help="Host to bind the server to"),
    port: int = typer.Option(8000, "--port", help="Port to bind the server to")
):
    """Start the FastAPI server"""

    console.print(f"[green]Starting server on {host}:{port}[/green]")

    import uvicorn
    uvicorn.run("slidesummarizer.api:app", host=host, port=port)


def load_project(store: ProjectStore, project_file: str) -> ProjectState:
    if not Path(project_file).exists():
        console.print(f"[red]Error: File not found: {project_file}[/red]")
        raise typer.Exit(1)
    try:
        return store.load_from_json(project_file)
    except SlideSummarizerError as e:
        console.print(f"[red]Error loading project: {str(e)}[/red]")
        raise typer.Exit(1)


def display_slide_list(project: ProjectState, limit: int = TEXT_LIMIT):
    """Display a table of all slides, flagging lengths over the limit"""
    table = Table(title=f"Slides ({len(project.slides)})")
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Text")
    table.add_column("Chars", justify="right", style="magenta")
    table.add_column("Background")

    over_limit = 0
    for i, slide in enumerate(project.slides, 1):
        chars = len(slide.text)
        style = "red" if chars > limit else "magenta"
        over_limit += chars > limit
        table.add_row(str(i), slide.text, f"[{style}]{chars}[/{style}]", slide.background.label)

    if over_limit:
        table.caption = f"{over_limit} over the {limit} character limit"
    console.print(table)


def display_statistics(stats):
    """Display project statistics"""
    table = Table(title="Project Statistics")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("Total Slides", str(stats.total_slides))
    table.add_row("Total Blocks", str(stats.total_blocks))
    table.add_row("Total Characters", str(stats.total_characters))
    table.add_row("Avg Characters per Slide", f"{stats.average_characters_per_slide:.1f}")
    table.add_row("Slides over Limit", str(stats.slides_over_limit))
    table.add_row("Empty Slides", str(stats.empty_slides))

    console.print(table)


if __name__ == "__main__":
    app()
