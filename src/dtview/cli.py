"""CLI entry point for the project viewer."""

import logging
import typer
from pathlib import Path
from typing import List, Optional

from . import __version__
from .services import LoadResult, ProjectLoader
from .view import ViewController, render_document, to_text

app = typer.Typer(
    name="dt-view",
    help="Render a project's tasks and assets",
    no_args_is_help=True
)

SOURCE_HELP = "Remote URL or local JSON/YAML file (defaults to DTVIEW_REMOTE_URL)"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"dt-view version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit"
    )
) -> None:
    """Project Viewer - Browse a project's tasks and their assets."""
    pass


def _load(source: Optional[str]) -> LoadResult:
    result = ProjectLoader(source).load_result()
    loaded_at = f"{result.loaded_at:%H:%M:%S}" if result.loaded_at else "?"
    if result.used_fallback:
        typer.echo(f"⚠️  Using sample project ({result.error_message})")
        typer.echo(f"   Unavailable source: {result.location} (at {loaded_at})")
    else:
        typer.echo(f"📥 Loaded {result.location} (at {loaded_at})")
    return result


def _controller(result: LoadResult, task: int) -> ViewController:
    """Build a controller with the 1-based ``task`` selected."""
    count = len(result.project.tasks)
    if not 1 <= task <= count:
        typer.echo(f"❌ Task {task} does not exist (project has {count} task(s))")
        raise typer.Exit(1)
    return ViewController(result.project, task - 1)


@app.command()
def show(
    source: Optional[str] = typer.Option(None, "--source", "-s", help=SOURCE_HELP),
    task: int = typer.Option(1, "--task", "-t", help="Task number to select", min=1),
    expand_all: bool = typer.Option(
        False,
        "--expand-all",
        "-e",
        help="Show every asset's description and resource"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Print the project view for one task."""
    setup_logging(verbose)
    result = _load(source)
    view = _controller(result, task)

    if expand_all:
        for position in range(len(view.expanded)):
            view.toggle_asset(position)

    typer.echo(f"📁 Project: {result.project.name} ({result.source.value})")
    typer.echo(to_text(view.render()))


@app.command()
def render(
    source: Optional[str] = typer.Option(None, "--source", "-s", help=SOURCE_HELP),
    task: int = typer.Option(1, "--task", "-t", help="Task number to select", min=1),
    expand: Optional[List[int]] = typer.Option(
        None,
        "--expand",
        "-e",
        help="Asset card number to expand (repeatable)"
    ),
    collapse_board: bool = typer.Option(
        False,
        "--collapse-board",
        help="Render the journey board collapsed"
    ),
    output: Path = typer.Option(
        Path("output/index.html"),
        "--output",
        "-o",
        help="Output HTML file path"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Write the project view as a standalone HTML page.

    The page is a static snapshot of the chosen view state: cards opened with
    --expand stay open, and the toggle controls do not respond in the browser.
    """
    setup_logging(verbose)
    result = _load(source)
    view = _controller(result, task)

    for card in expand or []:
        try:
            view.toggle_asset(card - 1)
        except IndexError:
            typer.echo(f"❌ Task {task} has no asset card {card}")
            raise typer.Exit(1)

    if collapse_board:
        view.toggle_board()

    html = render_document(view.render(), title=result.project.name or "Project")
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(html, encoding="utf-8")
    except OSError as e:
        typer.echo(f"❌ Error writing page: {e}")
        raise typer.Exit(1)

    typer.echo(f"✅ Page saved: {output}")
    typer.echo(f"   Tasks: {len(result.project.tasks)}")
    typer.echo(f"   Selected: {view.selected_task.display_name(view.selected_index)}")
    typer.echo("   Static snapshot: card and board toggles are fixed at export")


BROWSE_HELP = "Commands: <n> select task · e <n> toggle card · b toggle board · q quit"


@app.command()
def browse(
    source: Optional[str] = typer.Option(None, "--source", "-s", help=SOURCE_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Browse the project interactively in the terminal."""
    setup_logging(verbose)
    result = _load(source)
    view = _controller(result, 1)

    while True:
        typer.echo("")
        typer.echo(to_text(view.render()))
        typer.echo(f"\n{BROWSE_HELP}")
        command = typer.prompt(">", default="q", show_default=False).strip().lower()

        if command in ("q", "quit", "exit"):
            break
        if command == "b":
            view.toggle_board()
            continue

        parts = command.split()
        try:
            if len(parts) == 2 and parts[0] == "e":
                view.toggle_asset(int(parts[1]) - 1)
            elif len(parts) == 1:
                view.select_task(int(parts[0]) - 1)
            else:
                typer.echo(f"⚠️  Unknown command: {command}")
        except ValueError:
            typer.echo(f"⚠️  Not a number: {command}")
        except IndexError as e:
            typer.echo(f"⚠️  {e}")


@app.command()
def dump(
    source: Optional[str] = typer.Option(None, "--source", "-s", help=SOURCE_HELP),
    output: Path = typer.Option(
        Path("project.yaml"),
        "--output",
        "-o",
        help="Output YAML file path"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Save the normalized project as YAML."""
    setup_logging(verbose)
    result = _load(source)
    project = result.project

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        project.to_yaml(output)
    except OSError as e:
        typer.echo(f"❌ Error saving project: {e}")
        raise typer.Exit(1)

    typer.echo(f"✅ Project saved: {output}")
    typer.echo(f"   Tasks: {len(project.tasks)}")
    typer.echo(f"   Assets: {project.asset_count}")


if __name__ == "__main__":
    app()
