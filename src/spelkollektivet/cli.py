"""
cli.py

PURPOSE: Command-line interface for the game.
DEPENDENCIES: typer, rich

ARCHITECTURE NOTES:
The CLI provides commands for:
- play: Play the game interactively
- validate: Validate a world file
- config: Show the current configuration

The play loop is a plain blocking read: one line in, one turn processed,
the lines printed, until the engine reports the game is over.
"""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from spelkollektivet import __version__
from spelkollektivet.config import Settings, get_settings
from spelkollektivet.engine.engine import GameEngine
from spelkollektivet.loader import WorldValidationError, load_world
from spelkollektivet.models.world import World
from spelkollektivet.observability import init_telemetry, shutdown_telemetry
from spelkollektivet.ui import plain
from spelkollektivet.validator import ValidationSeverity, validate_world

app = typer.Typer(
    name="spelkollektivet",
    help="Settle in as the newest homie of a house full of indie game developers.",
    add_completion=False,
)

console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"spelkollektivet version {__version__}")
        raise typer.Exit()


def configure_logging(settings: Settings) -> None:
    """Send log records through Rich at the configured level."""
    level = "DEBUG" if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def _load_or_exit(world_file: Path | None, validate: bool) -> World:
    """Load a world, printing the problem and exiting with code 1 on failure."""
    try:
        return load_world(world_file, validate=validate)
    except json.JSONDecodeError as e:
        plain.print_error(f"Invalid JSON at line {e.lineno}: {e.msg}")
        raise typer.Exit(1) from None
    except ValidationError as e:
        plain.print_error("Validation errors:")
        for error in e.errors():
            loc = " -> ".join(str(x) for x in error["loc"])
            plain.print_error(f"  {loc}: {error['msg']}")
        raise typer.Exit(1) from None
    except WorldValidationError as e:
        plain.print_error("Invalid world:")
        for message in e.messages:
            plain.print_error(f"  {message}")
        raise typer.Exit(1) from None


@app.callback()
def main(
    _version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Spelkollektivet - a text adventure about your first day in a coliving house."""
    pass


@app.command()
def play(
    world_file: Annotated[
        Path | None,
        typer.Argument(
            help="Path to a world JSON file (the bundled house by default)",
            exists=True,
            readable=True,
        ),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            "-d",
            help="Show debug information after each turn",
        ),
    ] = False,
    no_pause: Annotated[
        bool,
        typer.Option(
            "--no-pause",
            help="Print instantly and don't wait for Enter between blocks",
        ),
    ] = False,
) -> None:
    """Play the game interactively."""
    settings = get_settings()
    if debug:
        settings.debug = True
    configure_logging(settings)

    world = _load_or_exit(world_file or settings.world_file, validate=True)
    engine = GameEngine(world)
    init_telemetry(settings.otel)

    pause_ms = 0 if no_pause else settings.print_pause_ms
    wait = not no_pause

    try:
        plain.print_title(world.metadata.title)
        console.print()
        plain.print_lines(engine.intro(), pause_ms)
        if wait:
            plain.print_message("Press Enter to begin.")
            plain.wait_for_key()

        plain.print_lines(engine.describe_current_location(), pause_ms)

        # Main game loop
        while True:
            plain.print_message("What now?")
            console.print()
            user_input = plain.print_prompt()

            console.print()
            result = engine.process_input(user_input)
            plain.print_lines(result.lines, pause_ms, wait_on_pause=wait)

            if settings.debug:
                plain.print_debug(
                    {
                        "location": engine.state.current_location,
                        "turns": engine.state.turns,
                        "goals": {goal.value: done for goal, done in engine.state.goals.items()},
                        "things": engine.state.thing_locations,
                    }
                )
                console.print()

            if result.game_over:
                break
    except (EOFError, KeyboardInterrupt):
        # Input closed at the prompt or at a pause
        console.print()
        plain.print_message("Goodbye!")
    finally:
        shutdown_telemetry()


@app.command()
def validate(
    world_file: Annotated[
        Path | None,
        typer.Argument(
            help="Path to a world JSON file (the bundled house by default)",
            exists=True,
            readable=True,
        ),
    ] = None,
) -> None:
    """Validate a world JSON file."""
    world = _load_or_exit(world_file, validate=False)

    issues = validate_world(world)
    for issue in issues:
        if issue.severity == ValidationSeverity.ERROR:
            plain.print_error(str(issue))
        else:
            plain.print_message(str(issue))

    if any(issue.severity == ValidationSeverity.ERROR for issue in issues):
        raise typer.Exit(1)

    # Show validation success and stats
    plain.print_success(f"Valid world: {world.metadata.title}")
    console.print(f"  Locations: {len(world.locations)}")
    console.print(f"  Things: {len(world.things)}")
    console.print(f"  Starting location: {world.starting_location}")


@app.command("config")
def config_cmd() -> None:
    """Show the current configuration."""
    settings = get_settings()
    console.print("[bold]Current Configuration:[/bold]")
    console.print(f"  World file: {settings.world_file or '(bundled)'}")
    console.print(f"  Log level: {settings.log_level}")
    console.print(f"  Debug: {settings.debug}")
    console.print(f"  Print pause: {settings.print_pause_ms} ms")
    console.print()
    console.print("[bold]OpenTelemetry Settings:[/bold]")
    console.print(f"  Enabled: {settings.otel.enabled}")
    console.print(f"  Service name: {settings.otel.service_name}")
    endpoint_status = settings.otel.endpoint if settings.otel.endpoint else "(console only)"
    console.print(f"  Endpoint: {endpoint_status}")


if __name__ == "__main__":
    app()
