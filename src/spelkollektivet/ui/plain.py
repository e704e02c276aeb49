"""
plain.py

PURPOSE: Plain text output formatting for the CLI.
DEPENDENCIES: rich

ARCHITECTURE NOTES:
This module turns the engine's tagged lines into console output using Rich.
It handles:
- Line styles (plain narration, success rows, pauses)
- Paced printing, one line at a time
- Messages and errors
- Debug output

Rich takes care of wrapping to the terminal width.
"""

import json
import time

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from spelkollektivet.engine.output import Line, LineStyle

# Global console instance
console = Console()


def print_lines(lines: list[Line], pause_ms: int = 0, wait_on_pause: bool = True) -> None:
    """
    Print engine output.

    Args:
        lines: Tagged lines from the engine
        pause_ms: Delay after each printed line
        wait_on_pause: Wait for Enter on PAUSE lines (skip them when False)
    """
    for line in lines:
        if line.style == LineStyle.PAUSE:
            if wait_on_pause:
                wait_for_key()
            continue

        if line.style == LineStyle.SUCCESS:
            console.print(Text(line.text, style="green"))
        else:
            console.print(Text(line.text))

        if pause_ms:
            time.sleep(pause_ms / 1000)


def print_message(text: str) -> None:
    """Print a normal game message."""
    console.print(escape(text))


def print_error(text: str) -> None:
    """Print an error message."""
    console.print(f"[red]{escape(text)}[/red]")


def print_success(text: str) -> None:
    """Print a success message."""
    console.print(f"[green]{escape(text)}[/green]")


def print_prompt() -> str:
    """Print the input prompt and get user input."""
    return console.input("[bold white]>[/bold white] ")


def wait_for_key() -> None:
    """Wait until the player presses Enter."""
    console.input("[dim](press Enter)[/dim]")


def print_title(title: str) -> None:
    """Print a game title in a panel."""
    panel = Panel(
        Text(title, justify="center", style="bold"),
        border_style="blue",
    )
    console.print(panel)


def print_debug(data: dict[str, object] | str) -> None:
    """Print debug information."""
    console.print("[dim]--- DEBUG ---[/dim]")
    if isinstance(data, dict):
        console.print(f"[dim]{escape(json.dumps(data, indent=2, default=str))}[/dim]")
    else:
        console.print(f"[dim]{escape(data)}[/dim]")
    console.print("[dim]-------------[/dim]")
