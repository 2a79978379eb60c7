"""Shared utility functions for nodeinit.

Provides the project-name slug helper, async command execution, file-system
helpers, and Rich-based console reporting.  All user-facing output goes
through the ``console`` / ``err_console`` objects defined here so that tests
can capture or silence it in one place.
"""

from __future__ import annotations

import asyncio
import re
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

console = Console()
err_console = Console(stderr=True)

BANNER_WIDTH = 40

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(cmd: list[str], cwd: str | Path | None = None) -> int:
    """Run a command asynchronously and wait for it to exit.

    The child inherits the parent's stdout/stderr so package-manager
    progress is shown live.  There is no timeout.

    Args:
        cmd: Executable and arguments.
        cwd: Working directory for the child process.

    Returns:
        The process exit code.

    Raises:
        OSError: If the executable cannot be started (e.g. not installed).
    """
    process = await asyncio.create_subprocess_exec(
        *cmd,
        cwd=str(cwd) if cwd else None,
    )
    return await process.wait()


# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def slugify(name: str) -> str:
    """Lowercase *name* and collapse every whitespace run into one hyphen.

    This is the form used for the ``package.json`` name, the project
    directory, and the default database names in connection strings.
    Characters other than whitespace are kept as-is.

    Examples::

        slugify("My App")        -> "my-app"
        slugify("  Shop  API ")  -> "shop-api"
    """
    return re.sub(r"\s+", "-", name.strip().lower())


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def write_text(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def banner_lines(text: str, width: int = BANNER_WIDTH) -> list[str]:
    """Return the three lines of a ``=``-framed banner with *text* centred."""
    padding = max(0, (width - len(text)) // 2)
    middle = " " * padding + text + " " * max(0, width - padding - len(text))
    rule = "=" * width
    return [rule, middle, rule]


def print_banner(text: str) -> None:
    """Print a framed banner (``====`` / text / ``====``)."""
    for line in banner_lines(text):
        console.print(line, markup=False, highlight=False)


def print_step(message: str) -> None:
    """Print a section header for a generation step."""
    console.print()
    console.print(Rule(f"[bold cyan]{message}[/bold cyan]", style="cyan"))


def print_created(item: str, directory: bool = False) -> None:
    """Print a green check mark for a created file or directory."""
    if directory:
        console.print(f"[green]✓[/green] Created directory: {escape(item)}", highlight=False)
    else:
        console.print(f"[green]✓[/green] Created {escape(item)}", highlight=False)


def print_next_steps(steps: list[tuple[str, str]], title: str = "Next steps") -> None:
    """Print a two-column command/label table.

    Args:
        steps: Sequence of ``(command, label)`` pairs.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold yellow")
    table.add_column("Command", style="cyan", no_wrap=True)
    table.add_column("Description", style="dim")

    for command, label in steps:
        table.add_row(escape(command), escape(label))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]{escape(message)}[/bold red]", highlight=False)


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
