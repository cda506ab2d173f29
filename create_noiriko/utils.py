"""Shared utility functions for create-noiriko.

Provides async command execution, project-name validation, file-system
helpers and Rich-based console reporting.  Console output is the only
"logging" the tool does: every message the user sees goes through the
module-level ``console`` and the ``print_*`` helpers below.
"""

from __future__ import annotations

import asyncio
import re
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.table import Table

from .config import PROJECT_NAME_PATTERN

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    capture: bool = True,
) -> tuple[int, str, str]:
    """Run an external program asynchronously.

    Args:
        cmd: Program and arguments.
        cwd: Working directory for the child process.
        capture: Whether to capture stdout/stderr (if ``False`` they inherit
            the parent's streams, so the child's output is shown live).

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  If *capture* is ``False``
        the stdout/stderr strings will be empty.

    Raises:
        FileNotFoundError: If the program is not installed.
    """
    stdout_pipe = asyncio.subprocess.PIPE if capture else None
    stderr_pipe = asyncio.subprocess.PIPE if capture else None

    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=stdout_pipe,
        stderr=stderr_pipe,
        cwd=str(cwd) if cwd else None,
    )

    stdout_bytes, stderr_bytes = await process.communicate()
    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# Name helpers
# ---------------------------------------------------------------------------


def validate_project_name(name: str) -> str | None:
    """Check a project name against the allowed format.

    Returns:
        ``None`` when the name is valid, otherwise a human-readable reason.

    Examples::

        validate_project_name("my-app")  -> None
        validate_project_name("My App")  -> "Project name can only contain ..."
    """
    if not name:
        return "Project name is required"
    if not re.match(PROJECT_NAME_PATTERN, name):
        return "Project name can only contain lowercase letters, numbers, and hyphens"
    return None


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def append_file(path: Path, content: str) -> None:
    """Append *content* to an existing file, separated by a blank line."""
    existing = path.read_text(encoding="utf-8")
    merged = existing.rstrip("\n") + "\n\n" + content if existing.strip() else content
    path.write_text(merged, encoding="utf-8")


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(3.7)    -> "3.7s"
        format_duration(65.2)   -> "1m 5s"
    """
    if seconds < 0:
        return "0.0s"

    minutes = int(seconds // 60)
    secs = seconds % 60
    if minutes > 0:
        return f"{minutes}m {int(secs)}s"
    return f"{secs:.1f}s"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_banner(title: str) -> None:
    """Print the opening banner."""
    console.print(Panel(f"[bold black on cyan] {title} [/bold black on cyan]", expand=False))


def print_summary_table(data: dict[str, str], title: str = "Configuration Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=False, title_style="bold")
    table.add_column("Item", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def create_progress() -> Progress:
    """Create a Rich spinner for the scaffolding steps."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )
