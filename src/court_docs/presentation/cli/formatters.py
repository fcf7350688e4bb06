"""Rich formatting utilities for the CLI.

Keeps all Rich rendering (tables, panels, syntax) in one module that
knows nothing about domain logic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from court_docs.application.use_cases.export_document import ExportResult

console = Console()


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "Court Documents") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]❌ {message}[/]")


def step_header(step: int, title: str) -> None:
    """Print the wizard progress rule, e.g. ``Step 2 of 4: Case details``."""
    console.rule(f"[bold blue]Step {step} of 4[/] · {title}")


# ---------------------------------------------------------------------------
# JSON / config rendering
# ---------------------------------------------------------------------------


def json_panel(raw_json: str, title: str = "⚙️  Active configuration") -> None:
    """Render JSON inside a syntax-highlighted panel."""
    console.print(
        Panel(
            Syntax(raw_json, "json", theme="monokai", line_numbers=True),
            title=title,
            border_style="blue",
        )
    )


# ---------------------------------------------------------------------------
# Export summary
# ---------------------------------------------------------------------------


def export_table(results: Sequence[ExportResult]) -> None:
    """Print one row per written file."""
    table = Table(title="📄 Exported documents", show_header=True, border_style="blue")
    table.add_column("File", style="cyan")
    table.add_column("Size", justify="right", style="green")
    table.add_column("Location")

    for r in results:
        table.add_row(r.filename, f"{r.size:,} B", str(r.output_path.parent))

    console.print(table)


def choices_table(title: str, options: Sequence[str]) -> None:
    """Print a numbered list of options for an interactive prompt."""
    table = Table(title=title, show_header=False, border_style="dim")
    table.add_column("#", style="bold cyan", width=3)
    table.add_column("Option")
    for i, option in enumerate(options, start=1):
        table.add_row(str(i), option)
    console.print(table)
