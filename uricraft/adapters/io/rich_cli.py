"""Rich console helpers shared by the uricraft CLI and logging setup."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.theme import Theme

# Minimal uricraft theme with a restricted palette
URICRAFT_THEME = Theme(
    {
        "primary": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "bold red",
        "muted": "dim",
        "uri": "bold cyan",
    }
)


def make_console(stderr: bool = False) -> Console:
    return Console(theme=URICRAFT_THEME, stderr=stderr)


class RichCliComponents:
    """Rendering helpers for endpoint listings and error reports."""

    def __init__(
        self, console: Console | None = None, error_console: Console | None = None
    ) -> None:
        self.console = console or make_console()
        self.error_console = error_console or make_console(stderr=True)

    def endpoint_table(self, rows: list[dict]) -> Table:
        """Build a table of endpoint syntaxes and their path options."""
        table = Table(title="Endpoint Syntaxes", show_header=True, header_style="bold blue")
        table.add_column("Scheme", style="primary", no_wrap=True)
        table.add_column("Syntax", style="uri")
        table.add_column("Required", style="warning")
        table.add_column("Defaults", style="muted")
        table.add_column("Title")

        for row in rows:
            table.add_row(
                row["scheme"],
                row["syntax"],
                ", ".join(row["required"]) or "-",
                ", ".join(f"{k}={v}" for k, v in row["defaults"].items()) or "-",
                row["title"],
            )
        return table

    def print_error(self, message: str, title: str = "Error") -> None:
        self.error_console.print(
            Panel(escape(message), title=title, border_style="error")
        )
