"""Rich-based logger with bundleopt theming.

- Semantic colors (cyan=info, green=success, amber=warning, red=error)
- Structured output (tables, key-value pairs)
- Errors go to stderr so `--json` output stays machine readable
"""
from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from bundleopt.optimization.apk import ApkOptimizations


BUNDLEOPT_THEME = Theme(
    {
        "info": "bold #7dcfff",
        "success": "bold #9ece6a",
        "warning": "bold #e0af68",
        "error": "bold #f7768e",
        "highlight": "bold #bb9af7",
        "muted": "dim #565f89",
        "metric": "#7aa2f7",
        "path": "italic #73daca",
    }
)


class Logger:
    """Unified logging interface with rich console output."""

    def __init__(self) -> None:
        self.console = Console(theme=BUNDLEOPT_THEME)
        self.err_console = Console(theme=BUNDLEOPT_THEME, stderr=True)

    # ─────────────────────────────────────────────────────────────────────
    # Basic Logging
    # ─────────────────────────────────────────────────────────────────────

    def log(self, message: str) -> None:
        self.console.print(message)

    def info(self, message: str) -> None:
        """Log an informational message (cyan ℹ)."""
        self.console.print(f"[info]ℹ[/info] {message}")

    def success(self, message: str) -> None:
        """Log a success message (green ✓)."""
        self.console.print(f"[success]✓[/success] {message}")

    def warning(self, message: str) -> None:
        """Log a warning message (amber ⚠) on stderr."""
        self.err_console.print(f"[warning]⚠[/warning] {escape(message)}")

    def error(self, message: str) -> None:
        """Log an error message (red ✗) on stderr."""
        self.err_console.print(f"[error]✗[/error] {escape(message)}")

    # ─────────────────────────────────────────────────────────────────────
    # Structured Output
    # ─────────────────────────────────────────────────────────────────────

    def header(self, title: str, subtitle: str | None = None) -> None:
        """Print a prominent section header."""
        header_text = Text()
        header_text.append("━" * 3 + " ", style="muted")
        header_text.append(title, style="highlight")
        if subtitle:
            header_text.append(f" • {subtitle}", style="muted")
        header_text.append(" " + "━" * 40, style="muted")
        self.console.print()
        self.console.print(header_text)
        self.console.print()

    def subheader(self, text: str) -> None:
        self.console.print(f"[muted]──[/muted] [highlight]{text}[/highlight]")

    def table(
        self,
        title: str | None = None,
        columns: list[str] | None = None,
        rows: list[list[str]] | None = None,
    ) -> Table:
        """Create and optionally populate a styled table.

        If columns and rows are provided, prints immediately. Otherwise
        returns the Table for manual population.
        """
        table = Table(
            title=title,
            title_style="highlight",
            header_style="info",
            border_style="muted",
            row_styles=["", "dim"],
        )

        if columns and rows:
            for col in columns:
                table.add_column(col)
            for row in rows:
                table.add_row(*row)
            self.console.print(table)

        return table

    def key_value(self, data: dict[str, Any], title: str | None = None) -> None:
        """Display key-value pairs in a clean format."""
        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Key", style="muted")
        table.add_column("Value", style="metric")

        for key, value in data.items():
            table.add_row(f"{key}:", str(value))

        if title:
            self.subheader(title)
        self.console.print(table)

    def json(self, data: object) -> None:
        """Print plain JSON without markup or highlighting."""
        self.console.print(
            json.dumps(data, indent=2, sort_keys=True),
            markup=False,
            highlight=False,
            soft_wrap=True,
        )

    # ─────────────────────────────────────────────────────────────────────
    # Optimization Helpers
    # ─────────────────────────────────────────────────────────────────────

    def optimizations(self, apk: ApkOptimizations, title: str | None = None) -> None:
        """Display a resolved optimization decision."""
        dims = ", ".join(d.value for d in apk.sorted_dimensions()) or "(none)"
        self.key_value(
            {
                "split_dimensions": dims,
                "uncompress_native_libraries": apk.uncompress_native_libraries,
            },
            title=title,
        )


# ─────────────────────────────────────────────────────────────────────────────
# Module-Level Singleton
# ─────────────────────────────────────────────────────────────────────────────

_logger: Logger | None = None


def get_logger() -> Logger:
    """Get or create the singleton Logger instance."""
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger
