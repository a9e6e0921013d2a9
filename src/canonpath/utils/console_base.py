"""Themed console output for the canonpath command line tool.

Wraps a Rich console with a small set of retro terminal themes and the
status-line helpers the CLI uses for results and errors.
"""

import json
import os
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape
from rich.text import Text
from rich.theme import Theme


class StatusType(Enum):
    """Standard status types with associated symbols."""
    SUCCESS = ("[✓]", "success", "green")
    ERROR = ("[x]", "error", "red")
    WARNING = ("[!]", "warning", "yellow")
    INFO = ("[!]", "info", "cyan")


@dataclass
class ThemeColors:
    """Color definitions for a theme."""
    info: str
    warning: str
    error: str
    success: str
    highlight: str
    path: str
    number: str
    dim: str


THEMES = {
    'manhattan': ThemeColors(
        info='cyan',
        warning='yellow',
        error='red',
        success='green',
        highlight='bright_cyan',
        path='white',
        number='bright_blue',
        dim='bright_black',
    ),
    'green': ThemeColors(
        info='green',
        warning='yellow',
        error='red',
        success='bright_green',
        highlight='bold green',
        path='bright_green',
        number='green',
        dim='green',
    ),
    'matrix': ThemeColors(
        info='bright_green',
        warning='yellow',
        error='red',
        success='green',
        highlight='bold bright_green',
        path='green',
        number='bright_green',
        dim='green',
    ),
    'sunset': ThemeColors(
        info='orange3',
        warning='yellow',
        error='red3',
        success='green',
        highlight='bold orange1',
        path='wheat1',
        number='orange1',
        dim='grey50',
    ),
}


class ConsoleManager:
    """Console output with theme support."""

    def __init__(self, theme: str = "manhattan", file: Optional[Any] = None):
        """Initialize console manager.

        Args:
            theme: Theme name from THEMES (unknown names fall back to manhattan)
            file: Output file (defaults to sys.stdout)
        """
        self.theme_name = theme if theme in THEMES else 'manhattan'
        self.theme_colors = THEMES[self.theme_name]
        self.file = file or sys.stdout

        self.console = Console(
            theme=self._create_rich_theme(),
            file=self.file,
            no_color=bool(os.environ.get('NO_COLOR')),
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )

    def _create_rich_theme(self) -> Theme:
        """Create Rich theme from our theme colors."""
        colors = self.theme_colors
        return Theme({
            'info': colors.info,
            'warning': colors.warning,
            'error': colors.error,
            'success': colors.success,
            'highlight': colors.highlight,
            'path': colors.path,
            'number': colors.number,
            'dim': colors.dim,
        })

    def print(self, *args, **kwargs):
        """Print with Rich markup."""
        self.console.print(*args, **kwargs)

    def print_path(self, path: Any, label: Optional[str] = None):
        """Print a path, optionally behind a dim label. Path text is never parsed as markup."""
        if label:
            self.console.print(f"[dim]{escape(label)}[/dim] [path]{escape(str(path))}[/path]")
        else:
            self.console.print(f"[path]{escape(str(path))}[/path]")

    def print_json(self, data: Any):
        """Print data as a single JSON document, without styling."""
        self.console.print(json.dumps(data), markup=False, highlight=False)

    def print_status(self, status: StatusType, message: str, prefix: str = ""):
        """Print a status line with icon."""
        icon, style, _ = status.value
        status_text = Text()
        if prefix:
            status_text.append(prefix + " ")
        status_text.append(f"{icon} ", style=style)
        status_text.append(message)
        self.console.print(status_text)

    def print_error(self, message: str):
        """Print an error message."""
        self.print_status(StatusType.ERROR, message)

    def print_success(self, message: str):
        """Print a success message."""
        self.print_status(StatusType.SUCCESS, message)

    def print_warning(self, message: str):
        """Print a warning message."""
        self.print_status(StatusType.WARNING, message)

    def print_info(self, message: str):
        """Print an info message."""
        self.print_status(StatusType.INFO, message)

    def print_exception(self):
        """Print the exception currently being handled."""
        self.console.print_exception()
