"""Shared Rich consoles."""

from __future__ import annotations

from rich.console import Console
from rich.theme import Theme

theme = Theme(
    {
        "info": "bright_black",
        "success": "bold green",
        "warning": "bold yellow",
    }
)
console = Console(theme=theme, highlight=False)
stderr_console = Console(theme=theme, highlight=False, stderr=True)
