"""Rich Console factory and theme for storefrontctl output.

Consoles render into a StringIO buffer so renderers keep a plain
``render_result() -> str`` contract.  Outside a TTY (tests, pipes) Rich
drops color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

STOREFRONT_THEME = Theme(
    {
        "sf.ok": "bold green",
        "sf.error": "bold red",
        "sf.warning": "bold yellow",
        "sf.op": "bold cyan",
        "sf.key": "dim",
        "sf.id": "bold blue",
        "sf.path": "dim",
        "sf.title": "bold",
        "sf.value": "magenta",
        "sf.bp.mobile": "green",
        "sf.bp.tablet": "yellow",
        "sf.bp.desktop": "blue",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps test output stable).
    """
    return Console(
        file=StringIO(),
        theme=STOREFRONT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_breakpoint(breakpoint: str) -> str:
    """Rich style name for a breakpoint, or "" for anything else."""
    if breakpoint in ("mobile", "tablet", "desktop"):
        return f"sf.bp.{breakpoint}"
    return ""
