"""Rich Console factory and theme for dtneid output.

Consoles render to a StringIO buffer, preserving the
``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

EID_THEME = Theme(
    {
        "eid.ok": "bold green",
        "eid.error": "bold red",
        "eid.warning": "bold yellow",
        "eid.op": "bold cyan",
        "eid.key": "dim",
        "eid.uri": "bold blue",
        "eid.data": "magenta",
    }
)

_KEY_STYLES: dict[str, str] = {
    "uri": "eid.uri",
    "decoded": "eid.uri",
    "data": "eid.data",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=EID_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_key(key: str) -> str:
    """Return the Rich style name for a result data key."""
    return _KEY_STYLES.get(key, "")
