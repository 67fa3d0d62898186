"""Rich console setup for human-readable output.

Renderers draw into an in-memory console and hand back the text, so
:func:`shieldctl.output.formatters.format_result` stays a pure
``ServiceResult -> str`` function that Click can echo to either stream.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEFAULT_WIDTH = 120

# Style names referenced by renderers.py.
SHIELD_THEME = Theme(
    {
        "shield.ok": "bold green",
        "shield.error": "bold red",
        "shield.warning": "bold yellow",
        "shield.op": "bold cyan",
        "shield.key": "dim",
        "shield.type": "bold blue",
        "shield.hash": "magenta",
        "shield.signer": "cyan",
        "shield.valid": "green",
        "shield.invalid": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """In-memory console; Rich drops color on its own when not on a TTY."""
    buffer = StringIO()
    return Console(
        file=buffer,
        width=width or DEFAULT_WIDTH,
        theme=SHIELD_THEME,
        highlight=False,
        no_color=no_color,
    )


def get_output(console: Console) -> str:
    buffer = console.file
    if not isinstance(buffer, StringIO):
        msg = "console was not created by create_console()"
        raise TypeError(msg)
    return buffer.getvalue()
