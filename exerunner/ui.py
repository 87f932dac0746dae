"""Coloured status lines printed while exercises are checked."""

import os

from rich.console import Console
from rich.text import Text


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _console() -> Console:
    return Console(highlight=False, markup=False, emoji=False, soft_wrap=True)


def _emit(symbol: str, message: str, colour: str) -> None:
    _console().print(Text(symbol, style=colour), Text(message, style=colour))


def warn(message: str) -> None:
    """Print a red warning line."""
    _emit("!" if no_emoji() else "⚠️ ", message, "red")


def success(message: str) -> None:
    """Print a green success line."""
    _emit("✓" if no_emoji() else "✅", message, "green")