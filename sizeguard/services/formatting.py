from __future__ import annotations

import math

from rich.console import Console

_UNITS = ("B", "KB", "MB", "GB", "TB")


def format_bytes(size_bytes: int) -> str:
    size = float(abs(size_bytes))
    sign = "-" if size_bytes < 0 else ""
    for unit in _UNITS:
        if size < 1024 or unit == _UNITS[-1]:
            if unit == "B":
                return f"{sign}{int(size)} {unit}"
            return f"{sign}{size:.1f} {unit}"
        size /= 1024
    return f"{size_bytes} B"


def format_percent(percent: float) -> str:
    if math.isinf(percent):
        return "Infinity" if percent > 0 else "-Infinity"
    return f"{percent:.2f}"


def print_plain(console: Console, line: str) -> None:
    """Print *line* verbatim: no markup, highlighting, emoji codes or wrapping."""
    console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)
