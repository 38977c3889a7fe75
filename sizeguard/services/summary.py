from __future__ import annotations

import heapq

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from sizeguard.models.analysis import ModuleSize, SizeAnalysis
from sizeguard.services.formatting import format_bytes


def _share(size: int, total: int) -> str:
    if total <= 0:
        return "-"
    return f"{size / total * 100:.1f}%"


def _stats_panel(analysis: SizeAnalysis) -> Panel:
    body = (
        f"Bundle Size: [bold]{format_bytes(analysis.bundle_size)}[/bold]\n"
        f"Modules: [bold]{len(analysis.modules)}[/bold]"
    )
    return Panel(body, title="Bundle Summary", border_style="blue")


def top_modules(analysis: SizeAnalysis, n: int) -> list[ModuleSize]:
    """Return the *n* largest modules, largest first."""
    return heapq.nlargest(n, analysis.modules, key=lambda module: module.size)


def _modules_table(analysis: SizeAnalysis, top_n: int) -> Table:
    table = Table(title="Largest Modules", header_style="bold cyan")
    table.add_column("Module")
    table.add_column("Size", justify="right")
    table.add_column("Share", justify="right")
    for module in top_modules(analysis, top_n):
        table.add_row(
            escape(module.id),
            format_bytes(module.size),
            _share(module.size, analysis.bundle_size),
        )
    return table


def render_summary(console: Console, analysis: SizeAnalysis, top_n: int = 15) -> None:
    console.print(_stats_panel(analysis))
    if analysis.modules:
        console.print(_modules_table(analysis, top_n))
