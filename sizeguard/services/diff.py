from __future__ import annotations

import math

from sizeguard.config.defaults import default_config
from sizeguard.config.schema import ReportConfig
from sizeguard.models.analysis import DiffEntry, Difference, SizeAnalysis

TOTAL_BUNDLE_LABEL = "Total Bundle"


def compare(before: int, after: int) -> Difference:
    """Absolute and percent change from *before* to *after*.

    A zero baseline has no ratio: growth from zero is infinitely significant,
    zero to zero is no change.
    """
    absolute = after - before
    if before:
        percent = (after / before) * 100 - 100
    elif after:
        percent = math.inf
    else:
        percent = 0.0
    return Difference(absolute=absolute, percent=percent)


def is_significant(diff: Difference, config: ReportConfig | None = None) -> bool:
    cfg = config or default_config()
    return abs(diff.absolute) >= cfg.absolute_byte_threshold or abs(diff.percent) >= cfg.percent_threshold


def module_label(module_id: str) -> str:
    return f"Module '{module_id}'"


def diff_analyses(previous: SizeAnalysis, current: SizeAnalysis) -> list[DiffEntry]:
    """Diff two analyses in *current*'s module order.

    The total bundle is always the first entry. Modules that only exist in
    *previous* are not reported.
    """
    entries = [
        DiffEntry.compared(
            TOTAL_BUNDLE_LABEL,
            current.bundle_size,
            compare(previous.bundle_size, current.bundle_size),
        )
    ]

    prev_by_id = previous.module_index()
    for module in current.modules:
        prev_module = prev_by_id.get(module.id)
        if prev_module is None:
            entries.append(DiffEntry.new_module(module.id, module.size))
        else:
            entries.append(
                DiffEntry.compared(module_label(module.id), module.size, compare(prev_module.size, module.size))
            )
    return entries
