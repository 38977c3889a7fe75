from __future__ import annotations

import re
from collections.abc import Iterable

from rich.console import Console

from sizeguard.config.defaults import default_config
from sizeguard.config.schema import ReportConfig
from sizeguard.models.analysis import DiffEntry, Difference, SizeAnalysis
from sizeguard.models.annotation import Annotation
from sizeguard.models.enums import Severity
from sizeguard.services.diff import diff_analyses, is_significant
from sizeguard.services.formatting import format_percent, print_plain

REPORT_BEGIN = "--- Size Change Report (empty if no significant changes are found) ---"
REPORT_END = "--- End Size Change Report ---"

# ESC or single-byte CSI, then either a BEL-terminated string sequence
# (OSC hyperlinks, titles) or CSI parameters followed by a final byte.
_ANSI_RE = re.compile(
    r"[\u001B\u009B][\[\]()#;?]*"
    r"(?:"
    r"(?:(?:(?:;[-a-zA-Z\d/#&.:=?%@~_]+)*|[a-zA-Z\d]+(?:;[-a-zA-Z\d/#&.:=?%@~_]*)*)?\u0007)"
    r"|(?:(?:\d{1,4}(?:;\d{0,4})*)?[\dA-PR-TZcf-ntqry=><~])"
    r")"
)


# Introducers left over when no valid sequence follows them.
_STRAY_ESC_RE = re.compile(r"[\u001B\u009B]")


def strip_ansi(text: str) -> str:
    return _STRAY_ESC_RE.sub("", _ANSI_RE.sub("", text))


def escape_message(text: str) -> str:
    # Annotations are line-oriented; a raw newline or carriage return would
    # end or overwrite the command.
    return text.replace("\r\n", "%0A").replace("\n", "%0A").replace("\r", "%0D")


def render_difference(label: str, diff: Difference, config: ReportConfig | None = None) -> Annotation | None:
    if not is_significant(diff, config):
        return None
    return Annotation(
        severity=Severity.ERROR,
        title=f"Important Size Change ({diff.absolute} bytes in {label})",
        body=f"{label} size change: {diff.absolute} bytes ({format_percent(diff.percent)}%)",
    )


def render_new_module(module_id: str, size: int, config: ReportConfig | None = None) -> Annotation | None:
    cfg = config or default_config()
    if size < cfg.absolute_byte_threshold:
        return None
    return Annotation(
        severity=Severity.NOTICE,
        title=f"New Module ({size} bytes in {module_id})",
        body=f"{module_id} size: {size} bytes",
    )


def render_entry(entry: DiffEntry, config: ReportConfig | None = None) -> Annotation | None:
    if entry.is_new or entry.difference is None:
        return render_new_module(entry.label, entry.size, config)
    return render_difference(entry.label, entry.difference, config)


def render_annotations(entries: Iterable[DiffEntry], config: ReportConfig | None = None) -> list[Annotation]:
    annotations: list[Annotation] = []
    for entry in entries:
        annotation = render_entry(entry, config)
        if annotation is not None:
            annotations.append(annotation)
    return annotations


def format_annotation(annotation: Annotation) -> str:
    line = f"::{annotation.severity.value} title={escape_message(annotation.title)}::{escape_message(annotation.body)}"
    return strip_ansi(line)


def report_lines(previous: SizeAnalysis, current: SizeAnalysis, config: ReportConfig | None = None) -> list[str]:
    """Build the full report: begin marker, one line per annotation, end marker."""
    annotations = render_annotations(diff_analyses(previous, current), config)
    return [REPORT_BEGIN, *(format_annotation(a) for a in annotations), REPORT_END]


def emit_report(
    console: Console,
    previous: SizeAnalysis,
    current: SizeAnalysis,
    config: ReportConfig | None = None,
) -> int:
    """Write the report to *console* and return how many annotations it held."""
    lines = report_lines(previous, current, config)
    for line in lines:
        print_plain(console, line)
    return len(lines) - 2
