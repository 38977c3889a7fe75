from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "y", "on"}


def is_truthy_env(val: str | None) -> bool:
    if val is None:
        return False
    return val.strip().lower() in _TRUTHY


def is_ci(environ: Mapping[str, str] | None = None) -> bool:
    """Return True when the ``CI`` variable marks a continuous-integration run."""
    env = os.environ if environ is None else environ
    return is_truthy_env(env.get("CI"))


@dataclass(slots=True, frozen=True)
class AnalyzerOptions:
    """Flags handed to the bundle analyzer alongside the analysis callback."""

    summary_only: bool
    skip_formatted: bool


def analyzer_options(ci: bool) -> AnalyzerOptions:
    # Local builds want the short summary; CI only needs the raw data.
    return AnalyzerOptions(summary_only=not ci, skip_formatted=ci)
