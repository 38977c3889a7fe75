from __future__ import annotations

from dataclasses import dataclass

from sizeguard.models.enums import Severity


@dataclass(slots=True, frozen=True)
class Annotation:
    severity: Severity
    title: str
    body: str
