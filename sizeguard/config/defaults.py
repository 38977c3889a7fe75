from __future__ import annotations

from sizeguard.config.schema import ReportConfig

ABSOLUTE_BYTE_CHANGE_THRESHOLD = 100
PERCENT_CHANGE_THRESHOLD = 1.0


def default_config() -> ReportConfig:
    return ReportConfig(
        absolute_byte_threshold=ABSOLUTE_BYTE_CHANGE_THRESHOLD,
        percent_threshold=PERCENT_CHANGE_THRESHOLD,
    )
