from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# (json_key, attr_name, minimum), shared by from_dict and CLI override clamping.
_NUMERIC_FIELDS: tuple[tuple[str, str, float], ...] = (
    ("absoluteByteThreshold", "absolute_byte_threshold", 0),
    ("percentThreshold", "percent_threshold", 0.0),
)

_STR_FIELDS: tuple[tuple[str, str], ...] = (
    ("analysisFile", "analysis_file"),
    ("previousAnalysisDir", "previous_analysis_dir"),
    ("runnerRoot", "runner_root"),
    ("packagesDir", "packages_dir"),
)


def _get_number(data: dict[str, Any], json_key: str, default: float) -> float:
    value = data.get(json_key, default)
    # bool is an int subclass; reject it with the other non-numbers.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        msg = f"{json_key} must be a number, got {value!r}"
        raise ValueError(msg)
    return value


def _get_str(data: dict[str, Any], json_key: str, default: str) -> str:
    value = data.get(json_key, default)
    if not isinstance(value, str) or not value:
        msg = f"{json_key} must be a non-empty string, got {value!r}"
        raise ValueError(msg)
    return value


def clamp_field(value: float, field_name: str) -> float:
    """Clamp *value* to the minimum defined for *field_name* in _NUMERIC_FIELDS."""
    for _, attr, minimum in _NUMERIC_FIELDS:
        if attr == field_name:
            return max(minimum, value)
    return value


@dataclass(slots=True)
class ReportConfig:
    absolute_byte_threshold: int = 100
    percent_threshold: float = 1.0
    analysis_file: str = "dist/bundle-analysis.json"
    previous_analysis_dir: str = "downloads/previous-bundle-analysis"
    runner_root: str = "../.."
    packages_dir: str = "packages"

    def to_dict(self) -> dict[str, Any]:
        return {
            "absoluteByteThreshold": self.absolute_byte_threshold,
            "percentThreshold": self.percent_threshold,
            "analysisFile": self.analysis_file,
            "previousAnalysisDir": self.previous_analysis_dir,
            "runnerRoot": self.runner_root,
            "packagesDir": self.packages_dir,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], defaults: ReportConfig) -> ReportConfig:
        absolute = _get_number(data, "absoluteByteThreshold", defaults.absolute_byte_threshold)
        percent = _get_number(data, "percentThreshold", defaults.percent_threshold)

        str_kwargs: dict[str, str] = {}
        for json_key, attr in _STR_FIELDS:
            str_kwargs[attr] = _get_str(data, json_key, getattr(defaults, attr))

        return cls(
            absolute_byte_threshold=int(clamp_field(int(absolute), "absolute_byte_threshold")),
            percent_threshold=float(clamp_field(float(percent), "percent_threshold")),
            **str_kwargs,
        )

    def with_thresholds(self, absolute: int | None = None, percent: float | None = None) -> ReportConfig:
        """Return a copy with the given thresholds overridden (``None`` keeps the current value)."""
        data = self.to_dict()
        if absolute is not None:
            data["absoluteByteThreshold"] = absolute
        if percent is not None:
            data["percentThreshold"] = percent
        return ReportConfig.from_dict(data, self)
