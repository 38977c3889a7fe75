from __future__ import annotations

import pytest

from sizeguard.config.defaults import default_config
from sizeguard.config.schema import ReportConfig, clamp_field


class TestToDict:
    def test_keys_present(self) -> None:
        d = ReportConfig().to_dict()
        assert set(d.keys()) == {
            "absoluteByteThreshold",
            "percentThreshold",
            "analysisFile",
            "previousAnalysisDir",
            "runnerRoot",
            "packagesDir",
        }

    def test_defaults(self) -> None:
        d = default_config().to_dict()
        assert d["absoluteByteThreshold"] == 100
        assert d["percentThreshold"] == 1.0
        assert d["analysisFile"] == "dist/bundle-analysis.json"


class TestFromDict:
    def test_overrides_thresholds(self) -> None:
        cfg = ReportConfig.from_dict({"absoluteByteThreshold": 500, "percentThreshold": 2.5}, ReportConfig())
        assert cfg.absolute_byte_threshold == 500
        assert cfg.percent_threshold == 2.5

    def test_absent_keys_use_defaults(self) -> None:
        defaults = ReportConfig(absolute_byte_threshold=7, runner_root="/ci")
        cfg = ReportConfig.from_dict({}, defaults)
        assert cfg.absolute_byte_threshold == 7
        assert cfg.runner_root == "/ci"

    def test_negative_thresholds_clamped(self) -> None:
        cfg = ReportConfig.from_dict({"absoluteByteThreshold": -5, "percentThreshold": -1}, ReportConfig())
        assert cfg.absolute_byte_threshold == 0
        assert cfg.percent_threshold == 0.0

    def test_null_path_rejected(self) -> None:
        with pytest.raises(ValueError, match="analysisFile"):
            ReportConfig.from_dict({"analysisFile": None}, ReportConfig())

    def test_empty_path_rejected(self) -> None:
        with pytest.raises(ValueError, match="runnerRoot"):
            ReportConfig.from_dict({"runnerRoot": ""}, ReportConfig())

    def test_non_numeric_threshold_rejected(self) -> None:
        with pytest.raises(ValueError, match="percentThreshold"):
            ReportConfig.from_dict({"percentThreshold": True}, ReportConfig())
        with pytest.raises(ValueError, match="absoluteByteThreshold"):
            ReportConfig.from_dict({"absoluteByteThreshold": None}, ReportConfig())

    def test_paths(self) -> None:
        cfg = ReportConfig.from_dict({"analysisFile": "out/a.json", "packagesDir": "libs"}, ReportConfig())
        assert cfg.analysis_file == "out/a.json"
        assert cfg.packages_dir == "libs"

    def test_round_trip(self) -> None:
        original = ReportConfig(absolute_byte_threshold=42, percent_threshold=0.5, runner_root="/r")
        assert ReportConfig.from_dict(original.to_dict(), ReportConfig()) == original


class TestWithThresholds:
    def test_none_keeps_values(self) -> None:
        cfg = ReportConfig(absolute_byte_threshold=42, percent_threshold=3.0)
        assert cfg.with_thresholds() == cfg

    def test_overrides_one(self) -> None:
        cfg = ReportConfig().with_thresholds(percent=5.0)
        assert cfg.percent_threshold == 5.0
        assert cfg.absolute_byte_threshold == 100

    def test_override_is_clamped(self) -> None:
        assert ReportConfig().with_thresholds(absolute=-1).absolute_byte_threshold == 0


class TestClampField:
    def test_known_field(self) -> None:
        assert clamp_field(-3, "absolute_byte_threshold") == 0

    def test_unknown_field_passthrough(self) -> None:
        assert clamp_field(-3, "nope") == -3
