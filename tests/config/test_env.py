from __future__ import annotations

import pytest

from sizeguard.config.env import analyzer_options, is_ci, is_truthy_env


class TestIsCi:
    @pytest.mark.parametrize("value", ["1", "true", "TRUE", " yes ", "y", "on"])
    def test_truthy(self, value: str) -> None:
        assert is_ci({"CI": value})

    @pytest.mark.parametrize("value", ["", "0", "false", "no", "off", "maybe"])
    def test_falsy(self, value: str) -> None:
        assert not is_ci({"CI": value})

    def test_unset(self) -> None:
        assert not is_ci({})

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CI", "true")
        assert is_ci()
        monkeypatch.delenv("CI")
        assert not is_ci()


def test_is_truthy_env_none() -> None:
    assert not is_truthy_env(None)


class TestAnalyzerOptions:
    def test_ci(self) -> None:
        opts = analyzer_options(True)
        assert opts.summary_only is False
        assert opts.skip_formatted is True

    def test_local(self) -> None:
        opts = analyzer_options(False)
        assert opts.summary_only is True
        assert opts.skip_formatted is False
