from __future__ import annotations

import json

from result import Err, Ok

from sizeguard.config.loader import load_config, sample_config_json
from tests.fs_mock import MemoryFileSystem


class TestLoadConfig:
    def test_missing_uses_defaults(self) -> None:
        result = load_config(fs=MemoryFileSystem())
        assert isinstance(result, Ok)
        assert result.unwrap().absolute_byte_threshold == 100

    def test_reads_default_path_from_cwd(self) -> None:
        fs = MemoryFileSystem()
        fs.add_file("/mock/cwd/sizeguard.json", content=json.dumps({"percentThreshold": 3}))
        result = load_config(fs=fs)
        assert isinstance(result, Ok)
        assert result.unwrap().percent_threshold == 3.0

    def test_custom_path(self) -> None:
        fs = MemoryFileSystem()
        fs.add_file("/custom/config.json", content=json.dumps({"absoluteByteThreshold": 5}))
        result = load_config(path="/custom/config.json", fs=fs)
        assert isinstance(result, Ok)
        assert result.unwrap().absolute_byte_threshold == 5

    def test_home_path_expanded(self) -> None:
        fs = MemoryFileSystem()
        fs.add_file("/mock/home/sg.json", content=json.dumps({"runnerRoot": "/ci"}))
        result = load_config(path="~/sg.json", fs=fs)
        assert result.unwrap().runner_root == "/ci"

    def test_non_dict_json_returns_err(self) -> None:
        fs = MemoryFileSystem()
        fs.add_file("/mock/cwd/sizeguard.json", content=json.dumps([1, 2, 3]))
        result = load_config(fs=fs)
        assert isinstance(result, Err)
        assert "must be a JSON object" in result.unwrap_err()

    def test_invalid_json_returns_err(self) -> None:
        fs = MemoryFileSystem()
        fs.add_file("/mock/cwd/sizeguard.json", content="not-json")
        result = load_config(fs=fs)
        assert isinstance(result, Err)
        assert "is not valid JSON" in result.unwrap_err()

    def test_bad_value_returns_err(self) -> None:
        fs = MemoryFileSystem()
        fs.add_file("/mock/cwd/sizeguard.json", content=json.dumps({"absoluteByteThreshold": "lots"}))
        result = load_config(fs=fs)
        assert isinstance(result, Err)
        assert "absoluteByteThreshold must be a number" in result.unwrap_err()

    def test_unreadable_returns_err(self) -> None:
        fs = MemoryFileSystem()
        fs.add_file("/mock/cwd/sizeguard.json", content="{}")
        fs.unreadable.add("/mock/cwd/sizeguard.json")
        result = load_config(fs=fs)
        assert isinstance(result, Err)
        assert result.unwrap_err().startswith("Failed reading config at")

    def test_null_path_names_key(self) -> None:
        fs = MemoryFileSystem()
        fs.add_file("/mock/cwd/sizeguard.json", content=json.dumps({"analysisFile": None}))
        result = load_config(fs=fs)
        assert isinstance(result, Err)
        assert "analysisFile must be a non-empty string" in result.unwrap_err()


def test_sample_config_json_is_valid() -> None:
    parsed = json.loads(sample_config_json())
    assert parsed["absoluteByteThreshold"] == 100
    assert parsed["percentThreshold"] == 1.0
