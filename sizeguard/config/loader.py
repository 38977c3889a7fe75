from __future__ import annotations

import json

from result import Err, Ok, Result

from sizeguard.config.defaults import default_config
from sizeguard.config.schema import ReportConfig
from sizeguard.services.fs import DEFAULT_FS, FileSystem

CONFIG_PATH = "sizeguard.json"


def load_config(path: str | None = None, fs: FileSystem = DEFAULT_FS) -> Result[ReportConfig, str]:
    """Load the sizeguard config at *path* (default ``./sizeguard.json``).

    A missing file yields the defaults. Unreadable files, invalid JSON and
    bad key values come back as ``Err`` messages naming the file and key.
    """
    resolved = fs.expanduser(path or CONFIG_PATH)
    if not fs.exists(resolved):
        return Ok(default_config())

    try:
        text = fs.read_text(resolved)
    except (OSError, UnicodeDecodeError) as exc:
        return Err(f"Failed reading config at {resolved}: {exc}.")

    try:
        payload = json.loads(text)
    except (ValueError, RecursionError) as exc:
        return Err(f"Config at {resolved} is not valid JSON: {exc}.")
    if not isinstance(payload, dict):
        return Err(f"Config at {resolved} must be a JSON object.")

    try:
        return Ok(ReportConfig.from_dict(payload, default_config()))
    except ValueError as exc:
        return Err(f"Invalid sizeguard config at {resolved}: {exc}.")


def sample_config_json() -> str:
    return json.dumps(default_config().to_dict(), indent=2)
