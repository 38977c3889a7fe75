from __future__ import annotations

import json
import os
from dataclasses import dataclass

from result import Err, Ok

from sizeguard.config.schema import ReportConfig
from sizeguard.models.analysis import (
    SizeAnalysis,
    SnapshotError,
    SnapshotReadResult,
    SnapshotWriteResult,
)
from sizeguard.models.enums import SnapshotErrorCode
from sizeguard.services.fs import DEFAULT_FS, FileSystem


@dataclass(slots=True, frozen=True)
class SnapshotPaths:
    current: str
    previous: str


def resolve_snapshot_paths(package_dir: str, config: ReportConfig, fs: FileSystem = DEFAULT_FS) -> SnapshotPaths:
    """Locate this run's snapshot and the one downloaded from the previous run.

    The previous run's artifacts are unpacked under
    ``<runner_root>/<previous_analysis_dir>`` mirroring the layout below
    ``<runner_root>/<packages_dir>``.
    """
    package_abs = fs.absolute(fs.expanduser(package_dir))
    runner_root = fs.absolute(config.runner_root)
    current = os.path.normpath(os.path.join(package_abs, config.analysis_file))

    relative = os.path.relpath(package_abs, os.path.join(runner_root, config.packages_dir))
    previous = os.path.normpath(
        os.path.join(runner_root, config.previous_analysis_dir, relative, config.analysis_file)
    )
    return SnapshotPaths(current=current, previous=previous)


def read_snapshot(path: str, fs: FileSystem = DEFAULT_FS) -> SnapshotReadResult:
    if not fs.exists(path):
        return Err(
            SnapshotError(
                code=SnapshotErrorCode.NOT_FOUND,
                path=path,
                message=f"no such file: {path}",
            )
        )

    try:
        raw = fs.read_text(path)
    except (OSError, UnicodeDecodeError) as exc:
        return Err(SnapshotError(code=SnapshotErrorCode.READ_FAILED, path=path, message=str(exc)))

    try:
        return Ok(SizeAnalysis.from_dict(json.loads(raw)))
    except (ValueError, RecursionError) as exc:
        # json.JSONDecodeError is a ValueError subclass; deeply nested input
        # exhausts the decoder stack instead.
        return Err(
            SnapshotError(
                code=SnapshotErrorCode.MALFORMED,
                path=path,
                message=f"invalid snapshot at {path}: {exc}",
            )
        )


def write_snapshot(path: str, analysis: SizeAnalysis, fs: FileSystem = DEFAULT_FS) -> SnapshotWriteResult:
    payload = json.dumps(analysis.to_dict(), indent=2)
    try:
        parent = os.path.dirname(path)
        if parent:
            fs.make_dirs(parent)
        fs.write_text(path, payload)
    except OSError as exc:
        return Err(SnapshotError(code=SnapshotErrorCode.WRITE_FAILED, path=path, message=str(exc)))
    return Ok(path)
