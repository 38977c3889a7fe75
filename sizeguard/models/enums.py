from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    NOTICE = "notice"
    ERROR = "error"


class SnapshotErrorCode(str, Enum):
    NOT_FOUND = "not_found"
    MALFORMED = "malformed"
    READ_FAILED = "read_failed"
    WRITE_FAILED = "write_failed"
