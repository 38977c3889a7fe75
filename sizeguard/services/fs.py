from __future__ import annotations

import os
from typing import Protocol, override


class FileSystem(Protocol):
    def expanduser(self, path: str) -> str: ...

    def absolute(self, path: str) -> str: ...

    def exists(self, path: str) -> bool: ...

    def read_text(self, path: str) -> str: ...

    def write_text(self, path: str, content: str) -> None: ...

    def make_dirs(self, path: str) -> None: ...


class OsFileSystem(FileSystem):
    """FileSystem backed by the real OS."""

    @override
    def expanduser(self, path: str) -> str:
        return os.path.expanduser(path)

    @override
    def absolute(self, path: str) -> str:
        return os.path.abspath(path)

    @override
    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    @override
    def read_text(self, path: str) -> str:
        with open(path, encoding="utf-8") as handle:
            return handle.read()

    @override
    def write_text(self, path: str, content: str) -> None:
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(content)

    @override
    def make_dirs(self, path: str) -> None:
        os.makedirs(path, exist_ok=True)


DEFAULT_FS: FileSystem = OsFileSystem()
