from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from result import Result

from sizeguard.models.enums import SnapshotErrorCode


def _byte_count(value: Any, what: str) -> int:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        msg = f"{what} must be a number, got {type(value).__name__}"
        raise ValueError(msg)
    if isinstance(value, float):
        if not value.is_integer():
            msg = f"{what} must be a whole number of bytes, got {value}"
            raise ValueError(msg)
        value = int(value)
    if value < 0:
        msg = f"{what} must be non-negative, got {value}"
        raise ValueError(msg)
    return value


@dataclass(slots=True, frozen=True)
class ModuleSize:
    id: str
    size: int

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "size": self.size}

    @classmethod
    def from_dict(cls, payload: Any) -> ModuleSize:
        if not isinstance(payload, dict):
            msg = f"module entry must be an object, got {type(payload).__name__}"
            raise ValueError(msg)
        module_id = payload.get("id")
        if not isinstance(module_id, str):
            msg = f"module id must be a string, got {module_id!r}"
            raise ValueError(msg)
        return cls(id=module_id, size=_byte_count(payload.get("size"), f"size of module {module_id!r}"))


@dataclass(slots=True, frozen=True)
class SizeAnalysis:
    """One measurement of a built bundle.

    Only ``bundleSize`` and ``modules[].id/size`` are read from analyzer
    output; any other keys the analyzer emits are ignored.
    """

    bundle_size: int
    modules: tuple[ModuleSize, ...] = ()

    def module_index(self) -> dict[str, ModuleSize]:
        index: dict[str, ModuleSize] = {}
        for module in self.modules:
            # First occurrence wins if ids were not validated.
            index.setdefault(module.id, module)
        return index

    def to_dict(self) -> dict[str, Any]:
        return {
            "bundleSize": self.bundle_size,
            "modules": [module.to_dict() for module in self.modules],
        }

    @classmethod
    def from_dict(cls, payload: Any) -> SizeAnalysis:
        """Build an analysis from decoded JSON.

        Raises ``ValueError`` when the payload does not match the snapshot
        schema or when module ids repeat.
        """
        if not isinstance(payload, dict):
            msg = f"analysis must be a JSON object, got {type(payload).__name__}"
            raise ValueError(msg)
        bundle_size = _byte_count(payload.get("bundleSize"), "bundleSize")

        modules_raw = payload.get("modules", [])
        if not isinstance(modules_raw, list):
            msg = f"modules must be a list, got {type(modules_raw).__name__}"
            raise ValueError(msg)
        modules = tuple(ModuleSize.from_dict(item) for item in modules_raw)

        seen: set[str] = set()
        for module in modules:
            if module.id in seen:
                msg = f"duplicate module id {module.id!r}"
                raise ValueError(msg)
            seen.add(module.id)

        return cls(bundle_size=bundle_size, modules=modules)


@dataclass(slots=True, frozen=True)
class Difference:
    absolute: int
    percent: float


@dataclass(slots=True, frozen=True)
class DiffEntry:
    """One row of an analysis diff.

    Compared entries carry a ``difference``; new-module entries carry only the
    module's current ``size``.
    """

    label: str
    size: int
    difference: Difference | None = None
    is_new: bool = False

    @classmethod
    def compared(cls, label: str, size: int, difference: Difference) -> DiffEntry:
        return cls(label=label, size=size, difference=difference, is_new=False)

    @classmethod
    def new_module(cls, label: str, size: int) -> DiffEntry:
        return cls(label=label, size=size, difference=None, is_new=True)


@dataclass(slots=True, frozen=True)
class SnapshotError:
    code: SnapshotErrorCode
    path: str
    message: str


SnapshotReadResult = Result[SizeAnalysis, SnapshotError]
SnapshotWriteResult = Result[str, SnapshotError]
