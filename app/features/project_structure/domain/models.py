# File: app/features/project_structure/domain/models.py
import random
import string
import time
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Dict, FrozenSet, Iterator, List, Optional, Tuple

from app.core.common.enums import NodeType

DEFAULT_IGNORE_NAMES = frozenset({
    "node_modules", ".git", "dist", "build", ".next",
    "__pycache__", ".cache", "coverage"
})

_BASE36 = string.digits + string.ascii_lowercase


def generate_structure_id() -> str:
    """
    Format: struct_<epoch_millis>_<6 random base36 chars>
    """
    timestamp = int(time.time() * 1000)
    suffix = "".join(random.choices(_BASE36, k=6))
    return f"struct_{timestamp}_{suffix}"


@dataclass(frozen=True)
class ScannerConfig:
    """
    Knobs for the Directory Walker and the Staleness Policy.
    Passed explicitly so tests can shrink the depth bound or the max age.
    """
    ignore_names: FrozenSet[str] = DEFAULT_IGNORE_NAMES
    max_depth: int = 10
    default_max_age: timedelta = timedelta(hours=24)

    def __post_init__(self):
        if self.max_depth < 0:
            raise ValueError(f"max_depth cannot be negative (got {self.max_depth}).")
        if self.default_max_age < timedelta(0):
            raise ValueError("default_max_age cannot be negative.")
        # Accept any iterable of names but always store a frozenset
        object.__setattr__(self, "ignore_names", frozenset(self.ignore_names))

    @classmethod
    def from_settings(cls, settings) -> "ScannerConfig":
        names = [n.strip() for n in settings.STRUCTURE_IGNORE_NAMES.split(",") if n.strip()]
        return cls(
            ignore_names=frozenset(names),
            max_depth=settings.STRUCTURE_MAX_DEPTH,
            default_max_age=timedelta(hours=settings.STRUCTURE_MAX_AGE_HOURS),
        )


@dataclass(frozen=True)
class FileNode:
    """
    One entry of a scanned directory snapshot.
    Files carry `size`, directories carry `children`; never both.
    """
    name: str
    path: str
    type: NodeType
    size: Optional[int] = None
    children: Optional[Tuple["FileNode", ...]] = None

    @property
    def is_directory(self) -> bool:
        return self.type == NodeType.DIRECTORY

    @classmethod
    def file(cls, name: str, path: str, size: int) -> "FileNode":
        return cls(name=name, path=path, type=NodeType.FILE, size=size)

    @classmethod
    def directory(cls, name: str, path: str, children=()) -> "FileNode":
        return cls(name=name, path=path, type=NodeType.DIRECTORY, children=tuple(children))

    def iter_nodes(self) -> Iterator["FileNode"]:
        """Pre-order traversal, the node itself first."""
        yield self
        for child in self.children or ():
            yield from child.iter_nodes()

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": self.name, "path": self.path, "type": self.type.value}
        if self.is_directory:
            data["children"] = [child.to_dict() for child in self.children or ()]
        else:
            data["size"] = self.size
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FileNode":
        node_type = NodeType(data["type"])
        if node_type == NodeType.DIRECTORY:
            return cls.directory(
                data["name"],
                data["path"],
                [cls.from_dict(child) for child in data.get("children") or []]
            )
        return cls.file(data["name"], data["path"], int(data.get("size") or 0))


@dataclass(frozen=True)
class TreeSummary:
    file_count: int
    directory_count: int
    total_size: int
    max_depth: int


def summarize(root: FileNode) -> TreeSummary:
    """
    Counts nodes of each type below (and including) the root.
    max_depth is the deepest level that holds a node, root = 0.
    """
    files = dirs = total = deepest = 0
    stack: List[Tuple[FileNode, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        if node.is_directory:
            dirs += 1
            stack.extend((child, depth + 1) for child in node.children or ())
        else:
            files += 1
            total += node.size or 0
    return TreeSummary(file_count=files, directory_count=dirs, total_size=total, max_depth=deepest)


@dataclass(frozen=True)
class StructureRecord:
    """
    The cached structure of one project.
    `dependencies` and `components` are reserved for later analysis passes.
    """
    id: str
    project_id: str
    file_tree: FileNode
    last_scanned: datetime
    dependencies: Dict[str, Any] = field(default_factory=dict)
    components: List[Any] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "project_id": self.project_id,
            "file_tree": self.file_tree.to_dict(),
            "dependencies": dict(self.dependencies),
            "components": list(self.components),
            "last_scanned": self.last_scanned.isoformat(),
        }


@dataclass(frozen=True)
class FileStat:
    is_directory: bool
    size: int


@dataclass(frozen=True)
class DirEntry:
    name: str
    is_directory: bool
