import logging
from pathlib import Path
from typing import FrozenSet, List, Optional
from ..domain.interfaces import IFileSystem
from ..domain.models import FileNode, FileStat, ScannerConfig
from .ignore_rules import IgnoreRules

logger = logging.getLogger(__name__)

_DIRECTORY = FileStat(is_directory=True, size=0)


def sort_children(children: List[FileNode]) -> List[FileNode]:
    """
    Directories first, then files. Each group by name, plain code-point order
    (case-sensitive, same result on every machine).
    """
    return sorted(children, key=lambda node: (0 if node.is_directory else 1, node.name))


class DirectoryWalker:
    """
    Builds an immutable FileNode snapshot of a directory.

    - Ignored and hidden names are dropped at every level.
    - Directories deeper than config.max_depth come back with no children.
    - A directory that loops back onto one of its own ancestors (symlink cycle)
      also comes back with no children.
    - Any OSError propagates and aborts the whole walk.
    - Only the root and file entries are stat-ed; the listing already says
      which children are directories.
    """

    def __init__(self, fs: IFileSystem, config: ScannerConfig):
        self.fs = fs
        self.config = config
        self.rules = IgnoreRules(config)

    def walk(self, root: Path, depth: int = 0) -> FileNode:
        return self._walk(Path(root).absolute(), depth, frozenset())

    def _walk(self, path: Path, depth: int, ancestors: FrozenSet[Path],
              info: Optional[FileStat] = None) -> FileNode:
        if info is None:
            info = self.fs.stat(path)
        # Path("/").name is empty
        name = path.name or str(path)

        # 1. Files
        if not info.is_directory:
            return FileNode.file(name, str(path), info.size)

        # 2. Depth bound reached: truncate, don't fail
        if depth > self.config.max_depth:
            return FileNode.directory(name, str(path))

        # 3. Symlink cycle guard
        real = self.fs.real_path(path)
        if real in ancestors:
            logger.warning(f"Symlink cycle at {path} -> {real}, not expanding.")
            return FileNode.directory(name, str(path))

        # 4. Recurse into the remaining entries
        below = ancestors | {real}
        children = [
            self._walk(path / entry.name, depth + 1, below, _DIRECTORY if entry.is_directory else None)
            for entry in self.fs.list_entries(path)
            if not self.rules.should_ignore(entry.name)
        ]

        return FileNode.directory(name, str(path), sort_children(children))
