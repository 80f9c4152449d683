# File: app/features/project_structure/domain/interfaces.py
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from .models import DirEntry, FileNode, FileStat, StructureRecord


class IFileSystem(ABC):
    """
    Contract for the host filesystem primitives the walker needs.
    """

    @abstractmethod
    def is_accessible(self, path: Path) -> bool:
        """True if the path exists and can be read."""
        pass

    @abstractmethod
    def stat(self, path: Path) -> FileStat:
        """Follows symlinks. Raises OSError on failure."""
        pass

    @abstractmethod
    def list_entries(self, path: Path) -> List[DirEntry]:
        """
        Immediate children of a directory, in no particular order.
        is_directory follows symlinks, so callers need not stat directory entries.
        """
        pass

    @abstractmethod
    def real_path(self, path: Path) -> Path:
        """Canonical path with every symlink resolved."""
        pass


class IProjectResolver(ABC):
    @abstractmethod
    def resolve(self, project_id: str) -> Path:
        """
        Maps a project ID to its root directory.
        Raises ProjectNotFoundError for unknown IDs.
        """
        pass


class IStructureRepository(ABC):
    """
    Contract for StructureRecord persistence.
    Implementations must enforce one record per project_id.
    """

    @abstractmethod
    def get_by_project_id(self, project_id: str) -> Optional[StructureRecord]:
        pass

    @abstractmethod
    def insert(self, record: StructureRecord) -> None:
        pass

    @abstractmethod
    def update_by_project_id(self, project_id: str, file_tree: FileNode, last_scanned: datetime) -> bool:
        """
        Replaces file_tree and last_scanned together.
        Returns False if no record exists for the project.
        """
        pass

    @abstractmethod
    def upsert(self, project_id: str, file_tree: FileNode, last_scanned: datetime) -> None:
        """
        Insert-or-update keyed by project_id.
        Creates the record with a fresh ID and empty reserved fields when absent.
        Must never leave two rows for one project or a half-written row.
        """
        pass
