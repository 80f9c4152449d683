import threading
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Dict, List, Optional

from app.features.project_structure.data.local_fs import LocalFileSystem
from app.features.project_structure.domain.errors import ProjectNotFoundError
from app.features.project_structure.domain.interfaces import IProjectResolver, IStructureRepository
from app.features.project_structure.domain.models import (
    FileNode, StructureRecord, generate_structure_id
)


class DictResolver(IProjectResolver):
    def __init__(self, paths: Dict[str, Path] = None):
        self.paths = dict(paths or {})

    def resolve(self, project_id: str) -> Path:
        if project_id not in self.paths:
            raise ProjectNotFoundError(project_id)
        return self.paths[project_id]


class InMemoryStructureRepo(IStructureRepository):
    """
    Dict-backed store keyed by project_id (so uniqueness holds by construction).
    Counts writes so tests can tell whether a rescan happened.
    """

    def __init__(self):
        self.rows: Dict[str, StructureRecord] = {}
        self.inserts = 0
        self.updates = 0
        self._lock = threading.Lock()

    def get_by_project_id(self, project_id: str) -> Optional[StructureRecord]:
        return self.rows.get(project_id)

    def insert(self, record: StructureRecord) -> None:
        with self._lock:
            if record.project_id in self.rows:
                raise ValueError(f"duplicate project_id {record.project_id}")
            self.rows[record.project_id] = record
            self.inserts += 1

    def update_by_project_id(self, project_id: str, file_tree: FileNode, last_scanned: datetime) -> bool:
        with self._lock:
            existing = self.rows.get(project_id)
            if existing is None:
                return False
            self.rows[project_id] = StructureRecord(
                id=existing.id,
                project_id=project_id,
                file_tree=file_tree,
                last_scanned=last_scanned,
                dependencies=existing.dependencies,
                components=existing.components,
            )
            self.updates += 1
            return True

    def upsert(self, project_id: str, file_tree: FileNode, last_scanned: datetime) -> None:
        if not self.update_by_project_id(project_id, file_tree, last_scanned):
            self.insert(StructureRecord(
                id=generate_structure_id(),
                project_id=project_id,
                file_tree=file_tree,
                last_scanned=last_scanned,
            ))

    @property
    def writes(self) -> int:
        return self.inserts + self.updates


class LosingRepo(InMemoryStructureRepo):
    """Accepts writes but never gives them back."""

    def get_by_project_id(self, project_id: str) -> Optional[StructureRecord]:
        return None


class RecordingFileSystem(LocalFileSystem):
    """
    Real filesystem that logs every call and can be told to fail on a path.
    """

    def __init__(self, fail_on: Optional[Path] = None):
        self.calls: List[str] = []
        self.fail_on = fail_on

    def _check(self, op: str, path: Path):
        self.calls.append(f"{op}:{path}")
        if self.fail_on is not None and Path(path) == self.fail_on:
            raise PermissionError(13, "Permission denied", str(path))

    def is_accessible(self, path: Path) -> bool:
        self.calls.append(f"access:{path}")
        return super().is_accessible(path)

    def stat(self, path: Path):
        self._check("stat", path)
        return super().stat(path)

    def list_entries(self, path: Path):
        self._check("list", path)
        return super().list_entries(path)


class FakeClock:
    def __init__(self, start: datetime = None):
        self.now = start or datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)

