import logging
import threading
import weakref
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional
from sqlalchemy.exc import IntegrityError

from ..data.local_fs import LocalFileSystem
from ..data.project_resolver import SqlProjectResolver
from ..data.repository import SqlStructureRepo
from ..data.tree_walker import DirectoryWalker
from ..domain.errors import (
    InvalidProjectIdError,
    PathInaccessibleError,
    ScanFailedError,
    StructureConsistencyError,
)
from ..domain.interfaces import IFileSystem, IProjectResolver, IStructureRepository
from ..domain.models import ScannerConfig, StructureRecord, summarize
from ..domain.staleness import needs_rescan

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ProjectLocks:
    """
    One lock per project ID, created on first use.
    Serializes scans of the same project; different projects never contend.
    Locks are held weakly, so IDs nobody is scanning any more do not pile up.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks = weakref.WeakValueDictionary()

    def for_project(self, project_id: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(project_id)
            if lock is None:
                lock = self._locks[project_id] = threading.Lock()
            return lock


class StructureScanner:
    """
    Scan Coordinator.
    Resolves a project to its root folder, walks it, and keeps exactly one
    cached StructureRecord per project, refreshed by age.
    """

    def __init__(self,
                 resolver: IProjectResolver = None,
                 fs: IFileSystem = None,
                 repo: IStructureRepository = None,
                 config: ScannerConfig = None,
                 clock: Callable[[], datetime] = utc_now):
        # In a full DI framework, these would be injected.
        self.resolver = resolver or SqlProjectResolver()
        self.fs = fs or LocalFileSystem()
        self.repo = repo or SqlStructureRepo()
        self.config = config or ScannerConfig()
        self.clock = clock
        self.walker = DirectoryWalker(self.fs, self.config)
        self.locks = ProjectLocks()

    def scan(self, project_id: str) -> StructureRecord:
        """
        Unconditional refresh.

        Raises:
            ProjectNotFoundError: unknown project.
            PathInaccessibleError: root folder missing or unreadable.
            ScanFailedError: filesystem error during the walk.
            StructureConsistencyError: the store rejected or lost the write.
        Any stored record survives all of these untouched.
        """
        self._validate(project_id)
        with self.locks.for_project(project_id):
            return self._refresh(project_id)

    def get(self, project_id: str) -> Optional[StructureRecord]:
        """Stored record, or None if the project was never scanned."""
        self._validate(project_id)
        return self.repo.get_by_project_id(project_id)

    def get_for_project(self, project_id: str, max_age: Optional[timedelta] = None) -> StructureRecord:
        """
        Self-healing read: returns the cached record while it is younger than
        max_age (default from config), otherwise rescans first.
        """
        self._validate(project_id)
        if max_age is None:
            max_age = self.config.default_max_age
        if max_age < timedelta(0):
            raise ValueError(f"max_age cannot be negative (got {max_age}).")

        existing = self.repo.get_by_project_id(project_id)
        if not self._is_stale(existing, max_age):
            logger.debug(f"Structure cache hit for project {project_id}")
            return existing

        with self.locks.for_project(project_id):
            # Another caller may have refreshed it while we waited
            existing = self.repo.get_by_project_id(project_id)
            if not self._is_stale(existing, max_age):
                return existing

            reason = "missing" if existing is None else "stale"
            logger.info(f"Structure for project {project_id} is {reason}, rescanning.")
            return self._refresh(project_id)

    def _is_stale(self, record: Optional[StructureRecord], max_age: timedelta) -> bool:
        last_scanned = record.last_scanned if record else None
        return needs_rescan(last_scanned, self.clock(), max_age)

    def _refresh(self, project_id: str) -> StructureRecord:
        # 1. Resolve Project -> Root Folder
        root = self.resolver.resolve(project_id)

        # 2. Validate path exists and is accessible
        if not self.fs.is_accessible(root):
            logger.error(f"Project {project_id}: root {root} is not accessible.")
            raise PathInaccessibleError(root)

        # 3. Walk (all or nothing)
        logger.info(f"📂 Scanning project {project_id} at {root}")
        try:
            file_tree = self.walker.walk(root)
        except OSError as e:
            logger.error(f"Project {project_id}: scan of {root} failed: {e}")
            raise ScanFailedError(root, str(e)) from e

        # 4. Persist (tree and timestamp always travel together)
        try:
            self.repo.upsert(project_id, file_tree, self.clock())
        except IntegrityError as e:
            # The project may have been removed while we were walking
            logger.error(f"Project {project_id}: could not store structure: {e}")
            self.resolver.resolve(project_id)
            raise StructureConsistencyError(
                f"Failed to store structure for project {project_id}"
            ) from e

        # 5. Re-read the authoritative copy
        record = self.repo.get_by_project_id(project_id)
        if record is None:
            raise StructureConsistencyError(
                f"Failed to retrieve structure for project {project_id} after scan"
            )

        summary = summarize(record.file_tree)
        logger.info(
            f"Scan complete for {project_id}: "
            f"{summary.directory_count} dirs, {summary.file_count} files."
        )
        return record

    @staticmethod
    def _validate(project_id: str):
        if not project_id or not str(project_id).strip():
            raise InvalidProjectIdError("Project ID is required")
