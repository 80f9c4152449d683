from datetime import datetime, timezone
from typing import Optional
from sqlalchemy.exc import IntegrityError
from app.core.database.connection import SessionLocal
from .sql_models import ProjectStructureModel
from ..domain.interfaces import IStructureRepository
from ..domain.models import FileNode, StructureRecord, generate_structure_id


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone=True columns
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_record(row: ProjectStructureModel) -> StructureRecord:
    return StructureRecord(
        id=row.id,
        project_id=row.project_id,
        file_tree=FileNode.from_dict(row.file_tree),
        last_scanned=_as_utc(row.last_scanned),
        dependencies=dict(row.dependencies or {}),
        components=list(row.components or []),
    )


class SqlStructureRepo(IStructureRepository):
    """
    Structure Store backed by the project_structure table.
    Relies on the UNIQUE(project_id) constraint to keep one row per project.
    """

    def __init__(self, session_factory=SessionLocal):
        self.session_factory = session_factory

    def get_by_project_id(self, project_id: str) -> Optional[StructureRecord]:
        with self.session_factory() as db:
            row = db.query(ProjectStructureModel).filter(
                ProjectStructureModel.project_id == project_id
            ).first()
            return to_record(row) if row else None

    def insert(self, record: StructureRecord) -> None:
        with self.session_factory() as db:
            try:
                db.add(ProjectStructureModel(
                    id=record.id,
                    project_id=record.project_id,
                    file_tree=record.file_tree.to_dict(),
                    dependencies=dict(record.dependencies),
                    components=list(record.components),
                    last_scanned=record.last_scanned
                ))
                db.commit()
            except Exception as e:
                db.rollback()
                raise e

    def update_by_project_id(self, project_id: str, file_tree: FileNode, last_scanned: datetime) -> bool:
        """
        Single UPDATE statement, so the tree and its timestamp always change together.
        """
        with self.session_factory() as db:
            try:
                updated = db.query(ProjectStructureModel).filter(
                    ProjectStructureModel.project_id == project_id
                ).update(
                    {
                        ProjectStructureModel.file_tree: file_tree.to_dict(),
                        ProjectStructureModel.last_scanned: last_scanned,
                    },
                    synchronize_session=False
                )
                db.commit()
                return updated > 0
            except Exception as e:
                db.rollback()
                raise e

    def upsert(self, project_id: str, file_tree: FileNode, last_scanned: datetime) -> None:
        """
        Transactional logic:
        1. Update the existing row if there is one (id stays the same).
        2. Otherwise insert a fresh row with empty reserved fields.
        3. If a concurrent writer inserted first, the unique constraint
           rejects us; fall back to the update path.
        """
        if self.update_by_project_id(project_id, file_tree, last_scanned):
            return

        record = StructureRecord(
            id=generate_structure_id(),
            project_id=project_id,
            file_tree=file_tree,
            last_scanned=last_scanned,
        )
        try:
            self.insert(record)
        except IntegrityError:
            if not self.update_by_project_id(project_id, file_tree, last_scanned):
                # The conflicting row is gone again, or the project itself is missing
                raise
