# File: app/features/projects/data/repository.py
from pathlib import Path
from typing import Optional
from app.core.database.connection import SessionLocal
from .sql_models import ProjectModel

class ProjectRepo:
    """
    Thin persistence helper for the project registry.
    """

    def __init__(self, session_factory=SessionLocal):
        self.session_factory = session_factory

    def create_project(self, name: str, root_path: Path, description: Optional[str] = None) -> str:
        with self.session_factory() as db:
            project = ProjectModel(
                name=name,
                description=description,
                root_path=str(root_path)
            )
            db.add(project)
            db.commit()
            db.refresh(project)
            return project.id

    def get_root_path(self, project_id: str) -> Optional[str]:
        with self.session_factory() as db:
            project = db.get(ProjectModel, project_id)
            return project.root_path if project else None

    def delete_project(self, project_id: str) -> bool:
        """
        Removes the project. Its cached structure goes with it (cascade).
        """
        with self.session_factory() as db:
            project = db.get(ProjectModel, project_id)
            if not project:
                return False
            db.delete(project)
            db.commit()
            return True
