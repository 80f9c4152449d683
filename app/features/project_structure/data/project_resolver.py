from pathlib import Path

# Cross-Feature Import (the project registry owns the root paths)
from app.features.projects.data.repository import ProjectRepo

from ..domain.errors import ProjectNotFoundError
from ..domain.interfaces import IProjectResolver

class SqlProjectResolver(IProjectResolver):
    def __init__(self, projects: ProjectRepo = None):
        self.projects = projects or ProjectRepo()

    def resolve(self, project_id: str) -> Path:
        root_path = self.projects.get_root_path(project_id)
        if root_path is None:
            raise ProjectNotFoundError(project_id)
        return Path(root_path)
