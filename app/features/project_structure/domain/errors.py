# File: app/features/project_structure/domain/errors.py


class StructureError(Exception):
    """Base class for every failure raised by the structure scanner."""


class InvalidProjectIdError(StructureError, ValueError):
    pass


class ProjectNotFoundError(StructureError, LookupError):
    def __init__(self, project_id: str):
        self.project_id = project_id
        super().__init__(f'Project with ID "{project_id}" not found')


class PathInaccessibleError(StructureError):
    """The project root does not exist or cannot be read."""

    def __init__(self, path):
        self.path = path
        super().__init__(f'Project path "{path}" is not accessible')


class ScanFailedError(StructureError):
    """
    The walk hit a filesystem error after the root check passed.
    Always chained to the underlying OSError.
    """

    def __init__(self, path, reason: str):
        self.path = path
        super().__init__(f"Failed to scan directory {path}: {reason}")


class StructureConsistencyError(StructureError):
    """The store rejected a write for a live project, or lost a record it just wrote."""
