# File: app/core/common/enums.py

from enum import Enum, unique

@unique
class NodeType(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"

@unique
class ProjectStatus(str, Enum):
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"
