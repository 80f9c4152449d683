# File: app/features/projects/data/sql_models.py
import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, Text, DateTime, Enum as SQLEnum
from app.core.database.base import Base
from app.core.common.enums import ProjectStatus

def utc_now():
    return datetime.now(timezone.utc)

def generate_project_id() -> str:
    return f"proj_{uuid.uuid4().hex[:12]}"

class ProjectModel(Base):
    """
    A registered workspace on the host filesystem.
    Only the columns the structure scanner relies on are modelled here.
    Deleting a row cascades to its project_structure row at the database level.
    """
    __tablename__ = "projects"

    id = Column(String, primary_key=True, default=generate_project_id)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    root_path = Column(String, nullable=False, unique=True)
    status = Column(SQLEnum(ProjectStatus), default=ProjectStatus.ACTIVE, nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), default=utc_now)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now)
