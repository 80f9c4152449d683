from sqlalchemy import Column, String, DateTime, ForeignKey, JSON
from app.core.database.base import Base
# Cross-Feature Import (registers the "projects" table the foreign key points at)
import app.features.projects.data.sql_models  # noqa: F401

class ProjectStructureModel(Base):
    """
    Cached directory snapshot. Exactly one row per project (UNIQUE project_id).
    The id is always supplied by the repository (struct_<millis>_<suffix>).
    """
    __tablename__ = "project_structure"

    id = Column(String, primary_key=True)
    project_id = Column(
        String,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True
    )

    file_tree = Column(JSON, nullable=False)        # Serialized FileNode
    dependencies = Column(JSON, nullable=False, default=dict)  # Reserved
    components = Column(JSON, nullable=False, default=list)    # Reserved

    last_scanned = Column(DateTime(timezone=True), nullable=False)
