# File: app/core/database/schema.py

import logging
from sqlalchemy_utils import database_exists, create_database
from .base import Base
from .connection import engine

logger = logging.getLogger(__name__)

def init_db(bind=engine):
    """
    Creates the database (if missing) and every registered table.
    Safe to call repeatedly.
    """
    if not database_exists(bind.url):
        logger.info(f"Creating database {bind.url.database}")
        create_database(bind.url)

    # Import all models to ensure they are registered
    import app.features.projects.data.sql_models
    import app.features.project_structure.data.sql_models

    Base.metadata.create_all(bind=bind)
