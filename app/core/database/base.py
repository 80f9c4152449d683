# File: app/core/database/base.py

from sqlalchemy.orm import declarative_base

# The shared registry. Project and ProjectStructure models inherit from this.
Base = declarative_base()
