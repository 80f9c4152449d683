# File: app/features/project_structure/service/api.py
from datetime import timedelta
from typing import Optional

from app.core.config.settings import settings
from ..domain.models import ScannerConfig, StructureRecord
from .scanner import StructureScanner

# Singleton Instance for easy import (holds the per-project locks)
structure_scanner = StructureScanner(config=ScannerConfig.from_settings(settings))


def scan_structure(project_id: str) -> StructureRecord:
    """
    Public API: Rescans a project now and returns the stored record.
    """
    return structure_scanner.scan(project_id)


def get_structure(project_id: str) -> Optional[StructureRecord]:
    """
    Public API: Cached record for a project, or None. Never touches the filesystem.
    """
    return structure_scanner.get(project_id)


def get_structure_for_project(project_id: str, max_age_hours: Optional[float] = None) -> StructureRecord:
    """
    Public API: Cached record, rescanned first if it is missing or older
    than max_age_hours (default from settings).
    """
    max_age = timedelta(hours=max_age_hours) if max_age_hours is not None else None
    return structure_scanner.get_for_project(project_id, max_age)
