# File: app/features/project_structure/domain/staleness.py
from datetime import datetime, timedelta
from typing import Optional


def needs_rescan(last_scanned: Optional[datetime], now: datetime, max_age: timedelta) -> bool:
    """
    Decides whether a cached structure must be rebuilt.

    - No previous scan: rescan.
    - A zero (or negative) max age: always rescan.
    - Otherwise rescan only once the age is strictly greater than max_age.
    """
    if last_scanned is None:
        return True
    if max_age <= timedelta(0):
        return True
    return now - last_scanned > max_age
