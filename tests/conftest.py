# File: tests/conftest.py

import pytest
import os
import sys
import tempfile
import sqlalchemy
from sqlalchemy import text

# 1. Add project root to path
sys.path.append(os.getcwd())

# 2. Point the app at a throwaway database BEFORE settings are imported
os.environ.setdefault(
    "DATABASE_URL",
    f"sqlite:///{os.path.join(tempfile.gettempdir(), f'workbench_test_{os.getpid()}.db')}"
)

from app.core.database.connection import engine as TEST_ENGINE
from app.core.database.schema import init_db


@pytest.fixture(scope="session", autouse=True)
def global_setup():
    """
    Runs once per test session.
    Ensures DB exists and all tables are created.
    """
    init_db(TEST_ENGINE)

    yield

    TEST_ENGINE.dispose()


@pytest.fixture(scope="function", autouse=True)
def clean_db(global_setup):
    """
    Runs before EVERY test.
    Detects DB type and cleans tables appropriately.
    """
    with TEST_ENGINE.connect() as conn:
        trans = conn.begin()

        is_sqlite = "sqlite" in str(TEST_ENGINE.url)
        table_names = sqlalchemy.inspect(TEST_ENGINE).get_table_names()

        if table_names:
            if is_sqlite:
                # No TRUNCATE in SQLite; child table first keeps the FK happy
                for table in ("project_structure", "projects"):
                    if table in table_names:
                        conn.execute(text(f'DELETE FROM "{table}";'))
            else:
                conn.execute(text("SET session_replication_role = 'replica';"))
                for table in table_names:
                    conn.execute(text(f'TRUNCATE TABLE "{table}" CASCADE;'))
                conn.execute(text("SET session_replication_role = 'origin';"))

        trans.commit()

    yield
