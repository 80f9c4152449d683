# File: app/core/config/settings.py

import os
from pathlib import Path


class Settings:
    # --- Paths ---
    # app/core/config/settings.py -> app/core/config -> app/core -> app -> ROOT
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent.parent
    DATA_DIR: Path = Path(os.getenv("WORKBENCH_DATA_DIR", str(BASE_DIR / "data")))

    # --- Database ---
    POSTGRES_USER: str = os.getenv("POSTGRES_USER", "postgres")
    POSTGRES_PASSWORD: str = os.getenv("POSTGRES_PASSWORD", "password")
    POSTGRES_SERVER: str = os.getenv("POSTGRES_SERVER", "localhost")
    POSTGRES_PORT: str = os.getenv("POSTGRES_PORT", "5432")
    POSTGRES_DB: str = os.getenv("POSTGRES_DB", "workbench_db")

    @property
    def DATABASE_URL(self) -> str:
        # An explicit URL always wins (tests point this at a throwaway file).
        explicit = os.getenv("DATABASE_URL")
        if explicit:
            return explicit

        # Local workstation default is a single SQLite file.
        if os.getenv("USE_SQLITE", "true").lower() == "true":
            return f"sqlite:///{self.DATA_DIR / 'workbench.db'}"

        return f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # --- Structure Scanner ---
    STRUCTURE_IGNORE_NAMES: str = os.getenv(
        "STRUCTURE_IGNORE_NAMES",
        "node_modules,.git,dist,build,.next,__pycache__,.cache,coverage",
    )
    STRUCTURE_MAX_DEPTH: int = int(os.getenv("STRUCTURE_MAX_DEPTH", "10"))
    STRUCTURE_MAX_AGE_HOURS: float = float(os.getenv("STRUCTURE_MAX_AGE_HOURS", "24"))

    def ensure_dirs(self):
        """Creates necessary data directories if they don't exist."""
        self.DATA_DIR.mkdir(parents=True, exist_ok=True)


settings = Settings()
