import os
import stat as stat_module
from pathlib import Path
from typing import List
from ..domain.interfaces import IFileSystem
from ..domain.models import DirEntry, FileStat

class LocalFileSystem(IFileSystem):
    """
    Host filesystem adapter built on os.stat / os.scandir.
    Errors are not caught here; the walker decides what a failure means.
    """

    def is_accessible(self, path: Path) -> bool:
        return os.path.exists(path) and os.access(path, os.R_OK)

    def stat(self, path: Path) -> FileStat:
        st = os.stat(path)
        return FileStat(is_directory=stat_module.S_ISDIR(st.st_mode), size=st.st_size)

    def list_entries(self, path: Path) -> List[DirEntry]:
        with os.scandir(path) as it:
            return [DirEntry(name=entry.name, is_directory=entry.is_dir()) for entry in it]

    def real_path(self, path: Path) -> Path:
        return Path(os.path.realpath(path))
