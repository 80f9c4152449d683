from ..domain.models import ScannerConfig

class IgnoreRules:
    """
    Central logic for what entries the structure walker should skip.
    """

    def __init__(self, config: ScannerConfig):
        self.ignored_names = config.ignore_names

    def should_ignore(self, name: str) -> bool:
        """
        Returns True if the file/folder should be left out of the tree.
        Applied by name only, so it works the same at every depth.
        """
        # 1. Check exact name matches (VCS metadata, package caches, build output)
        if name in self.ignored_names:
            return True

        # 2. Hidden entries (dotfiles and dot-folders, no exceptions)
        if name.startswith("."):
            return True

        return False
