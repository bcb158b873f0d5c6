"""File system port interface."""

from pathlib import PurePath
from typing import Protocol


class FileSystemPort(Protocol):
    """Port interface for file existence checks.

    Side effects: None (read-only check).
    """

    def exists(self, path: PurePath) -> bool:
        """Return True when ``path`` denotes an existing file.

        Missing paths return False; implementations never raise for them.
        """
        ...
