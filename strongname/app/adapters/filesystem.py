"""Local file system adapter."""

from __future__ import annotations

from pathlib import Path, PurePath

from strongname.app.ports import FileSystemPort


class LocalFileSystemAdapter(FileSystemPort):
    """Adapter that checks files on the local disk."""

    def exists(self, path: PurePath) -> bool:
        try:
            return Path(path).is_file()
        except OSError:
            return False
