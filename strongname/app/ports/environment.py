"""Environment port interface describing the host machine."""

from pathlib import Path, PureWindowsPath
from typing import Protocol


class EnvironmentPort(Protocol):
    """Port interface for host environment queries.

    Side effects: None (pure reads).
    """

    def program_files_x86(self) -> PureWindowsPath:
        """Return the 32-bit Program Files directory."""
        ...

    def is_64bit_operating_system(self) -> bool:
        """Return True when the operating system is 64-bit."""
        ...

    def working_directory(self) -> Path:
        """Return the directory relative paths are resolved against."""
        ...
