"""Host environment adapter."""

from __future__ import annotations

import os
import platform
from pathlib import Path, PureWindowsPath

from strongname.app.ports import EnvironmentPort

_DEFAULT_PROGRAM_FILES_X86 = "C:\\Program Files (x86)"
_64BIT_MACHINES = frozenset({"amd64", "x86_64", "arm64", "aarch64", "ia64"})


class HostEnvironmentAdapter(EnvironmentPort):
    """Describe the running machine from environment variables and platform data."""

    def __init__(self, *, working_directory: Path | None = None) -> None:
        self._working_directory = working_directory

    def program_files_x86(self) -> PureWindowsPath:
        # 32-bit Windows only defines ProgramFiles.
        folder = os.getenv("ProgramFiles(x86)") or os.getenv("ProgramFiles")
        return PureWindowsPath(folder or _DEFAULT_PROGRAM_FILES_X86)

    def is_64bit_operating_system(self) -> bool:
        # A 32-bit interpreter on 64-bit Windows reports its own architecture,
        # the WOW64 variable carries the real one.
        if os.getenv("PROCESSOR_ARCHITEW6432"):
            return True
        return platform.machine().lower() in _64BIT_MACHINES

    def working_directory(self) -> Path:
        return self._working_directory or Path.cwd()
