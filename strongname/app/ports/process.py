"""Process runner port interface for launching external tools."""

from __future__ import annotations

from pathlib import Path, PurePath
from typing import TYPE_CHECKING, Protocol

from pydantic import BaseModel

if TYPE_CHECKING:
    from strongname.utils.arguments import ProcessArgumentBuilder


class ProcessResult(BaseModel):
    """Outcome of a completed process."""

    exit_code: int
    stdout: str = ""
    stderr: str = ""


class ProcessRunnerPort(Protocol):
    """Port interface for running an executable to completion.

    Side effects: Spawns a child process and blocks until it exits.
    Non-zero exit codes are reported by the adapter as ToolExecutionError.
    """

    def run(
        self,
        executable: PurePath,
        arguments: ProcessArgumentBuilder,
        *,
        working_directory: Path | None = None,
    ) -> ProcessResult:
        """Run ``executable`` with ``arguments``.

        Args:
            executable: Absolute path to the tool
            arguments: Rendered argument line
            working_directory: Optional process working directory

        Returns:
            ProcessResult for a successful (zero exit) run
        """
        ...
