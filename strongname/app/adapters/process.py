"""Subprocess-backed process runner adapter."""

from __future__ import annotations

import logging
import subprocess
import sys
from pathlib import Path, PurePath

from strongname.app.ports import ProcessResult, ProcessRunnerPort
from strongname.errors import ToolExecutionError
from strongname.utils.arguments import ProcessArgumentBuilder

logger = logging.getLogger(__name__)


class SubprocessRunnerAdapter(ProcessRunnerPort):
    """Run tools with :mod:`subprocess`, raising on non-zero exit codes."""

    def __init__(self, *, timeout: float | None = None) -> None:
        self.timeout = timeout

    def run(
        self,
        executable: PurePath,
        arguments: ProcessArgumentBuilder,
        *,
        working_directory: Path | None = None,
    ) -> ProcessResult:
        command = self._command_line(executable, arguments)
        try:
            completed = subprocess.run(
                command,
                cwd=str(working_directory) if working_directory else None,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise ToolExecutionError(
                f"{executable.stem}: Process timed out after {self.timeout} seconds."
            ) from exc
        except OSError as exc:
            raise ToolExecutionError(
                f"{executable.stem}: Failed to start process ({exc})."
            ) from exc

        if completed.stdout:
            logger.debug("%s stdout:\n%s", executable.name, completed.stdout.rstrip())
        if completed.stderr:
            logger.debug("%s stderr:\n%s", executable.name, completed.stderr.rstrip())

        if completed.returncode != 0:
            raise ToolExecutionError(
                f"{executable.stem}: Process returned an error "
                f"(exit code {completed.returncode})."
            )

        return ProcessResult(
            exit_code=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )

    @staticmethod
    def _command_line(
        executable: PurePath, arguments: ProcessArgumentBuilder
    ) -> str | list[str]:
        # Windows takes the quoted line verbatim; elsewhere argv gets raw values.
        if sys.platform == "win32":
            return f'"{executable}" {arguments.render()}'.rstrip()
        return [str(executable), *arguments.values]
