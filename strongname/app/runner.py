"""Strong name tool runner.

Validates invocation preconditions, builds sn.exe argument lines and hands
them to the process runner port.
"""

from __future__ import annotations

import logging
from enum import Enum
from os import PathLike
from pathlib import Path, PurePath

from strongname.app.ports import (
    EnvironmentPort,
    FileSystemPort,
    ProcessResult,
    ProcessRunnerPort,
    RegistryPort,
    StrongNameToolSettings,
    ToolResolverPort,
)
from strongname.app.resolver import StrongNameResolver
from strongname.config import DEFAULT_SDK_VERSIONS
from strongname.errors import InvalidArgumentError, ToolExecutionError, ToolNotFoundError
from strongname.utils.arguments import ProcessArgumentBuilder

logger = logging.getLogger(__name__)

TOOL_NAME = "sn"


class Operation(str, Enum):
    """sn.exe operations driven against existing assemblies."""

    RESIGN = "resign"
    VERIFY = "verify"


class StrongNameToolRunner:
    """Run sn.exe against assemblies."""

    def __init__(
        self,
        file_system: FileSystemPort,
        environment: EnvironmentPort,
        process_runner: ProcessRunnerPort,
        registry: RegistryPort,
        *,
        resolver: ToolResolverPort | None = None,
        sdk_versions: tuple[str, ...] = DEFAULT_SDK_VERSIONS,
    ) -> None:
        if file_system is None:
            raise InvalidArgumentError("file_system")
        if environment is None:
            raise InvalidArgumentError("environment")
        if process_runner is None:
            raise InvalidArgumentError("process_runner")

        self._file_system = file_system
        self._environment = environment
        self._process_runner = process_runner
        self._resolver = resolver or StrongNameResolver(
            file_system, environment, registry, sdk_versions=sdk_versions
        )

    def run(
        self,
        operation: Operation,
        assembly_path: str | PathLike[str] | None,
        settings: StrongNameToolSettings | None,
    ) -> ProcessResult:
        """Run ``operation`` on the assembly at ``assembly_path``.

        Raises:
            InvalidArgumentError: ``assembly_path`` or ``settings`` is None
            ToolExecutionError: The assembly is missing, a required setting is
                absent, or the process fails
            ToolNotFoundError: sn.exe could not be located
        """
        if assembly_path is None:
            raise InvalidArgumentError("assembly_path")
        if settings is None:
            raise InvalidArgumentError("settings")

        absolute = self._make_absolute(assembly_path)
        arguments = self._get_arguments(Operation(operation), absolute, settings)
        return self._execute(arguments, settings)

    def create_key(
        self,
        key_file_path: str | PathLike[str] | None,
        settings: StrongNameToolSettings | None = None,
    ) -> ProcessResult:
        """Generate a new key pair and write it to ``key_file_path``."""
        if key_file_path is None:
            raise InvalidArgumentError("key_file_path")

        settings = settings or StrongNameToolSettings()
        builder = ProcessArgumentBuilder()
        builder.append("-k")
        builder.append_quoted(str(self._make_absolute(key_file_path)))
        return self._execute(builder, settings)

    def _make_absolute(self, path: str | PathLike[str]) -> Path:
        candidate = Path(path)
        if candidate.is_absolute():
            return candidate
        return self._environment.working_directory() / candidate

    def _get_arguments(
        self,
        operation: Operation,
        assembly_path: Path,
        settings: StrongNameToolSettings,
    ) -> ProcessArgumentBuilder:
        if not self._file_system.exists(assembly_path):
            raise ToolExecutionError(
                f"{TOOL_NAME}: The assembly '{assembly_path}' do not exist."
            )

        builder = ProcessArgumentBuilder()
        if operation is Operation.VERIFY:
            builder.append("-vf" if settings.force_verification else "-v")
            builder.append_quoted(str(assembly_path))
        elif operation is Operation.RESIGN:
            if not settings.container:
                raise ToolExecutionError(
                    f"{TOOL_NAME}: Container is required but not specified."
                )
            builder.append("-Rca")
            builder.append_quoted(str(assembly_path))
            builder.append(settings.container)
        else:  # pragma: no cover - Operation is closed
            raise ValueError(f"Unsupported operation: {operation!r}")

        return builder

    def _get_tool_path(self, settings: StrongNameToolSettings) -> PurePath:
        if settings.tool_path is None:
            return self._resolver.get_path()

        tool_path = self._make_absolute(settings.tool_path)
        if not self._file_system.exists(tool_path):
            raise ToolNotFoundError(f"{TOOL_NAME}: Could not locate executable.")
        return tool_path

    def _execute(
        self,
        arguments: ProcessArgumentBuilder,
        settings: StrongNameToolSettings,
    ) -> ProcessResult:
        tool_path = self._get_tool_path(settings)
        logger.info("Running %s %s", tool_path, arguments.render())
        return self._process_runner.run(
            tool_path,
            arguments,
            working_directory=settings.working_directory,
        )
