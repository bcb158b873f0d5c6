"""Strong naming services exposed to the CLI and build scripts."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike

from strongname.app.ports import ProcessResult, StrongNameToolSettings
from strongname.app.runner import Operation, StrongNameToolRunner
from strongname.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

AssemblyPath = str | PathLike[str]


def _as_path_list(assemblies: AssemblyPath | Iterable[AssemblyPath]) -> list[AssemblyPath]:
    """Normalise a single path or an iterable of paths to a list."""

    if isinstance(assemblies, (str, PathLike)):
        return [assemblies]
    return list(assemblies)


@dataclass(slots=True)
class StrongNameService:
    """Create keys, resign and verify assemblies with sn.exe.

    Batches run in the order given and stop at the first failing assembly.
    """

    runner: StrongNameToolRunner

    def create_key(
        self,
        key_file_path: AssemblyPath | None,
        settings: StrongNameToolSettings | None = None,
    ) -> ProcessResult:
        """Create a new strong name key file at ``key_file_path``."""

        if key_file_path is None:
            raise InvalidArgumentError("key_file_path")
        return self.runner.create_key(key_file_path, settings)

    def resign(
        self,
        assemblies: AssemblyPath | Iterable[AssemblyPath] | None,
        settings: StrongNameToolSettings | None,
    ) -> list[ProcessResult]:
        """Resign delay-signed assemblies using ``settings.container``."""

        return self._run_batch(Operation.RESIGN, assemblies, settings)

    def verify(
        self,
        assemblies: AssemblyPath | Iterable[AssemblyPath] | None,
        settings: StrongNameToolSettings | None,
    ) -> list[ProcessResult]:
        """Verify that assemblies carry a valid strong name."""

        return self._run_batch(Operation.VERIFY, assemblies, settings)

    def _run_batch(
        self,
        operation: Operation,
        assemblies: AssemblyPath | Iterable[AssemblyPath] | None,
        settings: StrongNameToolSettings | None,
    ) -> list[ProcessResult]:
        if assemblies is None:
            raise InvalidArgumentError("assemblies")
        if settings is None:
            raise InvalidArgumentError("settings")

        paths = _as_path_list(assemblies)
        logger.debug("%s: %d assemblies", operation.value, len(paths))
        return [self.runner.run(operation, path, settings) for path in paths]
