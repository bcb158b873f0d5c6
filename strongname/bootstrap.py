"""Application bootstrap wiring ports, adapters, and services."""

from __future__ import annotations

import sys
from dataclasses import dataclass

from strongname.app import StrongNameResolver, StrongNameService, StrongNameToolRunner
from strongname.app.adapters import (
    HostEnvironmentAdapter,
    LocalFileSystemAdapter,
    NullRegistryAdapter,
    SubprocessRunnerAdapter,
    WindowsRegistryAdapter,
)
from strongname.app.ports import (
    EnvironmentPort,
    FileSystemPort,
    ProcessRunnerPort,
    RegistryPort,
)
from strongname.config import Settings, get_settings


@dataclass(slots=True)
class ApplicationContainer:
    """Aggregates wired services and adapters for the CLI layer."""

    settings: Settings
    file_system: FileSystemPort
    environment: EnvironmentPort
    registry: RegistryPort
    process_runner: ProcessRunnerPort
    resolver: StrongNameResolver
    runner: StrongNameToolRunner
    service: StrongNameService


def _create_registry() -> RegistryPort:
    if sys.platform == "win32":
        return WindowsRegistryAdapter()
    return NullRegistryAdapter()


def bootstrap_application(
    settings: Settings | None = None,
    *,
    file_system: FileSystemPort | None = None,
    environment: EnvironmentPort | None = None,
    registry: RegistryPort | None = None,
    process_runner: ProcessRunnerPort | None = None,
) -> ApplicationContainer:
    """Instantiate adapters and services for CLI consumption.

    Any adapter may be replaced, which is how tests swap in fakes.
    """

    active_settings = settings or get_settings()

    file_system = file_system or LocalFileSystemAdapter()
    environment = environment or HostEnvironmentAdapter()
    registry = registry or _create_registry()
    process_runner = process_runner or SubprocessRunnerAdapter(
        timeout=active_settings.process_timeout
    )

    resolver = StrongNameResolver(
        file_system,
        environment,
        registry,
        sdk_versions=active_settings.sdk_versions,
    )
    runner = StrongNameToolRunner(
        file_system,
        environment,
        process_runner,
        registry,
        resolver=resolver,
    )

    return ApplicationContainer(
        settings=active_settings,
        file_system=file_system,
        environment=environment,
        registry=registry,
        process_runner=process_runner,
        resolver=resolver,
        runner=runner,
        service=StrongNameService(runner=runner),
    )
