"""CLI integration smoke tests."""

from __future__ import annotations

from pathlib import Path, PureWindowsPath

import pytest
from fakes import (
    WORKING_DIRECTORY,
    FakeEnvironment,
    FakeFileSystem,
    FakeRegistry,
    RecordingProcessRunner,
)
from typer.testing import CliRunner

import strongname.cli as cli_module
import strongname.config as config_module
from strongname import __version__
from strongname.bootstrap import bootstrap_application
from strongname.config import Settings
from strongname.cli import app

CORE = WORKING_DIRECTORY / "Core.dll"
COMMON = WORKING_DIRECTORY / "Common.dll"


@pytest.fixture
def wired(
    monkeypatch: pytest.MonkeyPatch,
    override_settings: Settings,
    file_system: FakeFileSystem,
    environment: FakeEnvironment,
    registry: FakeRegistry,
    process_runner: RecordingProcessRunner,
) -> FakeFileSystem:
    """Route the CLI through in-memory adapters."""

    def _bootstrap(settings: Settings | None = None):
        return bootstrap_application(
            settings,
            file_system=file_system,
            environment=environment,
            registry=registry,
            process_runner=process_runner,
        )

    monkeypatch.setattr(cli_module, "bootstrap_application", _bootstrap)
    file_system.add(CORE)
    file_system.add(COMMON)
    return file_system


def test_version() -> None:
    result = CliRunner().invoke(app, ["--version"])

    assert result.exit_code == 0
    assert f"strongname version {__version__}" in result.output


def test_locate_prints_resolved_path(wired: FakeFileSystem, sn_x64_path: PureWindowsPath) -> None:
    wired.add(sn_x64_path)

    result = CliRunner().invoke(app, ["locate"])

    assert result.exit_code == 0, result.output
    assert str(sn_x64_path) in result.output


def test_locate_reports_missing_tool(wired: FakeFileSystem) -> None:
    result = CliRunner().invoke(app, ["locate"])

    assert result.exit_code == 1
    assert "Failed to find sn.exe." in result.output


def test_verify_runs_each_assembly(
    wired: FakeFileSystem,
    sn_x64_path: PureWindowsPath,
    process_runner: RecordingProcessRunner,
) -> None:
    wired.add(sn_x64_path)

    result = CliRunner().invoke(app, ["verify", "Core.dll", "Common.dll", "--force"])

    assert result.exit_code == 0, result.output
    assert [call.arguments for call in process_runner.calls] == [
        ["-vf", f'"{CORE}"'],
        ["-vf", f'"{COMMON}"'],
    ]
    assert "Verified Core.dll" in result.output


def test_resign_uses_configured_container(
    wired: FakeFileSystem,
    sn_x64_path: PureWindowsPath,
    process_runner: RecordingProcessRunner,
    override_settings: Settings,
) -> None:
    wired.add(sn_x64_path)
    override_settings.container = "CONFIGURED"

    result = CliRunner().invoke(app, ["resign", "Core.dll"])

    assert result.exit_code == 0, result.output
    assert process_runner.calls[0].arguments == ["-Rca", f'"{CORE}"', "CONFIGURED"]


def test_resign_container_option_wins(
    wired: FakeFileSystem,
    sn_x64_path: PureWindowsPath,
    process_runner: RecordingProcessRunner,
    override_settings: Settings,
) -> None:
    wired.add(sn_x64_path)
    override_settings.container = "CONFIGURED"

    result = CliRunner().invoke(app, ["resign", "Core.dll", "--container", "CLI"])

    assert result.exit_code == 0, result.output
    assert process_runner.calls[0].arguments == ["-Rca", f'"{CORE}"', "CLI"]


def test_resign_without_container_fails(
    wired: FakeFileSystem,
    sn_x64_path: PureWindowsPath,
    process_runner: RecordingProcessRunner,
) -> None:
    wired.add(sn_x64_path)

    result = CliRunner().invoke(app, ["resign", "Core.dll"])

    assert result.exit_code == 1
    assert "Container is required but not specified." in result.output
    assert process_runner.calls == []


def test_verify_stops_at_missing_assembly(
    wired: FakeFileSystem,
    sn_x64_path: PureWindowsPath,
    process_runner: RecordingProcessRunner,
) -> None:
    wired.add(sn_x64_path)

    result = CliRunner().invoke(app, ["verify", "Core.dll", "Missing.dll", "Common.dll"])

    assert result.exit_code == 1
    assert "Missing.dll" in result.output
    assert len(process_runner.calls) == 1


def test_create_key_with_explicit_tool_path(
    wired: FakeFileSystem,
    process_runner: RecordingProcessRunner,
) -> None:
    tool = Path("/opt/sdk/sn.exe")
    wired.add(tool)

    result = CliRunner().invoke(app, ["create-key", "release.snk", "--tool-path", str(tool)])

    assert result.exit_code == 0, result.output
    assert process_runner.calls[0].executable == tool
    assert process_runner.calls[0].arguments == ["-k", f'"{WORKING_DIRECTORY / "release.snk"}"']


def test_verbose_does_not_mutate_shared_settings(
    wired: FakeFileSystem,
    sn_x64_path: PureWindowsPath,
    override_settings: Settings,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    levels: list[str] = []
    monkeypatch.setattr(cli_module, "configure_logging", levels.append)
    wired.add(sn_x64_path)

    result = CliRunner().invoke(app, ["--verbose", "locate"])

    assert result.exit_code == 0, result.output
    assert levels == ["DEBUG"]
    assert override_settings.log_level == "WARNING"
    assert config_module.get_settings().log_level == "DEBUG"


def test_verify_reports_each_success_before_failure(
    wired: FakeFileSystem,
    sn_x64_path: PureWindowsPath,
) -> None:
    wired.add(sn_x64_path)

    result = CliRunner().invoke(app, ["verify", "Core.dll", "Missing.dll"])

    assert result.exit_code == 1
    assert "Verified Core.dll" in result.output
    assert "Verified Missing.dll" not in result.output
