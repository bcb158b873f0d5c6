"""Pytest configuration and fixtures."""

from collections.abc import Generator
from pathlib import PureWindowsPath

import pytest
from fakes import (
    FakeEnvironment,
    FakeFileSystem,
    FakeRegistry,
    RecordingProcessRunner,
)

from strongname.config import Settings

SDK_ROOT = PureWindowsPath("C:\\Program Files (x86)\\Microsoft SDKs\\Windows")


@pytest.fixture
def file_system() -> FakeFileSystem:
    """Empty file system; tests add the files they need."""
    return FakeFileSystem()


@pytest.fixture
def environment() -> FakeEnvironment:
    """64-bit host with a Windows Program Files layout."""
    return FakeEnvironment(is_64bit=True)


@pytest.fixture
def registry() -> FakeRegistry:
    """Registry without the Windows SDK root key."""
    return FakeRegistry()


@pytest.fixture
def process_runner() -> RecordingProcessRunner:
    return RecordingProcessRunner()


@pytest.fixture
def sn_x64_path() -> PureWindowsPath:
    """sn.exe from the v10.0A NETFX 4.0 tools, 64-bit."""
    return SDK_ROOT / "v10.0A" / "Bin" / "NETFX 4.0 Tools" / "x64" / "sn.exe"


@pytest.fixture
def override_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[Settings, None, None]:
    """Provide isolated strongname settings scoped to tests."""

    import strongname.config as config_module

    for name in ("TOOL_PATH", "SDK_VERSIONS", "CONTAINER", "FORCE_VERIFICATION", "PROCESS_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(f"STRONGNAME_{name}", raising=False)

    original_settings = getattr(config_module, "_settings", None)
    settings = config_module.Settings(_env_file=None)
    config_module._settings = settings

    try:
        yield settings
    finally:
        config_module._settings = original_settings
