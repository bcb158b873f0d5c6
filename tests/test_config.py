from pathlib import Path

import pytest
from pydantic import ValidationError

from strongname.config import DEFAULT_SDK_VERSIONS, Settings, get_settings, set_settings


def test_defaults(override_settings: Settings) -> None:
    settings = override_settings

    assert settings.tool_path is None
    assert settings.container is None
    assert settings.force_verification is False
    assert settings.sdk_versions == list(DEFAULT_SDK_VERSIONS)
    assert settings.log_level == "WARNING"


def test_environment_overrides(override_settings: Settings, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STRONGNAME_CONTAINER", "CI_KEYS")
    monkeypatch.setenv("STRONGNAME_FORCE_VERIFICATION", "true")
    monkeypatch.setenv("STRONGNAME_SDK_VERSIONS", '["v10.0A"]')
    monkeypatch.setenv("STRONGNAME_LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.container == "CI_KEYS"
    assert settings.force_verification is True
    assert settings.sdk_versions == ["v10.0A"]
    assert settings.log_level == "DEBUG"


def test_blank_sdk_versions_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, sdk_versions=["", "  "])


def test_tool_settings_prefers_explicit_arguments() -> None:
    settings = Settings(
        _env_file=None,
        container="DEFAULT",
        force_verification=True,
        tool_path=Path("/opt/sn.exe"),
    )

    tool_settings = settings.tool_settings(container="OVERRIDE", force_verification=False)

    assert tool_settings.container == "OVERRIDE"
    assert tool_settings.force_verification is False
    assert tool_settings.tool_path == Path("/opt/sn.exe")


def test_tool_settings_falls_back_to_configuration() -> None:
    settings = Settings(_env_file=None, container="DEFAULT")

    tool_settings = settings.tool_settings(working_directory=Path("/tmp/work"))

    assert tool_settings.container == "DEFAULT"
    assert tool_settings.force_verification is False
    assert tool_settings.working_directory == Path("/tmp/work")


def test_tool_settings_are_immutable() -> None:
    tool_settings = Settings(_env_file=None).tool_settings()

    with pytest.raises(ValidationError):
        tool_settings.container = "changed"  # type: ignore[misc]


def test_set_settings_replaces_global(override_settings: Settings) -> None:
    replacement = Settings(_env_file=None, container="GLOBAL")

    set_settings(replacement)

    assert get_settings() is replacement
