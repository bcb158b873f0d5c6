"""Configuration management with Pydantic settings and environment overrides."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:  # pragma: no cover
    from strongname.app.ports.tool import StrongNameToolSettings

# Newest first; the disk scan stops at the first existing candidate.
DEFAULT_SDK_VERSIONS: tuple[str, ...] = ("v10.0A", "v8.1A", "v8.0A", "v7.1A", "v7.0A")


class Settings(BaseSettings):
    """strongname configuration settings.

    Precedence: CLI flag > environment variable > .env file > defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="STRONGNAME_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    tool_path: Path | None = Field(
        default=None,
        description="Explicit path to sn.exe (skips disk and registry discovery)",
    )

    sdk_versions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SDK_VERSIONS),
        description="Windows SDK version folders checked on disk, newest first",
    )

    container: str | None = Field(
        default=None,
        description="Default key container used when resigning assemblies",
    )

    force_verification: bool = Field(
        default=False,
        description="Force verification even when the assembly is skip-verified",
    )

    process_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Seconds to wait for sn.exe before giving up (None waits forever)",
    )

    log_level: str = Field(
        default="WARNING",
        description="Root log level (DEBUG, INFO, WARNING, ERROR)",
    )

    @field_validator("sdk_versions")
    @classmethod
    def _reject_blank_versions(cls, value: list[str]) -> list[str]:
        cleaned = [item.strip() for item in value if item and item.strip()]
        if not cleaned:
            raise ValueError("sdk_versions must contain at least one version folder")
        return cleaned

    @field_validator("log_level")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        return value.strip().upper()

    def tool_settings(
        self,
        *,
        container: str | None = None,
        force_verification: bool | None = None,
        tool_path: Path | None = None,
        working_directory: Path | None = None,
    ) -> StrongNameToolSettings:
        """Build per-invocation tool settings, letting explicit arguments win."""
        from strongname.app.ports.tool import StrongNameToolSettings

        return StrongNameToolSettings(
            container=container if container is not None else self.container,
            force_verification=(
                force_verification
                if force_verification is not None
                else self.force_verification
            ),
            tool_path=tool_path if tool_path is not None else self.tool_path,
            working_directory=working_directory,
        )


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance (useful for testing)."""
    global _settings
    _settings = settings
