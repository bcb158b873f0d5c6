"""Tool resolver port and per-invocation tool settings."""

from pathlib import Path, PurePath
from typing import Protocol

from pydantic import BaseModel, ConfigDict


class StrongNameToolSettings(BaseModel):
    """Settings for a single sn.exe invocation."""

    model_config = ConfigDict(frozen=True)

    container: str | None = None
    """Name of the key container holding the strong name keys (resign only)."""

    force_verification: bool = False
    """Verify even if the assembly is registered for verification skipping."""

    tool_path: Path | None = None
    """Explicit sn.exe location; bypasses the resolver when set."""

    working_directory: Path | None = None
    """Working directory for the sn.exe process."""


class ToolResolverPort(Protocol):
    """Port interface for locating the strong name tool."""

    def get_path(self) -> PurePath:
        """Resolve the path to sn.exe.

        Raises:
            ToolNotFoundError: When no known location holds the tool
        """
        ...
