"""Exception taxonomy for strong-name tool resolution and invocation."""

from __future__ import annotations


class StrongNameError(RuntimeError):
    """Base class for all strong-name tool failures."""


class InvalidArgumentError(StrongNameError, ValueError):
    """Raised when a required collaborator or parameter is ``None``."""

    def __init__(self, param_name: str) -> None:
        super().__init__(f"Value cannot be None. (Parameter '{param_name}')")
        self.param_name = param_name


class ToolNotFoundError(StrongNameError):
    """Raised when ``sn.exe`` cannot be located on disk or via the registry."""


class ToolExecutionError(StrongNameError):
    """Raised when an invocation cannot be started or the process fails."""
