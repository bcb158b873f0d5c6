"""Concrete adapters wiring application ports to the host machine."""

from __future__ import annotations

from .environment import HostEnvironmentAdapter
from .filesystem import LocalFileSystemAdapter
from .process import SubprocessRunnerAdapter
from .registry import NullRegistryAdapter, WindowsRegistryAdapter

__all__ = [
    "HostEnvironmentAdapter",
    "LocalFileSystemAdapter",
    "NullRegistryAdapter",
    "SubprocessRunnerAdapter",
    "WindowsRegistryAdapter",
]
