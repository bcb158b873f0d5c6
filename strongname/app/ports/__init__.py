"""Port interfaces for the strongname application layer.

These protocol interfaces define contracts for adapters.
The resolver and runner depend on these ports, never on concrete implementations.
"""

__all__ = [
    "EnvironmentPort",
    "FileSystemPort",
    "ProcessResult",
    "ProcessRunnerPort",
    "RegistryHive",
    "RegistryKeyPort",
    "RegistryPort",
    "StrongNameToolSettings",
    "ToolResolverPort",
]

from strongname.app.ports.environment import EnvironmentPort
from strongname.app.ports.filesystem import FileSystemPort
from strongname.app.ports.process import ProcessResult, ProcessRunnerPort
from strongname.app.ports.registry import RegistryHive, RegistryKeyPort, RegistryPort
from strongname.app.ports.tool import StrongNameToolSettings, ToolResolverPort
