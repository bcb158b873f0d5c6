"""Strong name tool resolver.

Locates ``sn.exe`` in two phases:

1. Disk: a fixed, ordered list of Windows SDK install locations under the
   32-bit Program Files directory. The first existing file wins.
2. Registry: every versioned subtree below
   ``HKLM\\Software\\Microsoft\\Microsoft SDKs\\Windows``; the NETFX 4.0 tools
   key's ``InstallationFolder`` is preferred, then the subtree's own
   ``CurrentInstallFolder``. Registry folders are only accepted when the
   composed executable exists on disk.

A successful resolution is memoized per resolver instance.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from pathlib import PureWindowsPath

from strongname.app.ports import (
    EnvironmentPort,
    FileSystemPort,
    RegistryHive,
    RegistryKeyPort,
    RegistryPort,
)
from strongname.config import DEFAULT_SDK_VERSIONS
from strongname.errors import InvalidArgumentError, ToolNotFoundError

logger = logging.getLogger(__name__)

TOOL_EXECUTABLE = "sn.exe"
SDK_REGISTRY_ROOT = "Software\\Microsoft\\Microsoft SDKs\\Windows"
NETFX_TOOLS_KEY_X64 = "WinSDK-NetFx40Tools-x64"
NETFX_TOOLS_KEY_X86 = "WinSDK-NetFx40Tools"
INSTALLATION_FOLDER_VALUE = "InstallationFolder"
CURRENT_INSTALL_FOLDER_VALUE = "CurrentInstallFolder"

_NOT_FOUND_MESSAGE = f"Failed to find {TOOL_EXECUTABLE}."

# Sub-path shapes below "Microsoft SDKs\Windows\<version>", in lookup order.
_PATH_SHAPES: tuple[tuple[str, ...], ...] = (
    ("Bin", "NETFX 4.0 Tools"),
    ("Bin",),
)


def build_disk_candidates(
    program_files_x86: PureWindowsPath,
    *,
    is_64bit: bool,
    sdk_versions: Sequence[str] = DEFAULT_SDK_VERSIONS,
) -> list[PureWindowsPath]:
    """Return the ordered disk locations that may hold sn.exe."""

    sdk_root = program_files_x86 / "Microsoft SDKs" / "Windows"
    candidates: list[PureWindowsPath] = []
    for version in sdk_versions:
        for shape in _PATH_SHAPES:
            folder = sdk_root.joinpath(version, *shape)
            if is_64bit:
                folder = folder / "x64"
            candidates.append(folder / TOOL_EXECUTABLE)
    return candidates


class StrongNameResolver:
    """Resolve the path to the strong name tool (sn.exe)."""

    def __init__(
        self,
        file_system: FileSystemPort,
        environment: EnvironmentPort,
        registry: RegistryPort,
        *,
        sdk_versions: Sequence[str] = DEFAULT_SDK_VERSIONS,
    ) -> None:
        if file_system is None:
            raise InvalidArgumentError("file_system")
        if environment is None:
            raise InvalidArgumentError("environment")
        if registry is None:
            raise InvalidArgumentError("registry")

        self._file_system = file_system
        self._environment = environment
        self._registry = registry
        self._sdk_versions = tuple(sdk_versions)
        self._tool_path: PureWindowsPath | None = None
        self._lock = threading.Lock()

    def get_path(self) -> PureWindowsPath:
        """Resolve the path to sn.exe.

        Raises:
            ToolNotFoundError: When neither disk nor registry yields the tool
        """
        if self._tool_path is not None:
            return self._tool_path

        with self._lock:
            # Another caller may have resolved while we waited.
            if self._tool_path is None:
                resolved = self._get_from_disk() or self._get_from_registry()
                if resolved is None:
                    raise ToolNotFoundError(_NOT_FOUND_MESSAGE)
                logger.info("Resolved %s at %s", TOOL_EXECUTABLE, resolved)
                self._tool_path = resolved
            return self._tool_path

    def _get_from_disk(self) -> PureWindowsPath | None:
        candidates = build_disk_candidates(
            self._environment.program_files_x86(),
            is_64bit=self._environment.is_64bit_operating_system(),
            sdk_versions=self._sdk_versions,
        )
        for candidate in candidates:
            logger.debug("Probing %s", candidate)
            if self._file_system.exists(candidate):
                return candidate
        return None

    def _get_from_registry(self) -> PureWindowsPath | None:
        root = self._registry.open_key(RegistryHive.LOCAL_MACHINE, SDK_REGISTRY_ROOT)
        if root is None:
            logger.debug("Registry key %s not present", SDK_REGISTRY_ROOT)
            return None

        with root:
            for name in root.sub_key_names():
                sdk_key = root.open_key(name)
                if sdk_key is None:
                    continue
                with sdk_key:
                    found = self._existing_tool_in(self._install_folder(sdk_key))
                if found is not None:
                    logger.debug("Found %s via registry subtree %s", TOOL_EXECUTABLE, name)
                    return found
        return None

    def _install_folder(self, sdk_key: RegistryKeyPort) -> str | None:
        """Return the install folder recorded for one SDK subtree."""

        tools_key_name = (
            NETFX_TOOLS_KEY_X64
            if self._environment.is_64bit_operating_system()
            else NETFX_TOOLS_KEY_X86
        )
        tools_key = sdk_key.open_key(tools_key_name)
        if tools_key is None:
            return sdk_key.get_value(CURRENT_INSTALL_FOLDER_VALUE)
        with tools_key:
            return tools_key.get_value(INSTALLATION_FOLDER_VALUE)

    def _existing_tool_in(self, folder: str | None) -> PureWindowsPath | None:
        # Blank values count as absent.
        if folder is None or not folder.strip():
            return None
        candidate = PureWindowsPath(folder.strip()) / TOOL_EXECUTABLE
        if self._file_system.exists(candidate):
            return candidate
        return None
