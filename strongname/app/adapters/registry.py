"""Registry adapters backed by winreg, plus a null registry for other hosts."""

from __future__ import annotations

import logging
import sys
from types import TracebackType
from typing import Any

from strongname.app.ports import RegistryHive, RegistryKeyPort, RegistryPort

logger = logging.getLogger(__name__)


class WindowsRegistryKey(RegistryKeyPort):
    """Open winreg handle wrapped in the registry key port."""

    def __init__(self, winreg: Any, handle: Any) -> None:
        self._winreg = winreg
        self._handle = handle

    def sub_key_names(self) -> list[str]:
        names: list[str] = []
        index = 0
        while True:
            try:
                names.append(self._winreg.EnumKey(self._handle, index))
            except OSError:
                # EnumKey raises once the index runs past the last child.
                break
            index += 1
        return names

    def open_key(self, name: str) -> WindowsRegistryKey | None:
        try:
            handle = self._winreg.OpenKey(self._handle, name)
        except OSError:
            return None
        return WindowsRegistryKey(self._winreg, handle)

    def get_value(self, name: str) -> str | None:
        try:
            value, _kind = self._winreg.QueryValueEx(self._handle, name)
        except OSError:
            return None
        return value if isinstance(value, str) else None

    def close(self) -> None:
        if self._handle is not None:
            self._handle.Close()
            self._handle = None

    def __enter__(self) -> WindowsRegistryKey:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class WindowsRegistryAdapter(RegistryPort):
    """Read-only access to the Windows registry."""

    def __init__(self) -> None:
        if sys.platform != "win32":
            raise RuntimeError("WindowsRegistryAdapter requires Windows (winreg)")
        import winreg

        self._winreg = winreg
        self._hives = {
            RegistryHive.LOCAL_MACHINE: winreg.HKEY_LOCAL_MACHINE,
            RegistryHive.CURRENT_USER: winreg.HKEY_CURRENT_USER,
        }

    def open_key(self, hive: RegistryHive, path: str) -> WindowsRegistryKey | None:
        try:
            handle = self._winreg.OpenKey(self._hives[hive], path)
        except OSError:
            logger.debug("Registry key %s\\%s not found", hive.value, path)
            return None
        return WindowsRegistryKey(self._winreg, handle)


class NullRegistryAdapter(RegistryPort):
    """Registry for hosts without one; every key is absent."""

    def open_key(self, hive: RegistryHive, path: str) -> RegistryKeyPort | None:
        return None
