"""Registry port interfaces for hierarchical system configuration stores."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from types import TracebackType
from typing import Protocol


class RegistryHive(str, Enum):
    """Registry root hives that can be opened."""

    LOCAL_MACHINE = "HKEY_LOCAL_MACHINE"
    CURRENT_USER = "HKEY_CURRENT_USER"


class RegistryKeyPort(Protocol):
    """An opened registry key.

    Keys are scoped resources: callers must close them (or use them as
    context managers) before opening the next sibling.
    """

    def sub_key_names(self) -> Sequence[str]:
        """Return the names of immediate child keys in enumeration order."""
        ...

    def open_key(self, name: str) -> RegistryKeyPort | None:
        """Open a child key, returning None when it does not exist."""
        ...

    def get_value(self, name: str) -> str | None:
        """Return a string value, or None when absent or not a string."""
        ...

    def close(self) -> None:
        """Release the underlying handle."""
        ...

    def __enter__(self) -> RegistryKeyPort: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None: ...


class RegistryPort(Protocol):
    """Port interface for registry reads.

    Adapters: Windows (winreg), null registry for hosts without one.

    Side effects: None (read-only).
    """

    def open_key(self, hive: RegistryHive, path: str) -> RegistryKeyPort | None:
        """Open ``path`` below ``hive``, returning None when absent."""
        ...
