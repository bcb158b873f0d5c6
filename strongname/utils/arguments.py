"""Command-line argument assembly for external tools."""

from __future__ import annotations

from collections.abc import Iterator


class ProcessArgumentBuilder:
    """Ordered list of command-line tokens.

    Each argument is kept twice: as the token rendered on a Windows command
    line (quoted tokens keep their double quotes) and as the raw value handed
    to ``execve``-style argument vectors.
    """

    def __init__(self) -> None:
        self._tokens: list[str] = []
        self._values: list[str] = []

    def append(self, argument: str) -> ProcessArgumentBuilder:
        self._tokens.append(argument)
        self._values.append(argument)
        return self

    def append_quoted(self, argument: str) -> ProcessArgumentBuilder:
        self._tokens.append(quote(argument))
        self._values.append(unquote(argument))
        return self

    @property
    def tokens(self) -> list[str]:
        return list(self._tokens)

    @property
    def values(self) -> list[str]:
        """Raw argument values, without command-line quoting."""
        return list(self._values)

    def render(self) -> str:
        """Return the argument line as a single string."""
        return " ".join(self._tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"ProcessArgumentBuilder({self._tokens!r})"


def _is_quoted(argument: str) -> bool:
    return len(argument) >= 2 and argument.startswith('"') and argument.endswith('"')


def quote(argument: str) -> str:
    """Wrap ``argument`` in double quotes unless it already is."""
    if _is_quoted(argument):
        return argument
    return f'"{argument}"'


def unquote(argument: str) -> str:
    """Strip one pair of surrounding double quotes, if present."""
    if _is_quoted(argument):
        return argument[1:-1]
    return argument
