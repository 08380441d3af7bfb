"""The shell's own copy of the process environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Protocol


class EnvLookup(Protocol):
    """Anything that can look a variable up by name."""

    def get(self, key: str) -> str | None: ...


class Environment:
    """Ordered environment variables that the shell can read and change."""

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        source = os.environ if initial is None else initial
        self._vars: dict[str, str] = dict(source)

    def get(self, key: str) -> str | None:
        """Return the value of ``key``, or None if it is not set."""
        return self._vars.get(key)

    def set(self, key: str, value: str) -> None:
        """Set ``key``; an existing variable keeps its place, a new one goes last."""
        self._vars[key] = value

    def unset(self, key: str) -> None:
        """Remove ``key`` if it is set."""
        self._vars.pop(key, None)

    def lines(self) -> list[str]:
        """The variables as ``KEY=VALUE`` strings, in order."""
        return [f"{key}={value}" for key, value in self._vars.items()]

    def as_dict(self) -> dict[str, str]:
        """A copy of the variables, suitable for a child process."""
        return dict(self._vars)

    def __contains__(self, key: object) -> bool:
        return key in self._vars

    def __len__(self) -> int:
        return len(self._vars)