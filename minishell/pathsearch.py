"""Finding a command's file through the PATH variable."""

from __future__ import annotations

import os

from minishell.environment import EnvLookup


def path_directories(env: EnvLookup) -> list[str]:
    """The non-empty directories listed in PATH, in order."""
    path = env.get("PATH")
    if not path:
        return []
    return [directory for directory in path.split(":") if directory]


def find_command(command: str, env: EnvLookup) -> str | None:
    """Return the path to run for ``command``, or None if there is none.

    A command containing a slash is used as given if it exists; otherwise
    each PATH directory is tried in turn.
    """
    if "/" in command:
        return command if os.path.exists(command) else None
    for directory in path_directories(env):
        candidate = f"{directory}/{command}"
        if os.path.exists(candidate):
            return candidate
    return None