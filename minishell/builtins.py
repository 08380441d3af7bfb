"""Commands the shell runs itself instead of starting a program."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TextIO

from minishell.environment import Environment
from minishell.lexer import is_positive_number


class ShellExit(Exception):
    """Raised by the ``exit`` builtin to end the shell with ``code``."""

    def __init__(self, code: int) -> None:
        super().__init__(code)
        self.code = code


@dataclass
class ShellState:
    """What builtins may read and change: environment, status and streams."""

    name: str
    env: Environment
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    stderr: TextIO = field(default_factory=lambda: sys.stderr)
    status: int = 0
    index: int = 0

    def error(self, message: str) -> None:
        """Write ``name: index: message`` to the error stream."""
        self.stderr.write(f"{self.name}: {self.index}: {message}\n")


def exit_shell(state: ShellState, words: list[str]) -> None:
    """Leave the shell with the given status, or the last one if none is given."""
    code = state.status
    if len(words) > 1:
        argument = words[1]
        if not is_positive_number(argument):
            state.error(f"exit: Illegal number: {argument}")
            state.status = 2
            return
        code = int(argument) & 0xFF
    raise ShellExit(code)


def print_env(state: ShellState, words: list[str]) -> None:
    """Print every environment variable as ``KEY=VALUE``."""
    for line in state.env.lines():
        state.stdout.write(f"{line}\n")
    state.status = 0


def set_env(state: ShellState, words: list[str]) -> None:
    """Set a variable; without both a name and a value nothing happens."""
    if len(words) >= 3:
        state.env.set(words[1], words[2])
    state.status = 0


def unset_env(state: ShellState, words: list[str]) -> None:
    """Remove a variable if one is named."""
    if len(words) > 1:
        state.env.unset(words[1])
    state.status = 0


def change_directory(state: ShellState, words: list[str]) -> None:
    """Change directory to HOME, to OLDPWD with ``-``, or to the given path."""
    current = os.getcwd()
    env = state.env

    if len(words) < 2:
        home = env.get("HOME")
        if home is None:
            state.status = 0
            return
        _try_chdir(home)
        env.set("PWD", home)
    elif words[1] == "-":
        previous = env.get("OLDPWD")
        if previous is None:
            state.stdout.write(f"{current}\n")
            state.status = 0
            return
        _try_chdir(previous)
        env.set("PWD", previous)
        state.stdout.write(f"{previous}\n")
    elif _try_chdir(words[1]):
        env.set("PWD", words[1])
    else:
        state.error(f"cd: can't cd to {words[1]}")

    state.status = 0
    env.set("OLDPWD", current)


def _try_chdir(path: str) -> bool:
    try:
        os.chdir(path)
    except OSError:
        return False
    return True


_BUILTINS: dict[str, Callable[[ShellState, list[str]], None]] = {
    "exit": exit_shell,
    "env": print_env,
    "setenv": set_env,
    "unsetenv": unset_env,
    "cd": change_directory,
}


def is_builtin(name: str) -> bool:
    """True if ``name`` is one of the shell's own commands."""
    return name in _BUILTINS


def run_builtin(state: ShellState, words: list[str]) -> None:
    """Run the builtin named by the first word."""
    handler = _BUILTINS.get(words[0])
    if handler is None:
        raise KeyError(words[0])
    handler(state, words)