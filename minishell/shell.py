"""The read-split-run loop and the command-line entry point."""

from __future__ import annotations

import io
import os
import subprocess
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from minishell.builtins import ShellExit, ShellState, is_builtin, run_builtin
from minishell.environment import Environment
from minishell.lexer import expand_variables, split_line, strip_comments
from minishell.pathsearch import find_command

PROMPT = "$ "
SCRIPT_READ_LIMIT = 4095


def _fileno(stream: TextIO) -> int | None:
    try:
        return stream.fileno()
    except (AttributeError, OSError, io.UnsupportedOperation):
        return None


class Shell:
    """A shell that runs command lines against its own environment."""

    def __init__(
        self,
        name: str,
        env: Environment | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.state = ShellState(
            name=name,
            env=env if env is not None else Environment(),
            stdout=stdout if stdout is not None else sys.stdout,
            stderr=stderr if stderr is not None else sys.stderr,
        )

    def execute(self, words: list[str]) -> int:
        """Start the program named by the first word and wait for it."""
        state = self.state
        command = words[0]
        path = find_command(command, state.env)
        if path is None:
            state.error(f"{command}: not found")
            state.status = 127
            return state.status

        state.stdout.flush()
        state.stderr.flush()
        stdin_fd = _fileno(self.stdin)
        stdout_fd = _fileno(state.stdout)
        stderr_fd = _fileno(state.stderr)
        try:
            completed = subprocess.run(
                words,
                executable=path,
                env=state.env.as_dict(),
                stdin=stdin_fd if stdin_fd is not None else subprocess.DEVNULL,
                stdout=stdout_fd if stdout_fd is not None else subprocess.PIPE,
                stderr=stderr_fd if stderr_fd is not None else subprocess.PIPE,
                check=False,
            )
        except OSError as error:
            state.error(f"{command}: {error.strerror}")
            state.status = 126
            return state.status

        if stdout_fd is None and completed.stdout:
            state.stdout.write(completed.stdout.decode(errors="replace"))
        if stderr_fd is None and completed.stderr:
            state.stderr.write(completed.stderr.decode(errors="replace"))
        # A child killed by a signal has no exit status of its own.
        state.status = completed.returncode if completed.returncode >= 0 else 0
        return state.status

    def run_line(self, line: str) -> int:
        """Run one input line and return the resulting status."""
        state = self.state
        state.index += 1
        words = strip_comments(split_line(line))
        if not words:
            return state.status
        words = expand_variables(words, state.status, os.getpid(), state.env)
        if is_builtin(words[0]):
            run_builtin(state, words)
        else:
            self.execute(words)
        return state.status

    def run(self, lines: Iterable[str]) -> int:
        """Run every line in turn; ``exit`` raises ShellExit."""
        for line in lines:
            self.run_line(line)
        return self.state.status


def read_script(path: str) -> list[str]:
    """The non-empty lines of the first 4095 bytes of a script file."""
    with open(path, "rb") as handle:
        data = handle.read(SCRIPT_READ_LIMIT)
    text = data.decode("utf-8", errors="surrogateescape")
    return [line for line in text.split("\n") if line]


def interactive_lines(
    stream: TextIO, stdout: TextIO, interactive: bool
) -> Iterator[str]:
    """Yield lines from ``stream``, prompting first when interactive."""
    while True:
        if interactive:
            stdout.write(PROMPT)
            stdout.flush()
        line = stream.readline()
        if not line:
            if interactive:
                stdout.write("\n")
                stdout.flush()
            return
        yield line


def main(argv: list[str] | None = None) -> int:
    """Run a script named by the one argument, or read commands from stdin."""
    if argv is None:
        argv = sys.argv
    name = argv[0] if argv else "minishell"
    shell = Shell(name, Environment(), sys.stdin, sys.stdout, sys.stderr)

    if len(argv) == 2:
        try:
            lines = read_script(argv[1])
        except OSError:
            sys.stderr.write(f"{name}: 0: Can't open {argv[1]}\n")
            return 127
        try:
            shell.run(lines)
        except ShellExit as done:
            return done.code
        return 0

    interactive = sys.stdin.isatty()
    try:
        return shell.run(interactive_lines(sys.stdin, sys.stdout, interactive))
    except ShellExit as done:
        return done.code


if __name__ == "__main__":
    sys.exit(main())