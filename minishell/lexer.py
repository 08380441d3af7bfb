"""Turning an input line into the words of a command."""

from __future__ import annotations

import re

from minishell.environment import EnvLookup

_DELIMITERS = re.compile(r"[ \t\n]+")
_DIGITS = frozenset("0123456789")


def split_line(line: str) -> list[str]:
    """Split a line on spaces, tabs and newlines, dropping empty words."""
    return [word for word in _DELIMITERS.split(line) if word]


def strip_comments(words: list[str]) -> list[str]:
    """Return the words before the first one that starts with ``#``."""
    for position, word in enumerate(words):
        if word.startswith("#"):
            return words[:position]
    return list(words)


def _expand(word: str, status: int, pid: int, env: EnvLookup) -> str:
    if not word.startswith("$") or len(word) < 2:
        return word
    marker = word[1]
    if marker == "?":
        return str(status)
    if marker == "$":
        return str(pid)
    if marker.isascii() and marker.isalpha():
        value = env.get(word[1:])
        return value if value is not None else ""
    return word


def expand_variables(
    words: list[str], status: int, pid: int, env: EnvLookup
) -> list[str]:
    """Replace ``$?``, ``$$`` and ``$NAME`` words with their values.

    A word is replaced as a whole: ``$?`` and ``$$`` only look at the
    character after the dollar, and ``$NAME`` looks up everything after
    it. Unknown variables become the empty string.
    """
    return [_expand(word, status, pid, env) for word in words]


def is_positive_number(text: str) -> bool:
    """True if every character of ``text`` is an ASCII digit."""
    return all(char in _DIGITS for char in text)