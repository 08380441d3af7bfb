"""A small command interpreter with builtins, variable expansion and script mode."""

__version__ = "0.1.0"
__all__ = ["builtins", "environment", "lexer", "pathsearch", "shell"]