# minishell

A small command interpreter. It reads commands from a terminal, from a pipe or
from a script file, runs the programs it finds on `PATH`, and keeps a few
builtins of its own.

## Installing

```
pip install .
```

## Running

Interactive, with a `$ ` prompt when standard input is a terminal:

```
minishell
```

Commands piped in:

```
echo "ls -l /tmp" | minishell
```

A script file, one command per line:

```
minishell script.sh
```

Only the first 4095 bytes of a script are read, and empty lines are skipped.
If the file cannot be opened the shell reports
`minishell: 0: Can't open script.sh` and exits with status 127.

## What it understands

- Words are split on spaces, tabs and newlines.
- A word starting with `#` begins a comment. It and every word after it are
  dropped.
- Expansion works on whole words only. A word starting with `$?` becomes the
  status of the last command, one starting with `$$` becomes the shell's
  process id, and `$NAME` becomes the value of the variable named by
  everything after the `$`, or the empty string if it is unset. A `$`
  followed by anything else is left alone.
- A command containing `/` is run as a path if that path exists. Any other
  command is searched for in the directories of `PATH`, in order. If it is
  not found the shell prints `<name>: <n>: <command>: not found`, where `<n>`
  is the line number, and the status becomes 127. A program that is found but
  cannot be started sets the status to 126.
- A program's exit status becomes the shell's status; a program killed by a
  signal leaves a status of 0.

## Builtins

| Builtin | Effect |
| --- | --- |
| `exit [n]` | Leave the shell with status `n` (taken modulo 256), or with the last status. An argument that is not made of digits only is reported as `exit: Illegal number: ...`, the shell keeps running and the status becomes 2. |
| `env` | Print every environment variable as `KEY=value`. |
| `setenv KEY VALUE` | Set or replace a variable. With fewer arguments it does nothing. |
| `unsetenv KEY` | Remove a variable. |
| `cd [dir]` | Change directory. With no argument go to `$HOME` (nothing happens if it is unset); with `-` go to `$OLDPWD` and print it, or print the current directory if `OLDPWD` is unset. `PWD` and `OLDPWD` are kept up to date. A directory that cannot be entered is reported as `cd: can't cd to ...`. |

The builtins other than `exit` always leave a status of 0.

## Exit status

Reading from a terminal or a pipe, the shell exits with the status of the last
command when input ends. Running a script, it exits with 0 when the script
ends. In both cases `exit` ends the shell at once with its own status.

## Not supported

There is no quoting, no piping, no redirection, no `;` or `&&` lists, no
background jobs and no shell variables apart from the environment.

## Using it from Python

```python
import io
from minishell.environment import Environment
from minishell.shell import Shell

out = io.StringIO()
shell = Shell("minishell", Environment({"PATH": "/bin:/usr/bin"}),
              io.StringIO(), out, io.StringIO())
status = shell.run(["setenv GREETING hello", "env"])
print(out.getvalue())
```

`Shell.run` returns the last status, and raises `minishell.builtins.ShellExit`
(with its `code`) when a line runs `exit`. `Shell.run_line` runs a single
line. The pieces are also usable on their own: `minishell.lexer` has
`split_line`, `strip_comments`, `expand_variables` and `is_positive_number`,
and `minishell.pathsearch` has `path_directories` and `find_command`.