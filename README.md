# minishell

A small interactive shell. It reads a line at the `minishell> ` prompt,
splits it on spaces and runs one of its built-in commands. A command is
chosen by the start of the first word, so `echo`, `pwd`, `exit`, `env` and
`cd` are checked in that order and, for example, `echoes` also runs `echo`.

| Command       | What it does                                                  |
|---------------|---------------------------------------------------------------|
| `echo [-n] …` | prints its arguments separated by single spaces; `-n` as the first argument leaves off the newline; `echo $?` prints the last exit status |
| `pwd`         | prints the current directory; with arguments it reports `pwd: too many arguments` and sets status 1 |
| `cd [dir]`    | changes directory (to the process's `$HOME` with no argument); if the shell's environment has an `OLDPWD` entry it is set to the previous directory |
| `env`         | prints the shell's copy of the environment, one `NAME=value` per line; with an argument it reports an error and sets status 127 |
| `exit [n]`    | prints `exit` and leaves the shell with status `n`, or the last status; a non-numeric `n` gives status 2, more than one argument is refused with status 1 |

End of input (Ctrl-D) prints `exit` and leaves the shell with the last
exit status. The command's exit status is reduced to the range 0–255.

## What it does not do

Only the built-ins above are recognised; any other word is ignored
silently. The shell does not run external programs, and has no pipes,
redirections, quoting, variable expansion (other than `echo $?`), `export`
or `unset`. `cd` does not update a `PWD` entry and never adds new entries
to the environment.

## Installing

```
pip install .
```

## Running

```
minishell
```

or

```
python -m minishell.cli
```

```
minishell> echo hello world
hello world
minishell> cd /tmp
minishell> pwd
/tmp
minishell> exit 3
exit
```

## Using it from Python

`minishell.shell.Shell` takes an environment (a mapping or an iterable of
`NAME=value` strings), an output stream and an error stream. `run_line`
runs one line; `exit` raises `ShellExit`, whose `code` holds the status.

```python
import io
from minishell.shell import Shell, ShellExit

out = io.StringIO()
shell = Shell({"HOME": "/tmp"}, out, io.StringIO())
shell.run_line("echo hi")
assert out.getvalue() == "hi\n"

try:
    shell.run_line("exit 7")
except ShellExit as stop:
    print(stop.code)  # 7
```

`minishell.cli.repl(shell, read_line)` drives the prompt loop with any
function that takes the prompt and returns a line, or `None` (or raises
`EOFError`) at end of input; it returns the final status.

## Helpers

- `minishell.textutil`: `atoi`, `split`, `strncmp`, `isalpha`, `itoa`,
  `strtrim`, `strnstr` and `substr`, string routines with C-library-like
  semantics (`atoi` wraps to a 32-bit int, `strnstr` returns an index or
  `None`).
- `minishell.lines`: `LineReader(fd, buffer_size)` reads a file descriptor
  (or an object with `fileno()`) one line at a time as bytes, keeping the
  trailing newline; `next_line()` returns `None` at the end.
  `iter_lines(fd, buffer_size)` yields every remaining line.
- `minishell.printf`: `format_printf(template, *args)` expands
  `%c %s %p %d %i %u %x %X %%`; `printf` writes the result to standard
  output and returns its length.

## Tests

```
pip install .[test]
pytest
```