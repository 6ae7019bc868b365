"""The interactive read-eval loop."""

from __future__ import annotations

from collections.abc import Callable

from minishell.shell import Shell, ShellExit

PROMPT = "minishell> "


def repl(shell: Shell, read_line: Callable[[str], str | None]) -> int:
    """Read lines until end of input or ``exit``; return the final status."""
    while True:
        try:
            line = read_line(PROMPT)
        except EOFError:
            line = None
        if line is None:
            shell.stdout.write("exit\n")
            break
        try:
            shell.run_line(line)
        except ShellExit as exc:
            return exc.code
    return shell.exit_code


def main(argv: list[str] | None = None) -> int:
    """Start an interactive shell on the standard streams."""
    try:
        import readline
    except ImportError:
        readline = None
    shell = Shell()
    try:
        status = repl(shell, input)
    finally:
        if readline is not None:
            try:
                readline.clear_history()
            except AttributeError:
                pass
    return status & 0xFF


if __name__ == "__main__":
    raise SystemExit(main())