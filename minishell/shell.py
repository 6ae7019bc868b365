"""The shell state and its built-in commands."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Mapping
from typing import TextIO

from minishell.textutil import atoi, isalpha, split


class ShellExit(Exception):
    """Raised when the shell must terminate with ``code``."""

    def __init__(self, code: int) -> None:
        super().__init__(code)
        self.code = code


def _copy_environ(environ: Mapping[str, str] | Iterable[str]) -> list[str]:
    if isinstance(environ, Mapping):
        return [f"{key}={value}" for key, value in environ.items()]
    return list(environ)


class Shell:
    """A minimal interactive shell with a handful of built-in commands.

    The environment is kept as a list of ``NAME=value`` strings, in the order
    it was received.
    """

    def __init__(
        self,
        environ: Mapping[str, str] | Iterable[str] | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.env_list = _copy_environ(os.environ if environ is None else environ)
        self.exit_code = 0
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self._builtins = (
            ("echo", self.echo),
            ("pwd", self.pwd),
            ("exit", self.exit),
            ("env", self.env),
            ("cd", self.cd),
        )

    def _write(self, text: str) -> None:
        self.stdout.write(text)

    def _error(self, message: str, status: int) -> None:
        self.stderr.write(message + "\n")
        self.exit_code = status

    def run_line(self, line: str) -> None:
        """Split ``line`` on spaces and run the command it names."""
        command = split(line, " ")
        if command:
            self.dispatch(command)

    def dispatch(self, command: list[str]) -> None:
        """Run the built-in whose name the first word starts with."""
        if not command:
            return
        name = command[0]
        for prefix, handler in self._builtins:
            if name.startswith(prefix):
                handler(command)
                return

    def echo(self, command: list[str]) -> None:
        """Print the arguments; ``-n`` drops the newline, ``$?`` shows the last status."""
        args = command[1:]
        first = args[0] if args else ""
        if first.startswith("$?"):
            self._write(f"{self.exit_code}\n")
            return
        no_newline = first.startswith("-n")
        words = args[1:] if no_newline else args
        self._write(" ".join(words))
        if not no_newline:
            self._write("\n")
        self.exit_code = 0

    def pwd(self, command: list[str]) -> None:
        """Print the current working directory."""
        if len(command) > 1:
            self._error("pwd: too many arguments", 1)
            return
        try:
            cwd = os.getcwd()
        except OSError:
            self._error("getcwd failed", 1)
            raise ShellExit(self.exit_code) from None
        self._write(cwd + "\n")
        self.exit_code = 0

    def _check_numeric(self, argument: str) -> None:
        if argument.startswith("#"):
            self.exit_code = 0
            self._write("exit\n")
            raise ShellExit(self.exit_code)
        if any(isalpha(char) for char in argument):
            self._error("exit: numeric argument required", 2)
            raise ShellExit(self.exit_code)

    def exit(self, command: list[str]) -> None:
        """Leave the shell, optionally with the given status."""
        if len(command) < 2:
            self._write("exit\n")
            raise ShellExit(self.exit_code)
        self._check_numeric(command[1])
        if len(command) > 2:
            self._error("exit: too many arguments", 1)
            return
        self.exit_code = atoi(command[1])
        self._write("exit\n")
        raise ShellExit(self.exit_code)

    def env(self, command: list[str]) -> None:
        """Print every environment entry."""
        if len(command) > 1:
            self.stderr.write(f"env: ’{command[1]}’: No such file or directory\n")
            self.exit_code = 127
            return
        for entry in self.env_list:
            self._write(entry + "\n")
        self.exit_code = 0

    def cd(self, command: list[str]) -> None:
        """Change directory to the argument, or to ``$HOME`` without one."""
        try:
            oldpwd = os.getcwd()
        except OSError:
            self._error("getcwd failed", 1)
            raise ShellExit(self.exit_code) from None
        if len(command) > 2:
            self._error("minishell: cd: too many arguments", 1)
            return
        self.update_env("OLDPWD=", oldpwd)
        if len(command) == 1:
            home = os.environ.get("HOME")
            if home is None:
                self.stderr.write("HOME not set\n")
                return
            try:
                os.chdir(home)
            except OSError as exc:
                self.stderr.write(f"{exc.strerror}\n")
            return
        try:
            os.chdir(command[1])
        except OSError as exc:
            self.stderr.write(f"{exc.strerror}\n")
            self.exit_code = 1

    def update_env(self, prefix: str, value: str) -> None:
        """Replace the first entry starting with ``prefix`` by ``prefix + value``.

        Nothing is added when no entry matches.
        """
        for index, entry in enumerate(self.env_list):
            if entry.startswith(prefix):
                self.env_list[index] = prefix + value
                return