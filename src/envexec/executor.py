"""Launch subprocesses with a fixed set of environment variables.

Intended for tests: every failure raises AssertionError with a diagnostic of
what was run and what it printed, so the calling test fails at the launch
site.
"""

from collections.abc import Iterable

from envexec import diagnostic, log, process
from envexec.process import Token


class Executor:
    """An execution environment: bindings provided to every launched process."""

    def __init__(self, env: Iterable[tuple[Token, Token]] = ()):
        self._env = list(env)

    @property
    def env(self) -> tuple:
        return tuple(self._env)

    def extend(self, env: Iterable[tuple[Token, Token]]) -> "Executor":
        """Return a new Executor with extra bindings appended after these."""
        return Executor([*self._env, *env])

    def run(self, args: Iterable[Token]) -> None:
        """Launch a subprocess and wait for it to complete.

        Raises AssertionError if args is empty, the process cannot be
        spawned, or it exits unsuccessfully. Raises UnicodeDecodeError if a
        failed process wrote invalid UTF-8 to stdout or stderr.
        """
        Execution.run(args, list(self._env))

    def __repr__(self) -> str:
        return f"Executor({self._env!r})"


class Execution:
    """A single launch: command, arguments, and the result once finished."""

    def __init__(self, cmd: Token, args: list[Token]):
        self.cmd = cmd
        self.args = args
        self.result: process.Result | None = None

    @classmethod
    def run(cls, args: Iterable[Token], env: Iterable[tuple[Token, Token]]) -> "Execution":
        tokens = list(args)
        if not tokens:
            raise AssertionError("Missing command")

        execution = cls(tokens[0], tokens[1:])
        cmdline = diagnostic.command_line(execution.cmd, execution.args)
        log.launch(cmdline)

        try:
            execution.result = process.run([execution.cmd, *execution.args], env=env)
        except (OSError, ValueError) as exc:
            # subprocess rejects NUL bytes and "=" in variable names with ValueError
            log.spawn_failure(cmdline, exc)
            raise AssertionError(f"Failed to execute command: {exc}\n{execution}") from exc

        if not execution.result.success:
            log.exit_failure(cmdline, diagnostic.describe_status(execution.result.returncode))
            raise AssertionError(str(execution))
        return execution

    def __str__(self) -> str:
        return diagnostic.format_execution(self.cmd, self.args, self.result)
