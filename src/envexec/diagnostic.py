"""Colorized failure report: command line, exit status, stdout, stderr."""

import os
import signal
from collections.abc import Sequence

from envexec.process import Result, Token

MAGENTA = "\x1b[95m"
GREEN = "\x1b[92m"
RED = "\x1b[91m"
RESET = "\x1b[0m"


def _color_enabled() -> bool:
    return not os.environ.get("NO_COLOR")


def _paint(color: str, text: str) -> str:
    if not _color_enabled():
        return text
    return f"{color}{text}{RESET}"


def describe_status(returncode: int) -> str:
    """Describe a subprocess return code.

    Negative return codes mean the child was killed by a signal.
    """
    if returncode >= 0:
        return f"exit status: {returncode}"
    signum = -returncode
    try:
        name = signal.Signals(signum).name
    except ValueError:
        return f"signal: {signum}"
    return f"signal: {signum} ({name})"


def display_token(token: Token) -> str:
    """Render a token as text, replacing bytes that are not valid UTF-8."""
    return os.fsencode(token).decode("utf-8", "replace")


def command_line(cmd: Token, args: Sequence[Token]) -> str:
    """Join the command and its arguments with single spaces."""
    return " ".join(display_token(token) for token in [cmd, *args])


def format_execution(cmd: Token, args: Sequence[Token], result: Result | None = None) -> str:
    """Build the multi-line diagnostic for an execution.

    The command line is always shown. With a result attached, the status is
    added when it is not a success, followed by any non-empty stdout and
    stderr. Output must be valid UTF-8; UnicodeDecodeError propagates.
    """
    lines = [_paint(MAGENTA, command_line(cmd, args))]
    if result is not None:
        if not result.success:
            lines.append(describe_status(result.returncode))
        if result.stdout:
            lines.append(_paint(GREEN, result.stdout.decode("utf-8")))
        if result.stderr:
            lines.append(_paint(RED, result.stderr.decode("utf-8")))
    return "\n".join(lines)
