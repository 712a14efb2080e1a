"""Subprocess wrapper — the single mock seam for all tests."""

import os
import subprocess
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

Token = str | bytes | os.PathLike


@dataclass
class Result:
    returncode: int
    stdout: bytes
    stderr: bytes

    @property
    def success(self) -> bool:
        return self.returncode == 0


def merge_env(bindings: Iterable[tuple[Token, Token]]) -> dict[str, str]:
    """Return a copy of os.environ with bindings applied in order.

    Supplied bindings override inherited variables; on duplicate keys the
    last binding wins.
    """
    merged = dict(os.environ)
    for key, value in bindings:
        merged[os.fsdecode(key)] = os.fsdecode(value)
    return merged


def run(args: Sequence[Token], env: Iterable[tuple[Token, Token]] | None = None) -> Result:
    """Run a command to completion and capture raw stdout/stderr.

    Spawn errors (OSError, or ValueError for NUL bytes and malformed
    variable names) propagate to the caller.
    """
    merged_env = None
    if env is not None:
        merged_env = merge_env(env)

    proc = subprocess.run(
        args,
        capture_output=True,
        env=merged_env,
    )
    return Result(returncode=proc.returncode, stdout=proc.stdout, stderr=proc.stderr)
