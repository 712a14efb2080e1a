"""Launch log: timestamped lines + GitHub Actions annotations."""

import os
import sys
from datetime import datetime


def _timestamp() -> str:
    return datetime.now().strftime("%H:%M:%S")


def _is_github_actions() -> bool:
    return os.environ.get("GITHUB_ACTIONS") == "true"


def _annotate(msg: str) -> None:
    """Emit an ::error:: workflow command; data must stay on one line."""
    if not _is_github_actions():
        return
    data = msg.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
    print(f"::error::{data}", flush=True)


def launch(cmdline: str) -> None:
    print(f"[{_timestamp()}] $ {cmdline}", flush=True)


def exit_failure(cmdline: str, status: str) -> None:
    """Record a launch that ran but did not exit successfully."""
    msg = f"{cmdline} ({status})"
    _annotate(msg)
    print(f"[{_timestamp()}]   ✗ {msg}", flush=True)


def spawn_failure(cmdline: str, exc: BaseException) -> None:
    """Record a launch the OS refused to start."""
    msg = f"Failed to execute command: {cmdline}: {exc}"
    _annotate(msg)
    print(f"[{_timestamp()}] ERROR: {msg}", file=sys.stderr, flush=True)
