"""Commands the shell runs itself."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence


class ShellExit(Exception):
    """Raised when the shell is asked to terminate."""

    def __init__(self, code: int = 0) -> None:
        super().__init__(code)
        self.code = code


def execute_cd(args: Sequence[str]) -> bool:
    """Change directory to ``args[1]``, or to ``$HOME`` when none is given."""
    if len(args) < 2:
        target = os.environ.get("HOME")
        if target is None:
            print("cd: HOME not set", file=sys.stderr)
            return False
    else:
        target = args[1]
    try:
        os.chdir(target)
    except OSError as exc:
        print(f"cd: {exc.strerror}", file=sys.stderr)
        return False
    return True


def execute_pwd() -> bool:
    """Print the current working directory."""
    try:
        cwd = os.getcwd()
    except OSError as exc:
        print(f"pwd: {exc.strerror}", file=sys.stderr)
        return False
    print(cwd)
    return True


def execute_exit() -> bool:
    """Flush pending output and ask the shell to terminate with status 0."""
    for stream in (sys.stdout, sys.stderr):
        if stream is not None:
            try:
                stream.flush()
            except (OSError, ValueError):
                pass
    raise ShellExit(0)