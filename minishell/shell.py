"""Interactive prompt loop."""

from __future__ import annotations

import argparse
import getpass
import os
import socket
import sys
from dataclasses import dataclass
from typing import TextIO

from .executor import execute_command
from .internal import ShellExit
from .parser import ChunkType, scan_chunks


@dataclass(frozen=True)
class UserInfo:
    """Who is logged in and on which machine."""

    user_name: str
    device_name: str


def login() -> UserInfo:
    """Look up the current user and host name."""
    try:
        user = getpass.getuser()
    except (OSError, KeyError):
        user = ""
    return UserInfo(user, socket.gethostname())


def read_line(stream: TextIO) -> str | None:
    """Read one line without its newline; ``None`` at end of input."""
    line = stream.readline()
    if not line:
        return None
    return line[:-1] if line.endswith("\n") else line


def format_prompt(user: UserInfo, cwd: str, home: str | None) -> str:
    """Build the prompt, shortening a path under ``home`` to ``~``."""
    if home and cwd.startswith(home):
        location = "~" + cwd[len(home):]
    else:
        location = cwd
    return f"{user.user_name}@{user.device_name}:{location}$ "


def chunk_type_name(kind: object) -> str:
    """Name of a chunk kind for display."""
    return kind.name if isinstance(kind, ChunkType) else "UNKNOWN"


def main(argv: list[str] | None = None) -> int:
    """Run the interactive shell until ``exit`` or end of input."""
    parser = argparse.ArgumentParser(prog="minishell", description="A small interactive shell.")
    parser.parse_args(argv)

    user = login()
    while True:
        print(format_prompt(user, os.getcwd(), os.environ.get("HOME")), end="", flush=True)
        line = read_line(sys.stdin)
        if line is None:
            print()
            return 0
        chunks = scan_chunks(line)
        try:
            execute_command(chunks)
        except ShellExit as exc:
            return exc.code
        print("Parsed Array:")
        for index, chunk in enumerate(chunks):
            print(f"  [{index}]: {chunk.text} - {chunk_type_name(chunk.kind)}")