"""Running a parsed command line."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence

from .external import execute_external_command
from .internal import execute_cd, execute_exit, execute_pwd
from .parser import Chunk, ChunkType, TokenType, token_texts

BUILTINS = ("cd", "pwd", "echo", "exit", "clear")
EXTERNALS = ("cat", "ls", "whoami")

_CLEAR_SCREEN = "\033[H\033[2J"


def _echo(args: Sequence[str]) -> bool:
    print(" ".join(args[1:]))
    return True


def _clear(args: Sequence[str]) -> bool:
    stream = sys.stdout
    try:
        stream.write(_CLEAR_SCREEN)
        stream.flush()
    except (OSError, ValueError) as exc:
        print(f"clear: {exc}", file=sys.stderr)
        return False
    return True


_BUILTIN_HANDLERS: dict[str, Callable[[Sequence[str]], bool]] = {
    "cd": execute_cd,
    "pwd": lambda args: execute_pwd(),
    "echo": _echo,
    "exit": lambda args: execute_exit(),
    "clear": _clear,
}


def should_execute_next(status: bool, operator: ChunkType | None) -> bool:
    """Decide whether the command after ``operator`` runs, given the last status."""
    if operator is ChunkType.OR:
        return not status
    if operator is ChunkType.AND:
        return bool(status)
    return operator is ChunkType.SEPARATOR


def classify_command(command: str) -> TokenType:
    """Tell whether a command name is a builtin, a known program, or neither."""
    if command in BUILTINS:
        return TokenType.CMD_INTERNAL
    if command in EXTERNALS:
        return TokenType.CMD_EXTERNAL
    return TokenType.PARAM


def execute_builtin_command(args: Sequence[str]) -> bool:
    """Run a builtin command given its words."""
    return _BUILTIN_HANDLERS[args[0]](args)


def _run_one(text: str) -> bool:
    args = token_texts(text) or [""]
    kind = classify_command(args[0])
    if kind is TokenType.CMD_INTERNAL:
        return execute_builtin_command(args)
    if kind is TokenType.CMD_EXTERNAL:
        return execute_external_command(args)
    print(f"{args[0]}: command not found", file=sys.stderr)
    return False


def execute_command(chunks: Sequence[Chunk], start: int = 0) -> bool:
    """Run the commands from ``start`` on, following the operators between them."""
    status = False
    index = start
    while index < len(chunks):
        status = _run_one(chunks[index].text)
        operator = chunks[index + 1].kind if index + 1 < len(chunks) else None
        if not should_execute_next(status, operator):
            break
        index += 2
    return status