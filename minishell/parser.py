"""Splitting command lines into chunks and chunks into tokens."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_WHITESPACE = frozenset(" \t\n\v\f\r")
_QUOTES = frozenset("'\"")
_OPERATOR_CHARS = frozenset("|&;")


class ChunkType(enum.Enum):
    """Kind of a piece of a command line."""

    CHUNK = enum.auto()
    AND = enum.auto()
    OR = enum.auto()
    BACK = enum.auto()
    SEPARATOR = enum.auto()
    PIPE = enum.auto()


class TokenType(enum.Enum):
    """Kind of a word inside a command chunk."""

    CMD_INTERNAL = enum.auto()
    CMD_EXTERNAL = enum.auto()
    PIPE = enum.auto()
    PARAM = enum.auto()


@dataclass(frozen=True)
class Chunk:
    """A command or operator; ``start``/``end`` delimit ``text`` in the line."""

    kind: ChunkType
    text: str
    start: int
    end: int


@dataclass(frozen=True)
class Token:
    """A word of a command; ``start``/``end`` delimit it in the chunk."""

    kind: TokenType
    text: str
    start: int
    end: int


def scan_chunks(text: str) -> list[Chunk]:
    """Split a command line into commands and the operators between them."""
    chunks: list[Chunk] = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch in _WHITESPACE:
            i += 1
            continue
        nxt = text[i + 1] if i + 1 < n else ""
        if ch == "|":
            kind, width = (ChunkType.OR, 2) if nxt == "|" else (ChunkType.PIPE, 1)
        elif ch == "&":
            kind, width = (ChunkType.AND, 2) if nxt == "&" else (ChunkType.BACK, 1)
        elif ch == ";":
            kind, width = ChunkType.SEPARATOR, 1
        else:
            start = i
            while i < n and text[i] not in _OPERATOR_CHARS:
                i += 1
            chunks.append(Chunk(ChunkType.CHUNK, text[start:i], start, i))
            continue
        chunks.append(Chunk(kind, text[i:i + width], i, i + width))
        i += width
    return chunks


def scan_tokens(chunk: str) -> list[Token]:
    """Split one command into words; a quoted word may contain whitespace."""
    tokens: list[Token] = []
    i = 0
    n = len(chunk)
    while i < n:
        if chunk[i] in _WHITESPACE:
            i += 1
            continue
        start = i
        if chunk[i] in _QUOTES:
            close = chunk.find(chunk[i], i + 1)
            if close != -1:
                tokens.append(Token(TokenType.PARAM, chunk[i + 1:close], start, close + 1))
                i = close + 1
                continue
        while i < n and chunk[i] not in _WHITESPACE:
            i += 1
        tokens.append(Token(TokenType.PARAM, chunk[start:i], start, i))
    return tokens


def chunk_texts(text: str) -> list[str]:
    """Return the text of every chunk of a command line."""
    return [chunk.text for chunk in scan_chunks(text)]


def token_texts(chunk: str) -> list[str]:
    """Return the text of every word of a command."""
    return [token.text for token in scan_tokens(chunk)]