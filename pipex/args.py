"""Splitting a command string into arguments."""

from __future__ import annotations

_OPENERS = "'\"([{"
_CLOSERS = "'\")]}"


class _Nesting:
    """Tracks open quotes and brackets while scanning a command string."""

    __slots__ = ("_depth",)

    def __init__(self) -> None:
        # Slots: single quote, double quote, parenthesis, bracket, brace.
        self._depth = [0, 0, 0, 0, 0]

    @property
    def balanced(self) -> bool:
        return not any(self._depth)

    def feed(self, ch: str) -> None:
        if ch == "'":
            self._depth[0] ^= 1
        elif ch == '"':
            self._depth[1] ^= 1
        elif ch in _OPENERS:
            self._depth[_OPENERS.index(ch)] += 1
        elif ch in _CLOSERS:
            self._depth[_CLOSERS.index(ch)] -= 1


def _token_length(s: str, start: int) -> int:
    nesting = _Nesting()
    end = start
    while end < len(s) and (s[end] != " " or not nesting.balanced):
        nesting.feed(s[end])
        end += 1
    return end - start


def command_split(s: str) -> list[str]:
    """Split ``s`` on spaces, keeping quoted and bracketed runs together.

    Quotes and brackets are kept in the resulting arguments. Only the space
    character separates arguments; an unbalanced opener swallows the rest
    of the string.
    """
    tokens: list[str] = []
    pos = 0
    while pos < len(s):
        if s[pos] == " ":
            pos += 1
            continue
        length = _token_length(s, pos)
        tokens.append(s[pos:pos + length])
        pos += length
    return tokens