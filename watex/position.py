from operator import length_hint
from typing import Iterable, Iterator

from .spans import Pos, Span


class PositionTracker:
    """Iterator that tags each character of a source with its (line, column)."""

    def __init__(self, chars: Iterable[str]) -> None:
        self.chars: Iterator[str] = iter(chars)
        self.line: int = 1
        self.column: int = 1

    def __iter__(self) -> 'PositionTracker':
        return self

    def __next__(self) -> Pos[str]:
        ch = next(self.chars)
        result = Pos(ch, Span(self.line, self.column))
        if ch == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return result

    def __length_hint__(self) -> int:
        return length_hint(self.chars)


def with_pos(chars: Iterable[str]) -> PositionTracker:
    """Wrap a character source so that it yields positioned characters."""
    return PositionTracker(chars)
