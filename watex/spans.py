from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Generic, TypeVar

T = TypeVar('T')
U = TypeVar('U')


class Mode(Enum):
    """TeX mode of the source being lexed. Not consulted by any lexing rule yet."""

    TEXT = 1
    MATH = 2


class Span:
    """A (line, column) source location, both 1-indexed."""

    __slots__ = ('line', 'column')

    def __init__(self, line: int, column: int) -> None:
        """
        Initialize a span.

        Args:
            line: Line number, starting at 1
            column: Column number, starting at 1
        """
        object.__setattr__(self, 'line', line)
        object.__setattr__(self, 'column', column)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def highlight_msg_in_code(self, code: str, msg: str) -> str:
        """
        Re-print the source with a caret pointing at this span.

        Every line of ``code`` is emitted followed by a newline. Right after
        the line this span points into, an extra line is inserted holding
        ``column - 1`` spaces, a caret, a space and ``msg``.

        Args:
            code: The complete source text the span refers to
            msg: Message printed next to the caret

        Returns:
            The rendered diagnostic
        """
        # Lines end only at '\n' (or '\r\n'), matching how positions are counted
        pieces = code.split('\n')
        lines = [line[:-1] if line.endswith('\r') else line for line in pieces[:-1]]
        if pieces[-1]:
            lines.append(pieces[-1])

        result = []
        for number, line in enumerate(lines, 1):
            result.append(line)
            result.append('\n')
            if number == self.line:
                result.append(' ' * (self.column - 1))
                result.append(f"^ {msg}\n")
        return ''.join(result)

    def as_tuple(self) -> tuple:
        return (self.line, self.column)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Span):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __lt__(self, other: Span) -> bool:
        return self.as_tuple() < other.as_tuple()

    def __le__(self, other: Span) -> bool:
        return self.as_tuple() <= other.as_tuple()

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __repr__(self) -> str:
        return f"Span({self.line}, {self.column})"

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}"


class Pos(Generic[T]):
    """A value tagged with the span it was read from."""

    __slots__ = ('val', 'span')

    def __init__(self, val: T, span: Span) -> None:
        object.__setattr__(self, 'val', val)
        object.__setattr__(self, 'span', span)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def map(self, fn: Callable[[T], U]) -> Pos[U]:
        """Return a new Pos holding ``fn(val)`` at the same span."""
        return Pos(fn(self.val), self.span)

    @property
    def line(self) -> int:
        return self.span.line

    @property
    def column(self) -> int:
        return self.span.column

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Pos):
            return NotImplemented
        return self.val == other.val and self.span == other.span

    def __hash__(self) -> int:
        return hash((self.val, self.span))

    def __repr__(self) -> str:
        return f"Pos({self.val!r}, {self.span.line}:{self.span.column})"
