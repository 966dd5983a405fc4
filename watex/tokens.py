from enum import Enum
from typing import Any

from .errors import IllegalCharacter


class TokenType(Enum):
    """Enumeration of token types produced by the math-mode lexer."""

    CONTROL = 1           # \name, \%, or a lone trailing \
    BRACE = 2             # { or }
    ARG = 3               # #1, #2, ...
    AMPERSAND = 4         # &
    WHITESPACE = 5        # Run of whitespace
    COMMENT = 6           # %... up to newline
    CHAR = 7              # Any other single character

    EOF = 101             # Embedded NUL character
    ERROR = 102           # Lexical error


class Side(Enum):
    """Side of a brace."""

    LEFT = 1
    RIGHT = 2


class Token:
    """Represents a lexical token in LaTeX math source."""

    __slots__ = ('type', 'value')

    def __init__(self, type_: TokenType, value: Any = None) -> None:
        """
        Initialize a token.

        Args:
            type_: Type of the token
            value: Payload of the token: the name for CONTROL, a Side for
                BRACE, an int for ARG, the text for WHITESPACE and COMMENT,
                the character for CHAR, the error kind for ERROR, None otherwise
        """
        object.__setattr__(self, 'type', type_)
        object.__setattr__(self, 'value', value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @classmethod
    def control(cls, name: str) -> 'Token':
        return cls(TokenType.CONTROL, name)

    @classmethod
    def brace(cls, side: Side) -> 'Token':
        return cls(TokenType.BRACE, side)

    @classmethod
    def arg(cls, n: int) -> 'Token':
        return cls(TokenType.ARG, n)

    @classmethod
    def ampersand(cls) -> 'Token':
        return cls(TokenType.AMPERSAND)

    @classmethod
    def whitespace(cls, text: str) -> 'Token':
        return cls(TokenType.WHITESPACE, text)

    @classmethod
    def comment(cls, text: str) -> 'Token':
        return cls(TokenType.COMMENT, text)

    @classmethod
    def char(cls, c: str) -> 'Token':
        return cls(TokenType.CHAR, c)

    @classmethod
    def eof(cls) -> 'Token':
        return cls(TokenType.EOF)

    @classmethod
    def error(cls, kind: IllegalCharacter) -> 'Token':
        return cls(TokenType.ERROR, kind)

    @property
    def is_error(self) -> bool:
        return self.type is TokenType.ERROR

    def __repr__(self) -> str:
        """Return a string representation of the token."""
        if self.value is None:
            return f"Token({self.type.name})"
        if isinstance(self.value, Side):
            return f"Token({self.type.name}, {self.value.name})"
        return f"Token({self.type.name}, {self.value!r})"

    def __eq__(self, other: Any) -> bool:
        """
        Compare tokens for equality.

        Args:
            other: Another object to compare with

        Returns:
            True if tokens are equal, False otherwise
        """
        if not isinstance(other, Token):
            return False
        return self.type == other.type and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.type, self.value))
