from typing import Any, Optional

from .spans import Span


class IllegalCharacter:
    """Lexical error kind: a character that cannot start a token here."""

    __slots__ = ('char',)

    def __init__(self, char: str) -> None:
        """
        Initialize the error kind.

        Args:
            char: The offending character
        """
        self.char: str = char

    @property
    def message(self) -> str:
        return f"Illegal character '{self.char}'"

    def __repr__(self) -> str:
        return f"IllegalCharacter({self.char!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, IllegalCharacter):
            return False
        return self.char == other.char

    def __hash__(self) -> int:
        return hash(('IllegalCharacter', self.char))


class WatexError(Exception):
    """Base class for watex errors."""

    def __init__(self, message: str, position: Optional[Span] = None) -> None:
        """
        Initialize a watex error.

        Args:
            message: Error message
            position: Source location where the error occurred, if known
        """
        super().__init__(message)
        self.position: Optional[Span] = position
        self.message: str = message

    def __str__(self) -> str:
        """Format the error message with position if available."""
        if self.position:
            return f"{self.message} at {self.position}"
        return self.message


class MacroRegistrationError(WatexError):
    """Error raised when a macro cannot be registered."""


class UnknownMacroError(WatexError):
    """Error raised when invoking a control sequence with no registered macro."""

    def __init__(self, name: str, position: Optional[Span] = None) -> None:
        """
        Initialize an unknown macro error.

        Args:
            name: Control sequence name that was looked up
            position: Position of the control sequence
        """
        super().__init__(f"Undefined control sequence '\\{name}'", position)
        self.name: str = name


class ArityError(WatexError):
    """Error raised when a macro is given more arguments than it accepts."""

    def __init__(
        self,
        name: str,
        arity: int,
        given: int,
        position: Optional[Span] = None
    ) -> None:
        """
        Initialize an arity error.

        Args:
            name: Control sequence name
            arity: Maximum number of arguments the macro accepts
            given: Number of arguments supplied
            position: Position of the control sequence
        """
        message = f"Macro '\\{name}' takes at most {arity} argument(s), got {given}"
        super().__init__(message, position)
        self.name: str = name
        self.arity: int = arity
        self.given: int = given
