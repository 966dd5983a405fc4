"""
Lexer (tokeniser) for LaTeX math-mode source. TeX calls this stage the mouth.

The public interface is an iterator: ``Lexer(code)`` yields ``Pos[Token]``
values on demand and stops when the character source runs out. Lexical
errors are yielded as ERROR tokens, so a single pass reports all of them.
"""

import logging
import string
from operator import length_hint
from typing import Callable, Iterable, Iterator, List, Optional

from .errors import IllegalCharacter
from .position import with_pos
from .spans import Pos
from .tokens import Side, Token

log = logging.getLogger(__name__)

ASCII_LETTERS = frozenset(string.ascii_letters)
ASCII_DIGITS = frozenset(string.digits)
COMMENT_TERMINATORS = frozenset('\n\0')
# str.isspace also accepts the ASCII information separators, which are not White_Space
INFORMATION_SEPARATORS = frozenset('\x1c\x1d\x1e\x1f')


def is_whitespace(ch: str) -> bool:
    """Check a character against the Unicode White_Space property."""
    return ch.isspace() and ch not in INFORMATION_SEPARATORS


class CharStream:
    """Positioned character stream with a single character of lookahead."""

    def __init__(self, chars: Iterable[Pos[str]]) -> None:
        self._chars: Iterator[Pos[str]] = iter(chars)
        self._peeked: Optional[Pos[str]] = None
        self._exhausted: bool = False

    def peek(self) -> Optional[Pos[str]]:
        """Return the next character without consuming it, or None at the end."""
        if self._peeked is None and not self._exhausted:
            try:
                self._peeked = next(self._chars)
            except StopIteration:
                self._exhausted = True
        return self._peeked

    def advance(self) -> Optional[Pos[str]]:
        """Consume and return the next character, or None at the end."""
        pch = self.peek()
        self._peeked = None
        return pch

    def advance_if(self, predicate: Callable[[str], bool]) -> Optional[Pos[str]]:
        """Consume the next character only if ``predicate`` accepts it."""
        pch = self.peek()
        if pch is not None and predicate(pch.val):
            self._peeked = None
            return pch
        return None

    def __length_hint__(self) -> int:
        buffered = 0 if self._peeked is None else 1
        return buffered + length_hint(self._chars)


class Lexer:
    """LaTeX math-mode lexer producing positioned tokens on demand."""

    def __init__(self, source: Iterable[str], debug: bool = False) -> None:
        """
        Initialize the lexer.

        Args:
            source: Any iterable of characters, a str included
            debug: Log every produced token at DEBUG level
        """
        self.chars: CharStream = CharStream(with_pos(source))
        self.debug: bool = debug

    def __iter__(self) -> 'Lexer':
        return self

    def __next__(self) -> Pos[Token]:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def __length_hint__(self) -> int:
        return 0 if length_hint(self.chars) == 0 else 1

    def next_token(self) -> Optional[Pos[Token]]:
        """
        Lex one token.

        Returns:
            The next positioned token, or None once the source is exhausted
        """
        pch = self.chars.advance()
        if pch is None:
            return None

        token = pch.map(self._dispatch)
        if token.val.is_error:
            log.debug(f"{token.val.value.message} at {token.span}")
        elif self.debug:
            log.debug(f"{token.val!r} at {token.span}")
        return token

    def _dispatch(self, ch: str) -> Token:
        """Classify the character that starts a token and lex the rest of it."""
        if ch == '{':
            return Token.brace(Side.LEFT)
        elif ch == '}':
            return Token.brace(Side.RIGHT)
        elif ch == '&':
            return Token.ampersand()
        elif ch == '\0':
            return Token.eof()
        elif ch == '\\':
            return self._handle_control()
        elif ch == '%':
            return Token.comment(self._build_comment())
        elif ch == '#':
            return self._handle_arg()
        elif is_whitespace(ch):
            return Token.whitespace(self._collect_whitespace(ch))
        return Token.char(ch)

    def _handle_control(self) -> Token:
        """Handle the character after a backslash."""
        pch = self.chars.advance()
        if pch is None:
            return Token.control('')
        if pch.val in ASCII_LETTERS:
            return Token.control(self._collect_command(pch.val))
        return Token.control(pch.val)

    def _handle_arg(self) -> Token:
        """Handle the character after a parameter marker."""
        pch = self.chars.advance()
        if pch is None or pch.val not in ASCII_DIGITS:
            return Token.error(IllegalCharacter('#'))
        return Token.arg(self._collect_arg(pch.val))

    # Build helpers start from the next unconsumed character

    def _build_comment(self) -> str:
        """Collect comment text up to, not including, a newline or NUL."""
        buffer = []
        while True:
            pch = self.chars.advance_if(lambda c: c not in COMMENT_TERMINATORS)
            if pch is None:
                return ''.join(buffer)
            buffer.append(pch.val)

    # Collect helpers are given the first character of the run

    def _collect_command(self, current: str) -> str:
        """Collect a control sequence name made of ASCII letters."""
        return self._collect_run(current, lambda c: c in ASCII_LETTERS)

    def _collect_arg(self, current: str) -> int:
        """Collect a run of ASCII digits and parse it as an argument number."""
        # The run always holds at least `current`, so int() cannot see an empty string
        return int(self._collect_run(current, lambda c: c in ASCII_DIGITS))

    def _collect_whitespace(self, current: str) -> str:
        """Collect a run of whitespace characters."""
        return self._collect_run(current, is_whitespace)

    def _collect_run(self, current: str, predicate: Callable[[str], bool]) -> str:
        buffer = [current]
        while True:
            pch = self.chars.advance_if(predicate)
            if pch is None:
                return ''.join(buffer)
            buffer.append(pch.val)


def tokenize(code: Iterable[str], debug: bool = False) -> List[Pos[Token]]:
    """
    Lex a whole source at once.

    Args:
        code: The LaTeX math source
        debug: Log every produced token at DEBUG level

    Returns:
        List of positioned tokens
    """
    return list(Lexer(code, debug=debug))
