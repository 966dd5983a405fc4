from typing import Iterable, Iterator, Optional

from .registry import MacroRegistry
from .spans import Pos
from .tokens import Token


class ExpandMacros:
    """
    Macro expansion stage. TeX calls this the gullet.

    Sits between the lexer and later stages and forwards every token
    unchanged; control sequences are not substituted yet.
    """

    def __init__(self, tokens: Iterable[Pos[Token]], registry: Optional[MacroRegistry] = None) -> None:
        self.tokens: Iterator[Pos[Token]] = iter(tokens)
        self.registry: MacroRegistry = registry if registry is not None else MacroRegistry()

    def __iter__(self) -> 'ExpandMacros':
        return self

    def __next__(self) -> Pos[Token]:
        return next(self.tokens)
