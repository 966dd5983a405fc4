"""
watex: a position-aware lexer for LaTeX math mode.
"""

__version__ = '0.1.0'

from .errors import (
    ArityError,
    IllegalCharacter,
    MacroRegistrationError,
    UnknownMacroError,
    WatexError,
)
from .spans import Mode, Pos, Span
from .tokens import Side, Token, TokenType
from .position import PositionTracker, with_pos
from .lexer import CharStream, Lexer, tokenize
from .diagnostics import Diagnostic, collect_diagnostics, render_diagnostics
from .registry import MacroContext, MacroRegistry, MacroResult, TexMacro
from .expander import ExpandMacros

__all__ = [
    "Lexer",
    "CharStream",
    "tokenize",
    "Token",
    "TokenType",
    "Side",
    "Span",
    "Pos",
    "Mode",
    "PositionTracker",
    "with_pos",
    "IllegalCharacter",
    "WatexError",
    "MacroRegistrationError",
    "UnknownMacroError",
    "ArityError",
    "Diagnostic",
    "collect_diagnostics",
    "render_diagnostics",
    "TexMacro",
    "MacroContext",
    "MacroResult",
    "MacroRegistry",
    "ExpandMacros",
]
