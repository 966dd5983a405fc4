"""
Diagnostics for lexical errors.

The lexer reports errors as ERROR tokens in its output stream. This module
turns those tokens into compiler-style diagnostics that point into the
source text.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from .errors import IllegalCharacter
from .spans import Pos, Span
from .tokens import Token

# Error codes by lexical error kind
ERROR_CODES = {
    IllegalCharacter: "L001",
}


@dataclass(frozen=True)
class Diagnostic:
    """A message attached to a source location."""
    message: str
    span: Span
    severity: str = "error"  # "error", "warning"
    code: Optional[str] = None

    def render(self, code: str) -> str:
        """Re-print ``code`` with a caret under this diagnostic's span."""
        return self.span.highlight_msg_in_code(code, self.message)

    def __str__(self) -> str:
        prefix = self.severity.upper()
        if self.code:
            prefix = f"{prefix}[{self.code}]"
        return f"{prefix}: {self.message}\n  --> {self.span}\n"


def collect_diagnostics(tokens: Iterable[Pos[Token]]) -> List[Diagnostic]:
    """Collect a diagnostic for every ERROR token in a token stream."""
    diagnostics = []
    for token in tokens:
        if token.val.is_error:
            kind = token.val.value
            diagnostics.append(Diagnostic(kind.message, token.span, code=ERROR_CODES.get(type(kind))))
    return diagnostics


def render_diagnostics(code: str, diagnostics: Iterable[Diagnostic]) -> str:
    return ''.join(diagnostic.render(code) for diagnostic in diagnostics)
