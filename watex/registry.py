import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from .errors import ArityError, MacroRegistrationError, UnknownMacroError
from .spans import Pos, Span
from .tokens import Token

log = logging.getLogger(__name__)


class MacroContext:
    """Arguments handed to a macro handler."""

    __slots__ = ('name', 'args', 'position')

    def __init__(
        self,
        name: str,
        args: Sequence[List[Pos[Token]]],
        position: Optional[Span] = None
    ) -> None:
        self.name: str = name
        self.args: Tuple[List[Pos[Token]], ...] = tuple(args)
        self.position: Optional[Span] = position


class MacroResult:
    """Tokens a macro handler expands to."""

    __slots__ = ('tokens',)

    def __init__(self, tokens: Sequence[Pos[Token]] = ()) -> None:
        self.tokens: List[Pos[Token]] = list(tokens)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, MacroResult):
            return False
        return self.tokens == other.tokens


MacroHandler = Callable[[MacroContext], MacroResult]


class TexMacro:
    """Configuration of a procedural TeX macro."""

    __slots__ = ('handler', 'names', 'arity')

    def __init__(self, handler: MacroHandler, names: Sequence[str], arity: int = 0) -> None:
        """
        Initialize a macro definition.

        Args:
            handler: Function called with a MacroContext, returning a MacroResult
            names: Control sequence names (without backslash) bound to the handler
            arity: Maximum number of arguments the handler accepts
        """
        if isinstance(names, str):
            names = (names,)
        self.handler: MacroHandler = handler
        self.names: Tuple[str, ...] = tuple(names)
        self.arity: int = arity

    def __repr__(self) -> str:
        return f"TexMacro({getattr(self.handler, '__name__', self.handler)!r}, names={self.names}, arity={self.arity})"


class MacroRegistry:
    """Registry mapping control sequence names to macro handlers."""

    def __init__(self) -> None:
        """Initialize the macro registry."""
        self.macros: Dict[str, TexMacro] = {}

    def register(self, macro: TexMacro, replace: bool = False) -> TexMacro:
        """
        Register a macro under each of its names.

        Args:
            macro: The macro definition to register
            replace: Overwrite existing macros with the same names

        Returns:
            The registered macro

        Raises:
            MacroRegistrationError: On an invalid definition, or a name that
                is already taken and ``replace`` is False
        """
        if not macro.names:
            raise MacroRegistrationError("Macro must have at least one name")
        if macro.arity < 0:
            raise MacroRegistrationError(f"Macro arity must be non-negative, got {macro.arity}")

        for name in macro.names:
            if not isinstance(name, str) or not name:
                raise MacroRegistrationError(f"Invalid macro name {name!r}")
            if name in self.macros and not replace:
                raise MacroRegistrationError(f"Macro '\\{name}' is already registered")

        for name in macro.names:
            self.macros[name] = macro
        log.debug(f"Registered {macro!r}")
        return macro

    def tex_macro(self, *names: str, arity: int = 0) -> Callable[[MacroHandler], MacroHandler]:
        """
        Decorator registering a function as a macro handler.

        With no names, the function's own name is used.
        """
        def decorator(handler: MacroHandler) -> MacroHandler:
            self.register(TexMacro(handler, names or (handler.__name__,), arity))
            return handler
        return decorator

    def lookup(self, name: str) -> Optional[TexMacro]:
        return self.macros.get(name)

    def names(self) -> List[str]:
        return sorted(self.macros)

    def invoke(
        self,
        name: str,
        args: Sequence[List[Pos[Token]]] = (),
        position: Optional[Span] = None
    ) -> MacroResult:
        """
        Call the handler registered for a control sequence.

        Args:
            name: Control sequence name
            args: Argument token lists
            position: Position of the control sequence, used in errors

        Returns:
            The handler's result

        Raises:
            UnknownMacroError: If no macro is registered under ``name``
            ArityError: If more than ``arity`` arguments are supplied
        """
        macro = self.macros.get(name)
        if macro is None:
            raise UnknownMacroError(name, position)
        if len(args) > macro.arity:
            raise ArityError(name, macro.arity, len(args), position)
        return macro.handler(MacroContext(name, args, position))

    def __contains__(self, name: object) -> bool:
        return name in self.macros

    def __len__(self) -> int:
        return len(self.macros)
