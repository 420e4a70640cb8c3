"""
Error types for minicalc lexing, parsing, and evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from .ir.nodes import Location


@dataclass
class ErrorContext:
    """
    Source location of an error.

    Attributes:
        line: Line number (0-indexed)
        column: Column number (0-indexed)
        snippet: Optional source line the error occurred on
    """

    line: int
    column: int
    snippet: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "line 0, column 5"
        """
        location = f"line {self.line}, column {self.column}"
        if self.snippet is not None:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format the source line with an error marker under the column."""
        prefix = f"{self.line:4d} | "
        marker = " " * (len(prefix) + self.column) + "^^^"
        return f"{prefix}{self.snippet}\n{marker}"


class MinicalcError(Exception):
    """Base exception for all minicalc errors."""

    kind = "Error"

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.context:
            return f"{self.kind}: {self.message} at ({self.context.line}, {self.context.column})"
        return f"{self.kind}: {self.message}"

    @property
    def location(self) -> Location | None:
        if self.context is None:
            return None
        return Location(line=self.context.line, column=self.context.column)

    def render(self) -> str:
        """Full rendering including the source snippet, if one is attached."""
        if self.context and self.context.snippet is not None:
            return f"{self.kind}: {self.message}\n{self.context.format()}"
        return str(self)


class ConfigError(MinicalcError):
    """Raised when a minicalc.toml file holds invalid values."""

    kind = "ConfigError"


# =============================================================================
# Lexical errors
# =============================================================================


class LexError(MinicalcError):
    """Raised when source text cannot be split into tokens."""


class UnrecognizedCharacterError(LexError):
    """The lexer met a character outside the supported alphabet."""

    kind = "UnrecognizedCharacter"

    def __init__(self, character: str, line: int, column: int):
        self.character = character
        super().__init__(f"unrecognized character {character!r}", ErrorContext(line, column))


class InvalidNumberError(LexError):
    """
    A digit sequence does not satisfy the number grammar.

    Examples:
    - "2." (fraction marker with no digits)
    - "83e" (exponent marker with no digits)
    """

    kind = "InvalidNumber"

    def __init__(self, line: int, column: int):
        super().__init__("invalid number literal", ErrorContext(line, column))


# =============================================================================
# Syntax errors
# =============================================================================


class ParseError(MinicalcError):
    """Raised when a token sequence does not match the grammar."""


class UnexpectedTokenError(ParseError):
    """
    A token appeared where no grammar production applies.

    Also raised for tokens left over after a complete expression.
    """

    kind = "UnexpectedToken"

    def __init__(self, lexeme: str, location: Location):
        self.lexeme = lexeme
        super().__init__(
            f"unexpected token {lexeme!r}", ErrorContext(location.line, location.column)
        )


class UnexpectedEndOfLineError(ParseError):
    """The token stream ended while a value was still expected."""

    kind = "UnexpectedEndOfLine"

    def __init__(self, location: Location):
        super().__init__("unexpected end of line", ErrorContext(location.line, location.column))


class ExpectedCloseParenError(ParseError):
    """An opened parenthesis was never closed."""

    kind = "ExpectedCloseParen"

    def __init__(self, found: str, location: Location):
        self.found = found
        super().__init__(
            f"expected ')', found {found!r}", ErrorContext(location.line, location.column)
        )


# =============================================================================
# Evaluation errors
# =============================================================================


class EvalError(MinicalcError):
    """Raised when an AST cannot be evaluated."""


class SymbolNotFoundError(EvalError):
    """An identifier was read before any assignment to it."""

    kind = "SymbolNotFound"

    def __init__(self, name: str, location: Location):
        self.name = name
        super().__init__(
            f"symbol {name!r} not found", ErrorContext(location.line, location.column)
        )


class NestingTooDeepError(EvalError):
    """A statement's tree is nested deeper than the evaluator can walk."""

    kind = "NestingTooDeep"

    def __init__(self, location: Location):
        super().__init__(
            "expression nested too deeply", ErrorContext(location.line, location.column)
        )


class UnimplementedError(EvalError):
    """The evaluator has no rule for a node kind."""

    kind = "Unimplemented"

    def __init__(self, description: str):
        self.description = description
        super().__init__(description)


def format_error(error: MinicalcError, source: str) -> str:
    """
    Render an error with the offending source line underneath.

    Args:
        error: Error raised by any pipeline stage
        source: Source text the pipeline was run on

    Returns:
        Multi-line rendering with a marker under the error column
    """
    if error.context is None:
        return str(error)

    lines = source.split("\n")
    if not 0 <= error.context.line < len(lines):
        return error.render()
    context = replace(error.context, snippet=lines[error.context.line])
    return f"{error.kind}: {error.message}\n{context.format()}"
