"""
Lexer for minicalc.

Converts raw source text into a list of tokens with source location
tracking. Numeric literals are recognized by the number FSM; identifiers,
operators, parentheses and whitespace are handled here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .errors import InvalidNumberError, UnrecognizedCharacterError
from .ir import Location
from .number_fsm import build_number_recognizer

logger = logging.getLogger(__name__)


class TokenType(Enum):
    """Token types in minicalc."""

    # Identifiers and literals
    IDENTIFIER = "IDENTIFIER"
    NUMBER = "NUMBER"

    # Arithmetic operators
    PLUS = "+"
    MINUS = "-"
    TIMES = "*"
    DIV = "/"

    # Comparison operators
    GREATER_THAN = ">"
    GREATER_THAN_OR_EQUAL = ">="
    LESS_THAN = "<"
    LESS_THAN_OR_EQUAL = "<="
    EQUAL = "=="

    # Assignment
    ASSIGN = "="

    # Parentheses
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"

    # Special (never emitted)
    END_OF_INPUT = "END_OF_INPUT"


SINGLE_CHAR_TOKENS = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.TIMES,
    "/": TokenType.DIV,
}

# Operators that may take a trailing '=': (alone, with '=')
EQUALS_SUFFIXED_TOKENS = {
    "=": (TokenType.ASSIGN, TokenType.EQUAL),
    "<": (TokenType.LESS_THAN, TokenType.LESS_THAN_OR_EQUAL),
    ">": (TokenType.GREATER_THAN, TokenType.GREATER_THAN_OR_EQUAL),
}

WHITESPACE = " \t\r\n\f\v"

_NUMBER_RECOGNIZER = build_number_recognizer()


@dataclass(frozen=True)
class Token:
    """
    A single token in the source.

    Attributes:
        type: Type of token
        value: The lexeme, sliced from the source text
        line: Line number (0-indexed)
        column: Column number (0-indexed)
    """

    type: TokenType
    value: str
    line: int
    column: int

    @property
    def location(self) -> Location:
        return Location(line=self.line, column=self.column)

    @property
    def end_location(self) -> Location:
        """Location of the token's last character."""
        return Location(line=self.line, column=self.column + max(len(self.value) - 1, 0))

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"


def _is_ascii_letter(character: str) -> bool:
    return character.isascii() and character.isalpha()


def _is_word_char(character: str) -> bool:
    return character.isascii() and (character.isalnum() or character == "_")


class Lexer:
    """
    Lexer for minicalc.

    Offset, line and column only ever move together through advance().
    """

    def __init__(self, text: str):
        """
        Initialize lexer.

        Args:
            text: Source text to tokenize
        """
        self.text = text
        self.pos = 0
        self.line = 0
        self.column = 0
        self.tokens: list[Token] = []

    def current_char(self) -> str | None:
        """Get current character or None if at end."""
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def peek_char(self, offset: int = 1) -> str | None:
        """Peek ahead at character."""
        pos = self.pos + offset
        if pos >= len(self.text):
            return None
        return self.text[pos]

    def advance(self, count: int = 1) -> None:
        """Move forward ``count`` characters, updating line/column."""
        for _ in range(count):
            if self.pos >= len(self.text):
                return
            if self.text[self.pos] == "\n":
                self.line += 1
                self.column = 0
            else:
                self.column += 1
            self.pos += 1

    def skip_whitespace(self) -> None:
        """Skip whitespace characters, newlines included."""
        while (ch := self.current_char()) is not None and ch in WHITESPACE:
            self.advance()

    def emit(self, token_type: TokenType, length: int) -> None:
        """Append a token for the next ``length`` characters and consume them."""
        value = self.text[self.pos : self.pos + length]
        self.tokens.append(Token(token_type, value, self.line, self.column))
        self.advance(length)

    def read_identifier(self) -> int:
        """Return the length of the identifier starting at the cursor."""
        end = self.pos
        while end < len(self.text) and _is_word_char(self.text[end]):
            end += 1
        return end - self.pos

    def read_number(self) -> int:
        """
        Return the length of the number literal starting at the cursor.

        Raises:
            InvalidNumberError: If no prefix satisfies the number grammar
        """
        matched = _NUMBER_RECOGNIZER.run(self.text[self.pos :])
        if matched is None:
            raise InvalidNumberError(self.line, self.column)
        return len(matched)

    def tokenize(self) -> list[Token]:
        """
        Tokenize the entire source text.

        Returns:
            List of tokens, without an end-of-input token

        Raises:
            LexError: On the first character sequence that is not a token
        """
        while True:
            self.skip_whitespace()

            ch = self.current_char()
            if ch is None:
                break

            if _is_ascii_letter(ch):
                self.emit(TokenType.IDENTIFIER, self.read_identifier())

            elif ch in SINGLE_CHAR_TOKENS:
                self.emit(SINGLE_CHAR_TOKENS[ch], 1)

            elif ch in EQUALS_SUFFIXED_TOKENS:
                alone, with_equals = EQUALS_SUFFIXED_TOKENS[ch]
                if self.peek_char() == "=":
                    self.emit(with_equals, 2)
                else:
                    self.emit(alone, 1)

            elif "0" <= ch <= "9":
                self.emit(TokenType.NUMBER, self.read_number())

            else:
                raise UnrecognizedCharacterError(ch, self.line, self.column)

        logger.debug("Tokenized %d characters into %d tokens", len(self.text), len(self.tokens))
        return self.tokens


def tokenize(text: str) -> list[Token]:
    """
    Convenience function to tokenize source text.

    Args:
        text: Source text

    Returns:
        List of tokens
    """
    lexer = Lexer(text)
    return lexer.tokenize()
