"""
Recursive descent parser for minicalc.

Grammar (precedence low to high):
    expr        → IDENT "=" right_expr | right_expr
    right_expr  → comp_term (rel_op comp_term)?
    comp_term   → term (("+" | "-") term)?
    term        → factor (("*" | "/") factor)?
    factor      → NUMBER | IDENT | "(" right_expr ")"
    rel_op      → ">" | ">=" | "<" | "<=" | "=="

Each binary level takes at most one operator, so "1 + 2 + 3" is rejected
at the second "+". A program is a single expression.

Parentheses nest at most MAX_NESTING_DEPTH levels; the "(" that opens one
level too many is reported as an unexpected token.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .errors import ExpectedCloseParenError, UnexpectedEndOfLineError, UnexpectedTokenError
from .ir import (
    Assignment,
    BinaryOp,
    BinaryOperation,
    Identifier,
    Location,
    Number,
    ParseNode,
    Root,
)
from .lexer import Token, TokenType

logger = logging.getLogger(__name__)

RELATIONAL_OPS: dict[TokenType, BinaryOp] = {
    TokenType.GREATER_THAN: BinaryOp.GREATER_THAN,
    TokenType.GREATER_THAN_OR_EQUAL: BinaryOp.GREATER_THAN_OR_EQUAL,
    TokenType.LESS_THAN: BinaryOp.LESS_THAN,
    TokenType.LESS_THAN_OR_EQUAL: BinaryOp.LESS_THAN_OR_EQUAL,
    TokenType.EQUAL: BinaryOp.EQUAL,
}

ADDITIVE_OPS: dict[TokenType, BinaryOp] = {
    TokenType.PLUS: BinaryOp.SUM,
    TokenType.MINUS: BinaryOp.SUBTRACTION,
}

MULTIPLICATIVE_OPS: dict[TokenType, BinaryOp] = {
    TokenType.TIMES: BinaryOp.MULTIPLICATION,
    TokenType.DIV: BinaryOp.DIVISION,
}

END_OF_LINE = "EOL"

# Each paren level costs several Python frames; stay well under the
# default recursion limit.
MAX_NESTING_DEPTH = 64


class Parser:
    """Recursive descent parser over a fully materialized token list."""

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.pos = 0
        self.depth = 0

    @property
    def current(self) -> Token | None:
        return self.peek(0)

    def peek(self, offset: int = 0) -> Token | None:
        idx = self.pos + offset
        if idx < len(self.tokens):
            return self.tokens[idx]
        return None

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def match(self, table: dict[TokenType, BinaryOp]) -> tuple[Token, BinaryOp] | None:
        """Consume the current token if it is one of ``table``'s operators."""
        tok = self.current
        if tok is not None and tok.type in table:
            self.advance()
            return tok, table[tok.type]
        return None

    def end_location(self) -> Location:
        """Location of the last consumed character, for end-of-input errors."""
        if self.pos == 0:
            return Location()
        return self.tokens[self.pos - 1].end_location

    # -- Entry point --

    def parse(self) -> Root:
        """
        Parse the token list into a Root node.

        Raises:
            ParseError: If the tokens do not form exactly one expression
        """
        if not self.tokens:
            return Root(statements=[])

        statement = self.parse_expr()

        trailing = self.current
        if trailing is not None:
            raise UnexpectedTokenError(trailing.value, trailing.location)

        logger.debug("Parsed statement %s", statement)
        return Root(statements=[statement])

    # -- Grammar rules --

    def parse_expr(self) -> ParseNode:
        """IDENT '=' right_expr | right_expr"""
        tok = self.current
        following = self.peek(1)
        if (
            tok is not None
            and tok.type == TokenType.IDENTIFIER
            and following is not None
            and following.type == TokenType.ASSIGN
        ):
            self.advance()  # identifier
            self.advance()  # =
            right = self.parse_right_expr()
            return Assignment(name=tok.value, right=right, location=tok.location)
        return self.parse_right_expr()

    def parse_right_expr(self) -> ParseNode:
        """comp_term (rel_op comp_term)?"""
        return self._parse_binary(self.parse_comp_term, RELATIONAL_OPS)

    def parse_comp_term(self) -> ParseNode:
        """term (('+' | '-') term)?"""
        return self._parse_binary(self.parse_term, ADDITIVE_OPS)

    def parse_term(self) -> ParseNode:
        """factor (('*' | '/') factor)?"""
        return self._parse_binary(self.parse_factor, MULTIPLICATIVE_OPS)

    def _parse_binary(
        self, operand: Callable[[], ParseNode], table: dict[TokenType, BinaryOp]
    ) -> ParseNode:
        left = operand()
        matched = self.match(table)
        if matched is None:
            return left
        op_tok, op = matched
        right = operand()
        return BinaryOperation(op=op, left=left, right=right, location=op_tok.location)

    def parse_factor(self) -> ParseNode:
        """NUMBER | IDENT | '(' right_expr ')'"""
        tok = self.current

        if tok is None:
            raise UnexpectedEndOfLineError(self.end_location())

        if tok.type == TokenType.NUMBER:
            self.advance()
            return Number(value=float(tok.value), location=tok.location)

        if tok.type == TokenType.IDENTIFIER:
            self.advance()
            return Identifier(name=tok.value, location=tok.location)

        if tok.type == TokenType.LEFT_PAREN:
            if self.depth >= MAX_NESTING_DEPTH:
                raise UnexpectedTokenError(tok.value, tok.location)
            self.advance()
            self.depth += 1
            expr = self.parse_right_expr()
            self._expect_close_paren()
            self.depth -= 1
            return expr

        raise UnexpectedTokenError(tok.value, tok.location)

    def _expect_close_paren(self) -> None:
        tok = self.current
        if tok is None:
            raise ExpectedCloseParenError(END_OF_LINE, self.end_location())
        if tok.type != TokenType.RIGHT_PAREN:
            raise ExpectedCloseParenError(tok.value, tok.location)
        self.advance()


def parse(tokens: list[Token]) -> Root:
    """Parse a token list into an AST.

    Args:
        tokens: Tokens produced by the lexer

    Returns:
        Root node holding the parsed statement (empty for empty input).

    Raises:
        ParseError: If the tokens are not a valid expression.
    """
    return Parser(tokens).parse()
