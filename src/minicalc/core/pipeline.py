"""
Run the full lexer → parser → evaluator chain on source text.
"""

from __future__ import annotations

from .evaluator import EvalContext, run
from .ir import Root
from .lexer import tokenize
from .parser import parse


def parse_source(text: str) -> Root:
    """Tokenize and parse ``text``.

    Raises:
        LexError: If tokenization fails.
        ParseError: If the tokens are not a valid expression.
    """
    return parse(tokenize(text))


def evaluate_source(text: str, context: EvalContext | None = None) -> list[float]:
    """Evaluate ``text`` and return one value per top-level statement.

    Example:
        >>> evaluate_source("x = 2 * 3")
        [6.0]

    Raises:
        MinicalcError: The first lexical, syntax or evaluation error.
    """
    return run(parse_source(text), context)
