"""Core minicalc functionality: FSM engine, lexer, parser, evaluator, configuration."""

from . import ir
from .config import CalcConfig, load_config
from .errors import (
    ConfigError,
    ErrorContext,
    EvalError,
    ExpectedCloseParenError,
    InvalidNumberError,
    NestingTooDeepError,
    LexError,
    MinicalcError,
    ParseError,
    SymbolNotFoundError,
    UnexpectedEndOfLineError,
    UnexpectedTokenError,
    UnimplementedError,
    UnrecognizedCharacterError,
    format_error,
)
from .evaluator import EvalContext, evaluate, run
from .fsm import FSM, build_identifier_recognizer
from .lexer import Lexer, Token, TokenType, tokenize
from .number_fsm import build_number_recognizer
from .parser import Parser, parse
from .pipeline import evaluate_source, parse_source

__all__ = [
    "ir",
    # Errors
    "MinicalcError",
    "ErrorContext",
    "ConfigError",
    "LexError",
    "UnrecognizedCharacterError",
    "InvalidNumberError",
    "ParseError",
    "UnexpectedTokenError",
    "UnexpectedEndOfLineError",
    "ExpectedCloseParenError",
    "EvalError",
    "SymbolNotFoundError",
    "NestingTooDeepError",
    "UnimplementedError",
    "format_error",
    # FSM
    "FSM",
    "build_identifier_recognizer",
    "build_number_recognizer",
    # Pipeline stages
    "Lexer",
    "Token",
    "TokenType",
    "tokenize",
    "Parser",
    "parse",
    "EvalContext",
    "evaluate",
    "run",
    "evaluate_source",
    "parse_source",
    # Configuration
    "CalcConfig",
    "load_config",
]
