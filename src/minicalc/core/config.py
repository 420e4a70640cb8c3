"""
Project configuration loaded from minicalc.toml.

Example:

    [constants]
    E = 2.718281828459045

    [output]
    precision = 6
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigError
from .evaluator import EvalContext
from .fsm import build_identifier_recognizer

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "minicalc.toml"


@dataclass
class OutputConfig:
    """How results are printed."""

    precision: int | None = None  # None prints repr(float)

    def format(self, value: float) -> str:
        if self.precision is None:
            return repr(value)
        return f"{value:.{self.precision}f}"


@dataclass
class CalcConfig:
    """Top-level minicalc configuration."""

    constants: dict[str, float] = field(default_factory=dict)
    output: OutputConfig = field(default_factory=OutputConfig)

    def make_context(self) -> EvalContext:
        """Create an evaluation context seeded with the configured constants."""
        return EvalContext(self.constants)


def _parse_constants(data: object) -> dict[str, float]:
    if not isinstance(data, dict):
        raise ConfigError(f"[constants] must be a table, got {data!r}")
    constants: dict[str, float] = {}
    recognizer = build_identifier_recognizer()
    for name, value in data.items():
        # the lexer only starts identifiers at an ASCII letter
        if recognizer.run(name) != name or not (name[:1].isascii() and name[:1].isalpha()):
            raise ConfigError(f"Constant name {name!r} is not a valid identifier")
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise ConfigError(f"Constant {name!r} must be a number, got {value!r}")
        constants[name] = float(value)
    return constants


def _parse_output(data: object) -> OutputConfig:
    if not isinstance(data, dict):
        raise ConfigError(f"[output] must be a table, got {data!r}")
    precision = data.get("precision")
    if precision is not None and (
        isinstance(precision, bool) or not isinstance(precision, int) or precision < 0
    ):
        raise ConfigError(f"output.precision must be a non-negative integer, got {precision!r}")
    return OutputConfig(precision=precision)


def load_config(path: Path | None = None) -> CalcConfig:
    """
    Load configuration from ``path`` (default: ./minicalc.toml).

    A missing file yields the defaults.

    Raises:
        ConfigError: If the file is not valid TOML or holds invalid values
    """
    if path is None:
        path = Path.cwd() / CONFIG_FILENAME

    if not path.exists():
        logger.debug("No config at %s, using defaults", path)
        return CalcConfig()

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    config = CalcConfig(
        constants=_parse_constants(data.get("constants", {})),
        output=_parse_output(data.get("output", {})),
    )
    logger.debug("Loaded %d constant(s) from %s", len(config.constants), path)
    return config
