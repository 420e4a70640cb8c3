"""
Tree-walking evaluator for minicalc.

Every value is a float. Comparisons produce 1.0 for true and 0.0 for
false. Assignments write to the symbol table of the evaluation context,
which lives for one run and is shared by all of its statements.
"""

from __future__ import annotations

import logging
import math
import operator
import sys
from collections.abc import Callable

from .errors import NestingTooDeepError, SymbolNotFoundError, UnimplementedError
from .ir import Assignment, BinaryOp, BinaryOperation, Identifier, Number, ParseNode, Root

logger = logging.getLogger(__name__)

EPSILON = sys.float_info.epsilon

SymbolTable = dict[str, float]


def _divide(left: float, right: float) -> float:
    """IEEE-754 division: x/0 is ±inf, 0/0 and nan/0 are nan."""
    if right != 0.0:
        return left / right
    if left == 0.0 or math.isnan(left):
        return math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


def _equal(left: float, right: float) -> bool:
    return abs(left - right) < EPSILON


ARITHMETIC: dict[BinaryOp, Callable[[float, float], float]] = {
    BinaryOp.SUM: operator.add,
    BinaryOp.SUBTRACTION: operator.sub,
    BinaryOp.MULTIPLICATION: operator.mul,
    BinaryOp.DIVISION: _divide,
}

COMPARISON: dict[BinaryOp, Callable[[float, float], bool]] = {
    BinaryOp.GREATER_THAN: operator.gt,
    BinaryOp.GREATER_THAN_OR_EQUAL: operator.ge,
    BinaryOp.LESS_THAN: operator.lt,
    BinaryOp.LESS_THAN_OR_EQUAL: operator.le,
    BinaryOp.EQUAL: _equal,
}


def builtin_constants() -> SymbolTable:
    """Symbols every context starts with."""
    return {"PI": math.pi}


class EvalContext:
    """
    Evaluation state for one run: the symbol table.

    Args:
        constants: Extra symbols to seed on top of the built-in ones
    """

    def __init__(self, constants: dict[str, float] | None = None) -> None:
        self.symbols: SymbolTable = builtin_constants()
        if constants:
            self.symbols.update(constants)

    def evaluate(self, node: ParseNode) -> float:
        """Evaluate a single statement node.

        Raises:
            EvalError: If a symbol is undefined or the node kind is unsupported.
        """
        if isinstance(node, Number):
            return node.value

        if isinstance(node, BinaryOperation):
            return self._evaluate_binary(node)

        if isinstance(node, Assignment):
            value = self.evaluate(node.right)
            self.symbols[node.name] = value
            logger.debug("Assigned %s = %r", node.name, value)
            return value

        if isinstance(node, Identifier):
            if node.name not in self.symbols:
                raise SymbolNotFoundError(node.name, node.location)
            return self.symbols[node.name]

        raise UnimplementedError(f"Eval for type {type(node).__name__}")

    def _evaluate_binary(self, node: BinaryOperation) -> float:
        # Both operands are always evaluated, left first.
        left = self.evaluate(node.left)
        right = self.evaluate(node.right)

        if node.op in ARITHMETIC:
            return ARITHMETIC[node.op](left, right)
        if node.op in COMPARISON:
            return 1.0 if COMPARISON[node.op](left, right) else 0.0

        raise UnimplementedError(f"Eval for operator {node.op.value}")

    def run(self, root: Root) -> list[float]:
        """Evaluate each top-level statement in order, stopping at the first error."""
        if not isinstance(root, Root):
            raise UnimplementedError(f"Run for type {type(root).__name__}")

        results: list[float] = []
        for statement in root.statements:
            try:
                results.append(self.evaluate(statement))
            except RecursionError as e:
                raise NestingTooDeepError(statement.location) from e
        logger.debug("Evaluated %d statement(s)", len(results))
        return results


def evaluate(node: ParseNode, context: EvalContext) -> float:
    """Evaluate one node against an existing context."""
    return context.evaluate(node)


def run(root: Root, context: EvalContext | None = None) -> list[float]:
    """Evaluate every statement of ``root``.

    Args:
        root: Parsed program.
        context: Context to evaluate in; a fresh one is created when omitted.

    Returns:
        One value per top-level statement.

    Raises:
        EvalError: On the first statement that fails.
    """
    if context is None:
        context = EvalContext()
    return context.run(root)
