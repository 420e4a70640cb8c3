"""Tests for the minicalc evaluator and the source pipeline."""

from __future__ import annotations

import math

import pytest

from minicalc.core.errors import (
    EvalError,
    NestingTooDeepError,
    SymbolNotFoundError,
    UnimplementedError,
)
from minicalc.core.evaluator import EPSILON, EvalContext, evaluate, run
from minicalc.core.ir import (
    Assignment,
    BinaryOp,
    BinaryOperation,
    Identifier,
    Location,
    Number,
    Root,
)
from minicalc.core.pipeline import evaluate_source, parse_source


def _num(value: float) -> Number:
    return Number(value=value)


class TestArithmetic:
    @pytest.mark.parametrize(
        "source, expected",
        [
            ("42", 42.0),
            ("((3.14))", 3.14),
            ("1 + 2", 3.0),
            ("7 - 10", -3.0),
            ("2 * (3 + 4)", 14.0),
            ("10 / 4", 2.5),
            ("1.5e2 / 3", 50.0),
            ("(2 + 3) * (4 - 1)", 15.0),
        ],
    )
    def test_values(self, source: str, expected: float) -> None:
        assert evaluate_source(source) == [expected]

    def test_empty_program(self) -> None:
        assert evaluate_source("") == []
        assert evaluate_source("   ") == []

    def test_division_by_zero_follows_ieee(self) -> None:
        assert evaluate_source("1 / 0") == [math.inf]
        assert evaluate_source("(0 - 1) / 0") == [-math.inf]
        assert math.isnan(evaluate_source("0 / 0")[0])


class TestComparison:
    @pytest.mark.parametrize(
        "source, expected",
        [
            ("2 > 1", 1.0),
            ("1 > 2", 0.0),
            ("2 >= 2", 1.0),
            ("1 < 1", 0.0),
            ("1 <= 1", 1.0),
            ("3 == 3", 1.0),
            ("3 == 4", 0.0),
        ],
    )
    def test_values(self, source: str, expected: float) -> None:
        assert evaluate_source(source) == [expected]

    def test_equality_within_epsilon(self) -> None:
        assert 0.1 + 0.2 != 0.3
        assert evaluate_source("0.1 + 0.2 == 0.3") == [1.0]

    def test_equality_outside_epsilon(self) -> None:
        assert evaluate_source("1 == 1.0000001") == [0.0]

    def test_epsilon_is_machine_epsilon(self) -> None:
        assert EPSILON == 2.0**-52

    def test_comparison_of_arithmetic(self) -> None:
        assert evaluate_source("2 * (3 + 4) == 14") == [1.0]


class TestSymbols:
    def test_pi_is_predefined(self, context: EvalContext) -> None:
        assert context.symbols == {"PI": math.pi}
        assert evaluate_source("PI", context) == [math.pi]

    def test_assignment_persists_in_context(self, context: EvalContext) -> None:
        assert evaluate_source("pi = 3.14", context) == [3.14]
        assert evaluate_source("pi", context) == [3.14]
        assert evaluate_source("pi * 2", context) == [6.28]

    def test_assignment_overwrites(self, context: EvalContext) -> None:
        evaluate_source("PI = 3", context)
        assert context.symbols["PI"] == 3.0
        assert evaluate_source("PI", context) == [3.0]

    def test_assignment_returns_value(self, context: EvalContext) -> None:
        assert evaluate_source("flag = 2 > 1", context) == [1.0]
        assert context.symbols["flag"] == 1.0

    def test_unassigned_symbol(self) -> None:
        with pytest.raises(SymbolNotFoundError) as exc_info:
            evaluate_source("1 + pi")
        assert exc_info.value.name == "pi"
        assert exc_info.value.location == Location(line=0, column=4)

    def test_left_operand_evaluated_first(self) -> None:
        with pytest.raises(SymbolNotFoundError) as exc_info:
            evaluate_source("a + b")
        assert exc_info.value.name == "a"

    def test_contexts_are_independent(self) -> None:
        first = EvalContext()
        evaluate_source("x = 1", first)
        with pytest.raises(SymbolNotFoundError):
            evaluate_source("x", EvalContext())

    def test_extra_constants(self) -> None:
        context = EvalContext({"E": math.e})
        assert evaluate_source("E", context) == [math.e]
        assert "PI" in context.symbols


class TestRun:
    def test_statements_share_one_context(self, context: EvalContext) -> None:
        root = Root(
            statements=[
                Assignment(name="x", right=_num(2.0)),
                BinaryOperation(
                    op=BinaryOp.MULTIPLICATION, left=Identifier(name="x"), right=_num(3.0)
                ),
            ]
        )
        assert run(root, context) == [2.0, 6.0]
        assert context.symbols["x"] == 2.0

    def test_halts_at_first_failure(self, context: EvalContext) -> None:
        root = Root(
            statements=[
                Assignment(name="x", right=_num(1.0)),
                Identifier(name="missing"),
                Assignment(name="y", right=_num(2.0)),
            ]
        )
        with pytest.raises(SymbolNotFoundError):
            run(root, context)
        assert "x" in context.symbols
        assert "y" not in context.symbols

    def test_run_creates_context_when_omitted(self) -> None:
        assert run(parse_source("PI > 3")) == [1.0]

    def test_run_requires_root(self, context: EvalContext) -> None:
        with pytest.raises(UnimplementedError):
            context.run(_num(1.0))  # type: ignore[arg-type]

    def test_overly_deep_tree_is_an_eval_error(self, context: EvalContext) -> None:
        node: BinaryOperation | Number = _num(1.0)
        for _ in range(5000):
            node = BinaryOperation(op=BinaryOp.SUM, left=node, right=_num(1.0))
        root = Root(statements=[Assignment(name="x", right=node, location=Location(column=3))])

        with pytest.raises(NestingTooDeepError) as exc_info:
            context.run(root)
        assert exc_info.value.location == Location(column=3)
        assert "x" not in context.symbols


class TestUnimplemented:
    def test_root_is_not_a_statement(self, context: EvalContext) -> None:
        with pytest.raises(UnimplementedError) as exc_info:
            evaluate(Root(statements=[]), context)
        assert exc_info.value.description == "Eval for type Root"
        assert exc_info.value.location is None

    def test_unknown_node(self, context: EvalContext) -> None:
        with pytest.raises(EvalError, match="Unimplemented"):
            evaluate("not a node", context)  # type: ignore[arg-type]
