"""
Parse tree types for minicalc.

Every node records the source location of the lexeme that created it.
For binary operations that is the operator token, not either operand.

Supports:
- Literals: 3.14, 2e10
- Identifiers: hello, PI
- Arithmetic: +, -, *, /
- Comparison: ==, <, >, <=, >=
- Assignment: name = expr
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Locations
# ---------------------------------------------------------------------------


class Location(BaseModel):
    """A 0-indexed (line, column) position in the source text."""

    line: int = Field(default=0, ge=0)
    column: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.line}, {self.column})"


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryOp(StrEnum):
    """Binary operators, valued by their source spelling."""

    # Arithmetic
    SUM = "+"
    SUBTRACTION = "-"
    MULTIPLICATION = "*"
    DIVISION = "/"
    # Comparison
    GREATER_THAN = ">"
    GREATER_THAN_OR_EQUAL = ">="
    LESS_THAN = "<"
    LESS_THAN_OR_EQUAL = "<="
    EQUAL = "=="


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Identifier(BaseModel):
    """A reference to a symbol."""

    name: str = Field(description="Symbol name")
    location: Location = Field(default_factory=Location)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.name


class Number(BaseModel):
    """A numeric literal."""

    value: float = Field(description="Literal value")
    location: Location = Field(default_factory=Location)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return repr(self.value)


class BinaryOperation(BaseModel):
    """Binary operation: left op right."""

    op: BinaryOp
    left: ParseNode
    right: ParseNode
    location: Location = Field(default_factory=Location)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.left} {self.op.value} {self.right})"


class Assignment(BaseModel):
    """Assignment: name = right."""

    name: str = Field(description="Assigned symbol")
    right: ParseNode
    location: Location = Field(default_factory=Location)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.name} = {self.right}"


class Root(BaseModel):
    """
    Top of the tree: the ordered top-level statements.

    The grammar reads a single expression, so a non-empty program holds
    exactly one statement.
    """

    statements: list[ParseNode] = Field(default_factory=list)
    location: Location = Field(default_factory=Location)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return "\n".join(str(s) for s in self.statements)


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

ParseNode = Identifier | Number | BinaryOperation | Assignment | Root

# Rebuild models for recursive forward references
BinaryOperation.model_rebuild()
Assignment.model_rebuild()
Root.model_rebuild()
