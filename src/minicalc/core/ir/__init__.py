"""
Intermediate representation for minicalc: the parse tree.
"""

from .nodes import (
    Assignment,
    BinaryOp,
    BinaryOperation,
    Identifier,
    Location,
    Number,
    ParseNode,
    Root,
)

__all__ = [
    "Assignment",
    "BinaryOp",
    "BinaryOperation",
    "Identifier",
    "Location",
    "Number",
    "ParseNode",
    "Root",
]
