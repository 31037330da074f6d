"""Abstract Syntax Tree (AST) definitions for Tosun Lisp.

The parser classifies every parsed form into one of these node classes,
so the evaluator never has to inspect grammar tags or delimiters. A
composite form keeps its operator symbol apart from its ordered operand
list.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class Node:
    """Base class for all AST nodes."""
    pass


@dataclass
class Program(Node):
    """All top-level expressions of one input line."""
    body: List[Node] = field(default_factory=list)


@dataclass
class NumberLit(Node):
    text: str  # literal as written, e.g. '-42'


@dataclass
class Symbol(Node):
    name: str


@dataclass
class SExpr(Node):
    operator: Symbol
    operands: List[Node]  # NumberLit or SExpr, in source order
