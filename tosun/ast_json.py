"""JSON serialization/deserialization for Tosun AST.

This module converts between Tosun AST dataclasses and plain Python
dict/list structures suitable for JSON encoding. Loading validates the
shape of every node, so a tree read back from JSON is one the parser
could have produced.
"""

from __future__ import annotations

import re
from typing import Any, Dict, List

from .ast import Program, NumberLit, Symbol, SExpr, Node
from .parser import NUMBER_PATTERN, SYMBOL_PATTERN


def ast_to_obj(node: Any) -> Any:
    if isinstance(node, Program):
        return {"type": "Program", "body": [ast_to_obj(n) for n in node.body]}
    if isinstance(node, NumberLit):
        return {"type": "Number", "text": node.text}
    if isinstance(node, Symbol):
        return {"type": "Symbol", "name": node.name}
    if isinstance(node, SExpr):
        return {
            "type": "SExpr",
            "operator": ast_to_obj(node.operator),
            "operands": [ast_to_obj(o) for o in node.operands],
        }

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any) -> Node:
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    t = obj.get("type")
    if t == "Program":
        return Program(body=[ast_from_obj(n) for n in obj["body"]])
    if t == "Number":
        text = obj["text"]
        if not isinstance(text, str) or not re.fullmatch(NUMBER_PATTERN, text):
            raise ValueError(f"invalid number literal {text!r}")
        return NumberLit(text=text)
    if t == "Symbol":
        name = obj["name"]
        if not isinstance(name, str) or not re.fullmatch(SYMBOL_PATTERN, name):
            raise ValueError(f"invalid symbol {name!r}")
        return Symbol(name=name)
    if t == "SExpr":
        operator = ast_from_obj(obj["operator"])
        if not isinstance(operator, Symbol):
            raise ValueError("SExpr operator must be a Symbol")
        operands = [ast_from_obj(o) for o in obj["operands"]]
        if not operands:
            raise ValueError("SExpr needs at least one operand")
        if not all(isinstance(o, (NumberLit, SExpr)) for o in operands):
            raise ValueError("SExpr operands must be Number or SExpr nodes")
        return SExpr(operator=operator, operands=operands)

    raise ValueError(f"Unknown AST node type: {t}")


def programs_to_obj(programs: List[Program]) -> List[Dict[str, Any]]:
    """Serialize the per-line programs of a script."""
    return [ast_to_obj(p) for p in programs]


def programs_from_obj(obj: Any) -> List[Program]:
    if not isinstance(obj, list):
        raise TypeError("AST file must contain a list of programs")
    programs = [ast_from_obj(o) for o in obj]
    for p in programs:
        if not isinstance(p, Program):
            raise ValueError(f"expected Program, got {type(p).__name__}")
    return programs
