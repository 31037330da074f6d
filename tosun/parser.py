"""Parser for Tosun Lisp.

Input lines are parsed with a Lark LALR parser configured with the
grammar below. The resulting parse tree is transformed into the typed
AST of `tosun.ast`, so that every composite form arrives at the
evaluator with its operator already separated from its operands.

The grammar deliberately accepts any symbol in operator position.
Whether the symbol names a supported operator is decided at evaluation
time, where an unknown operator becomes an `InvalidOperator` error value
instead of a syntax error. A composite form must have at least one
operand; `(+)` is rejected here.

Two top-level shapes are accepted: zero or more expressions, e.g.
`(+ 1 2) 7`, or the bare Polish form `+ 1 2 3`, which is read as a
single s-expression without the surrounding parentheses.
"""

from __future__ import annotations

from typing import List

from lark import Lark, Transformer
from lark.exceptions import UnexpectedInput

from .ast import Program, NumberLit, Symbol, SExpr, Node
from .errors import TosunSyntaxError


# Literal forms, shared with the evaluator and the AST JSON loader.
NUMBER_PATTERN = r'-?[0-9]+'
SYMBOL_PATTERN = r'[^\s()0-9]+'

TOSUN_GRAMMAR = r"""
    start: expr*              -> program
         | SYMBOL expr+       -> bare_sexpr

    ?expr: NUMBER
         | sexpr

    sexpr: "(" SYMBOL expr+ ")"

    // Numbers win over symbols, so "-5" is a number and "-" a symbol.
    // Symbols never contain digits: "(+1 2)" is "+" applied to 1 and 2.
    NUMBER.2: /""" + NUMBER_PATTERN + r"""/
    SYMBOL: /""" + SYMBOL_PATTERN + r"""/

    %import common.WS
    %ignore WS
"""


TOSUN_PARSER = Lark(
    TOSUN_GRAMMAR,
    parser='lalr',
    propagate_positions=True,
    maybe_placeholders=False,
)


class ASTTransformer(Transformer):
    """Transforms the raw parse tree into an AST."""

    def program(self, items):
        return Program(body=list(items))

    def bare_sexpr(self, items):
        return Program(body=[SExpr(operator=items[0], operands=list(items[1:]))])

    def sexpr(self, items):
        operator = items[0]
        operands: List[Node] = list(items[1:])
        return SExpr(operator=operator, operands=operands)

    def NUMBER(self, token):
        return NumberLit(str(token))

    def SYMBOL(self, token):
        return Symbol(str(token))


def parse_program(source: str) -> Program:
    """Parse one line of Tosun source into an AST Program.

    Raises `TosunSyntaxError` if the source does not match the grammar.
    """
    try:
        tree = TOSUN_PARSER.parse(source)
    except UnexpectedInput as e:
        raise TosunSyntaxError(source, e) from None
    return ASTTransformer().transform(tree)
