"""Evaluator for Tosun Lisp.

The evaluator reduces an AST to a single value by a recursive walk. A
number literal becomes a number (or an `InvalidNumber` error when it is
out of range). A composite form evaluates its first operand into an
accumulator and folds the operator over the remaining operands strictly
left to right. Errors are values: once the accumulator or an operand is
an error, that error is carried unchanged to the result of the fold.
"""

from __future__ import annotations

import re
from typing import List, Optional

from .ast import Program, NumberLit, SExpr, Node
from .parser import parse_program, NUMBER_PATTERN
from .types import (
    Value, ErrorKind, NumberVal,
    make_number, make_error, is_error, in_int_range,
)


OPERATORS = ('+', '-', '*', '/', '%')


def truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def truncating_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * truncating_div(a, b)


class Evaluator:
    """Reduces Tosun ASTs to values."""
    def __init__(self, debug_level: int = 0, debug_file: Optional[str] = 'debug.txt'):
        self.debug_level = debug_level
        self.debug_fp = open(debug_file, 'w') if debug_level > 0 and debug_file else None

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg)

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    # Public API
    def run(self, program: Program) -> List[Value]:
        """Evaluate every top-level expression of a program, in order."""
        results = []
        for node in program.body:
            result = self.evaluate(node)
            if self.debug_level >= 1:
                self.debug(f"result {result!r}")
            results.append(result)
        return results

    def evaluate(self, node: Node) -> Value:
        if isinstance(node, NumberLit):
            return self.evaluate_number(node)
        if isinstance(node, SExpr):
            return self.evaluate_sexpr(node)
        raise NotImplementedError(f"evaluate: unexpected node type {type(node).__name__}")

    def evaluate_number(self, node: NumberLit) -> Value:
        if re.fullmatch(NUMBER_PATTERN, node.text) and in_int_range(int(node.text)):
            result = make_number(int(node.text))
        else:
            result = make_error(ErrorKind.INVALID_NUMBER)
        if self.debug_level >= 3:
            self.debug(f"number {node.text} -> {result!r}")
        return result

    def evaluate_sexpr(self, node: SExpr) -> Value:
        op = node.operator.name
        if not node.operands:
            # the grammar never produces this; only hand-built trees can
            return make_error(ErrorKind.INVALID_OPERATOR)
        acc = self.evaluate(node.operands[0])
        if len(node.operands) == 1 and not is_error(acc) and op not in OPERATORS:
            return make_error(ErrorKind.INVALID_OPERATOR)
        for operand in node.operands[1:]:
            acc = self.apply_operator(acc, op, self.evaluate(operand))
        return acc

    def apply_operator(self, acc: Value, op: str, rhs: Value) -> Value:
        # errors dominate: return whichever side failed first
        if is_error(acc):
            return acc
        if is_error(rhs):
            return rhs
        result = self.apply_arithmetic(acc, op, rhs)
        if self.debug_level >= 2:
            self.debug(f"apply {op} {acc!r} {rhs!r} -> {result!r}")
        return result

    def apply_arithmetic(self, a: NumberVal, op: str, b: NumberVal) -> Value:
        x, y = a.value, b.value
        if op == '+':
            return make_number(x + y)
        if op == '-':
            return make_number(x - y)
        if op == '*':
            return make_number(x * y)
        if op == '/':
            if y == 0:
                return make_error(ErrorKind.DIVISION_BY_ZERO)
            return make_number(truncating_div(x, y))
        if op == '%':
            if y == 0:
                return make_error(ErrorKind.DIVISION_BY_ZERO)
            return make_number(truncating_mod(x, y))
        return make_error(ErrorKind.INVALID_OPERATOR)


def evaluate(node: Node) -> Value:
    """Evaluate a single AST node with a default evaluator."""
    return Evaluator().evaluate(node)


def apply_operator(acc: Value, op: str, rhs: Value) -> Value:
    """Combine two values with a default evaluator."""
    return Evaluator().apply_operator(acc, op, rhs)


def run_program(source: str, debug_level: int = 0) -> List[Value]:
    """Convenience function to parse and evaluate one line of Tosun source."""
    program = parse_program(source)
    evaluator = Evaluator(debug_level=debug_level)
    try:
        return evaluator.run(program)
    finally:
        evaluator.close()
