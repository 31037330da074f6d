"""Value definitions for Tosun Lisp.

Every evaluation step in Tosun produces exactly one value: either a
number or an error. Errors are ordinary values rather than exceptions so
that the evaluator can carry them forward through an operator fold
without any separate failure channel. The set of error kinds is closed;
adding a kind means adding a message for it in `tosun.printer` as well.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

# Representable integer range for number literals (64-bit signed).
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


class ErrorKind(Enum):
    """The closed set of evaluation errors."""
    DIVISION_BY_ZERO = 'DivisionByZero'
    INVALID_OPERATOR = 'InvalidOperator'
    INVALID_NUMBER = 'InvalidNumber'


@dataclass(frozen=True)
class NumberVal:
    """An integer result."""
    value: int

    def __repr__(self) -> str:
        return f"Number({self.value})"


@dataclass(frozen=True)
class ErrorVal:
    """An evaluation error.

    Once produced, an error value is carried unchanged to the final result
    of the expression it occurred in.
    """
    kind: ErrorKind

    def __repr__(self) -> str:
        return f"Error({self.kind.value})"


Value = Union[NumberVal, ErrorVal]


def make_number(n: int) -> NumberVal:
    return NumberVal(n)


def make_error(kind: ErrorKind) -> ErrorVal:
    return ErrorVal(kind)


def is_error(value: Value) -> bool:
    """Return True if the value is an error and should short-circuit."""
    return isinstance(value, ErrorVal)


def in_int_range(n: int) -> bool:
    return INT_MIN <= n <= INT_MAX
