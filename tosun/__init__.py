# Tosun Lisp package
# This package provides a parser, evaluator and REPL for the Tosun Lisp calculator.
from .evaluator import run_program, Evaluator, evaluate, apply_operator
from .errors import TosunSyntaxError
from .parser import parse_program
from .printer import render
from .types import ErrorKind, NumberVal, ErrorVal, make_number, make_error, is_error

__all__ = [
    'run_program',
    'Evaluator',
    'evaluate',
    'apply_operator',
    'parse_program',
    'render',
    'TosunSyntaxError',
    'ErrorKind',
    'NumberVal',
    'ErrorVal',
    'make_number',
    'make_error',
    'is_error',
]
