"""Rendering of Tosun values as one line of text."""

from __future__ import annotations

import sys
from typing import Dict, Optional, TextIO

from .types import Value, ErrorKind, NumberVal, ErrorVal


ERROR_MESSAGES: Dict[ErrorKind, str] = {
    ErrorKind.DIVISION_BY_ZERO: 'Error: Division by Zero!',
    ErrorKind.INVALID_OPERATOR: 'Error: Invalid operator!',
    ErrorKind.INVALID_NUMBER: 'Error: Invalid number!',
}


def render(value: Value) -> str:
    """Render a value without a line terminator.

    Raises TypeError for anything that is not a Tosun value, and KeyError
    for an error kind that has no message.
    """
    if isinstance(value, NumberVal):
        return str(value.value)
    if isinstance(value, ErrorVal):
        return ERROR_MESSAGES[value.kind]
    raise TypeError(f"cannot render {type(value).__name__}")


def print_value(value: Value, out: Optional[TextIO] = None) -> None:
    out = out if out is not None else sys.stdout
    out.write(render(value) + '\n')
