"""Interactive read-evaluate-print loop for Tosun Lisp.

Each line is parsed, evaluated and printed before the next one is read.
Lines share nothing but the evaluator's debug trace, so a syntax error or
an error value on one line has no effect on the following lines.
"""

from __future__ import annotations

import builtins
import sys
from typing import Iterable, Optional, TextIO

try:
    import readline  # noqa: F401
except ImportError:
    readline = None

from .errors import TosunSyntaxError
from .evaluator import Evaluator
from .parser import parse_program
from .printer import print_value

VERSION = '0.0.0.0.3'
PROMPT = '==> '
BANNER = f"Tosun Lisp version {VERSION}\nPress Ctrl+c to Exit\n"


def eval_line(line: str, evaluator: Evaluator, out: Optional[TextIO] = None) -> bool:
    """Parse, evaluate and print one input line.

    Returns False if the line could not be parsed; the syntax error is
    printed in place of a result.
    """
    out = out if out is not None else sys.stdout
    try:
        program = parse_program(line)
    except TosunSyntaxError as e:
        evaluator.debug(f"syntax error: {e.summary()}")
        out.write(e.describe() + '\n')
        return False
    for value in evaluator.run(program):
        print_value(value, out)
    return True


def run_lines(lines: Iterable[str], evaluator: Evaluator, out: Optional[TextIO] = None) -> bool:
    """Evaluate lines as if typed at the prompt, skipping blank ones.

    Returns True if every line parsed.
    """
    ok = True
    for line in lines:
        line = line.rstrip('\n')
        if not line.strip():
            continue
        if not eval_line(line, evaluator, out):
            ok = False
    return ok


def repl(evaluator: Optional[Evaluator] = None, out: Optional[TextIO] = None) -> None:
    """Run the interactive loop until end of input or Ctrl-C."""
    out = out if out is not None else sys.stdout
    evaluator = evaluator if evaluator is not None else Evaluator()
    out.write(BANNER + '\n')
    try:
        while True:
            try:
                line = builtins.input(PROMPT)
            except (EOFError, KeyboardInterrupt):
                out.write('\n')
                break
            eval_line(line, evaluator, out)
    finally:
        evaluator.close()
