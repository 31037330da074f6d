"""CLI entry point for the Tosun Lisp calculator.

Usage:
    python -m tosun [-v|-vv|-vvv]
    python -m tosun [-v...] <program_file>
    python -m tosun [-v...] --emit-ast <program_file>
    python -m tosun [-v...] --ast <ast_json_file>

Options:
  -v            Increase debug verbosity (can be repeated)
  --emit-ast    Parse the given file line by line and emit an AST JSON file
  --ast         Evaluate a previously emitted AST JSON file

With no program file the interactive prompt is started. A program file is
evaluated one line at a time, exactly as if each line had been typed at
the prompt. Debug information is written to `debug.txt` in the current
directory when verbosity is greater than zero.
"""

import argparse
import json
import sys
from pathlib import Path

from .ast_json import programs_to_obj, programs_from_obj
from .errors import TosunSyntaxError
from .evaluator import Evaluator
from .parser import parse_program
from .printer import print_value
from .repl import repl, run_lines


def read_source(path: Path) -> str:
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(1)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Tosun Lisp calculator")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='PROGRAM_FILE', help='emit AST JSON for the given program file')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='evaluate AST from a JSON file')
    parser.add_argument('program', nargs='?', help='program file to evaluate line by line')
    args = parser.parse_args(argv)

    # Emit AST mode
    if args.emit_ast:
        program_file = Path(args.emit_ast)
        source = read_source(program_file)
        programs = []
        for lineno, line in enumerate(source.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                programs.append(parse_program(line))
            except TosunSyntaxError as e:
                print(f"{program_file}:{lineno}: {e.describe()}", file=sys.stderr)
                sys.exit(1)
        out_path = program_file.with_name(program_file.name + '.ast.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            json.dump(programs_to_obj(programs), out, ensure_ascii=False, indent=2)
        print(str(out_path))
        return

    # Evaluate from AST JSON
    if args.ast:
        ast_path = Path(args.ast)
        source = read_source(ast_path)
        try:
            programs = programs_from_obj(json.loads(source))
        except (TypeError, ValueError, KeyError) as e:
            print(f"Error: invalid AST file {ast_path}: {e}", file=sys.stderr)
            sys.exit(1)
        evaluator = Evaluator(debug_level=args.v)
        try:
            for program in programs:
                for value in evaluator.run(program):
                    print_value(value)
        finally:
            evaluator.close()
        return

    # Evaluate a program file
    if args.program:
        source = read_source(Path(args.program))
        evaluator = Evaluator(debug_level=args.v)
        try:
            ok = run_lines(source.splitlines(), evaluator)
        finally:
            evaluator.close()
        if not ok:
            sys.exit(1)
        return

    # Default: interactive prompt
    repl(Evaluator(debug_level=args.v))


if __name__ == '__main__':
    main()
