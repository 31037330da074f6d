import pytest

from tosun.ast import NumberLit, Symbol, SExpr, Node
from tosun.evaluator import Evaluator, evaluate, apply_operator, run_program
from tosun.parser import parse_program
from tosun.types import ErrorKind, INT_MAX, INT_MIN, make_number, make_error


def eval_one(source):
    results = run_program(source)
    assert len(results) == 1
    return results[0]


def test_single_number():
    assert eval_one('42') == make_number(42)
    assert eval_one('-17') == make_number(-17)
    assert eval_one('007') == make_number(7)


def test_scenarios():
    assert eval_one('(+ 1 2 3)') == make_number(6)
    assert eval_one('(/ 10 0)') == make_error(ErrorKind.DIVISION_BY_ZERO)
    assert eval_one('(^ 2 3)') == make_error(ErrorKind.INVALID_OPERATOR)
    assert eval_one('(* (+ 1 2) (- 5 1))') == make_number(12)
    assert eval_one('(+ 1 (/ 1 0) 5)') == make_error(ErrorKind.DIVISION_BY_ZERO)


@pytest.mark.parametrize('op, operands, expected', [
    ('+', [1, 2, 3, 4], 10),
    ('-', [10, 1, 2], 7),
    ('*', [2, 3, 4], 24),
    ('/', [100, 3, 2], 16),
    ('/', [-7, 2], -3),
    ('/', [7, -2], -3),
    ('/', [-7, -2], 3),
    ('%', [-7, 2], -1),
    ('%', [7, -2], 1),
    ('%', [100, 7, 3], 2),
])
def test_left_to_right_fold(op, operands, expected):
    source = '(' + op + ' ' + ' '.join(str(n) for n in operands) + ')'
    assert eval_one(source) == make_number(expected)


def test_division_by_zero_dominates_outer_operator():
    assert eval_one('(* 0 (% 5 0))') == make_error(ErrorKind.DIVISION_BY_ZERO)
    assert eval_one('(- (+ 1 2) (* 3 (/ 4 (- 2 2))))') == make_error(ErrorKind.DIVISION_BY_ZERO)


def test_first_error_in_fold_wins():
    assert eval_one('(+ (^ 1 1) (/ 1 0))') == make_error(ErrorKind.INVALID_OPERATOR)
    assert eval_one('(+ (/ 1 0) (^ 1 1))') == make_error(ErrorKind.DIVISION_BY_ZERO)
    # an error operand wins over an unknown outer operator
    assert eval_one('(^ (/ 1 0) 2)') == make_error(ErrorKind.DIVISION_BY_ZERO)


def test_unknown_operator_independent_of_operands():
    for source in ('(^ 2 3)', '(^ 0 0)', '(foo 1 2 3)', '(^ 5)'):
        assert eval_one(source) == make_error(ErrorKind.INVALID_OPERATOR)


def test_operator_followed_directly_by_number():
    assert eval_one('(+1 2)') == make_number(3)
    assert eval_one('(*2 3)') == make_number(6)
    assert eval_one('(-5 1)') == make_number(4)


def test_single_operand_returns_operand():
    assert eval_one('(- 5)') == make_number(5)
    assert eval_one('(/ 0)') == make_number(0)


def test_number_literal_range():
    assert eval_one(str(INT_MAX)) == make_number(INT_MAX)
    assert eval_one(str(INT_MIN)) == make_number(INT_MIN)
    assert eval_one(str(INT_MAX + 1)) == make_error(ErrorKind.INVALID_NUMBER)
    assert eval_one(f'(+ 1 {INT_MIN - 1})') == make_error(ErrorKind.INVALID_NUMBER)


def test_arithmetic_results_follow_host_integers():
    assert eval_one(f'(* {INT_MAX} 2)') == make_number(INT_MAX * 2)


def test_apply_operator_short_circuits():
    div = make_error(ErrorKind.DIVISION_BY_ZERO)
    bad_op = make_error(ErrorKind.INVALID_OPERATOR)
    assert apply_operator(div, '+', make_number(1)) is div
    assert apply_operator(make_number(1), '+', div) is div
    assert apply_operator(div, '^', bad_op) is div
    assert apply_operator(make_number(1), '?', make_number(2)) == bad_op
    assert apply_operator(make_number(9), '%', make_number(0)) == div


def test_evaluate_hand_built_tree():
    tree = SExpr(Symbol('*'), [NumberLit('6'), SExpr(Symbol('-'), [NumberLit('10'), NumberLit('3')])])
    assert evaluate(tree) == make_number(42)
    assert evaluate(NumberLit('twelve')) == make_error(ErrorKind.INVALID_NUMBER)


def test_only_plain_decimal_literals_are_numbers():
    for text in ('1_000', ' 5', '5 ', '+5', '\u0663', '--1', ''):
        assert evaluate(NumberLit(text)) == make_error(ErrorKind.INVALID_NUMBER)


def test_empty_composite_is_invalid_operator():
    assert evaluate(SExpr(Symbol('+'), [])) == make_error(ErrorKind.INVALID_OPERATOR)


def test_unexpected_node_raises():
    with pytest.raises(NotImplementedError):
        evaluate(Node())


def test_run_returns_one_value_per_expression():
    program = parse_program('(+ 1 1) 3 (/ 1 0)')
    assert Evaluator().run(program) == [
        make_number(2), make_number(3), make_error(ErrorKind.DIVISION_BY_ZERO),
    ]


def test_debug_trace_to_stdout(capsys):
    evaluator = Evaluator(debug_level=3, debug_file=None)
    evaluator.run(parse_program('(+ 1 2)'))
    out = capsys.readouterr().out
    assert 'number 1 -> Number(1)' in out
    assert 'apply + Number(1) Number(2) -> Number(3)' in out
    assert 'result Number(3)' in out


def test_debug_trace_to_file(tmp_path):
    debug_file = tmp_path / 'debug.txt'
    evaluator = Evaluator(debug_level=1, debug_file=str(debug_file))
    evaluator.run(parse_program('(/ 1 0)'))
    evaluator.close()
    assert debug_file.read_text(encoding='utf-8') == 'result Error(DivisionByZero)\n'
