import pytest
from hypothesis import given, strategies as st

from iota import Interpreter, evaluate_expression
from iota.errors import (
    DivisionByZeroError,
    ExpectedOperatorError,
    ExpectedTokenError,
    IotaError,
    NestingTooDeepError,
    TrailingInputError,
    UnexpectedTokenError,
)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", 3),
        ("(* (- 7 4) (+ (/ 26 2) 1))", 42),
        ("5", 5),
        ("  (  -  100   1 )  ", 99),
    ]
)
def test_evaluate_expression(source, expected):
    assert evaluate_expression(source) == expected


@pytest.mark.parametrize(
    "source,error",
    [
        ("(+ 1 2) 3", TrailingInputError),
        ("(+ 1)", ExpectedTokenError),
        ("(% 1 2)", ExpectedOperatorError),
        ("(+ 1 2", ExpectedTokenError),
        ("(+ a 2)", UnexpectedTokenError),
        ("(/ 3 (- 2 2))", DivisionByZeroError),
    ]
)
def test_evaluate_expression_errors(source, error):
    with pytest.raises(error):
        evaluate_expression(source)


@pytest.mark.parametrize("source", ["", "(", ")", "(+ 1 2) 3", "(/ 1 0)", "?"])
def test_every_failure_is_an_iota_error(source):
    with pytest.raises(IotaError):
        evaluate_expression(source)


def test_interpreter_applies_its_depth_limit():
    interp = Interpreter(max_depth=1)
    assert interp.eval("(+ 1 2)") == 3
    with pytest.raises(NestingTooDeepError):
        interp.eval("(+ 1 (+ 2 3))")


def test_failed_call_does_not_affect_the_next():
    interp = Interpreter()
    with pytest.raises(TrailingInputError):
        interp.eval("(+ 1 2) 3")
    assert interp.eval("(+ 1 2)") == 3


@given(st.sampled_from([
    "(+ 1 2)",
    "(* (- 7 4) (+ (/ 26 2) 1))",
    "(/ (- 0 7) 2)",
    "5",
]), st.integers(min_value=1, max_value=5))
def test_repeated_evaluation_is_idempotent(source, times):
    first = evaluate_expression(source)
    assert [evaluate_expression(source) for _ in range(times)] == [first] * times


def test_large_depth_limit_still_fails_with_iota_error():
    source = "(+ 1 " * 600 + "1" + ")" * 600
    with pytest.raises(NestingTooDeepError):
        evaluate_expression(source, max_depth=1000)
