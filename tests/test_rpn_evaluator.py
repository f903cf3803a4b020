from __future__ import annotations

import pytest

from core.errors import (
    DivisionByZeroError,
    InvalidExpressionError,
    ParseError,
    StackUnderflowError,
    UnknownOperatorError,
)
from core.operators import Operators
from core.rpn_evaluator import RPNEvaluator
from core.token_system import TOKEN_DEFINITIONS, Token, TokenType


def _num(text: str) -> Token:
    return Token(TokenType.NUMBER, text)


def test_evaluate_simple_postfix() -> None:
    postfix = [_num("2"), _num("3"), _num("4"), TOKEN_DEFINITIONS["×"], TOKEN_DEFINITIONS["+"]]
    assert RPNEvaluator.evaluate(postfix) == pytest.approx(14.0)


def test_operand_order_for_subtraction_and_division() -> None:
    assert RPNEvaluator.evaluate([_num("10"), _num("4"), TOKEN_DEFINITIONS["-"]]) == 6.0
    assert RPNEvaluator.evaluate([_num("7"), _num("2"), TOKEN_DEFINITIONS["÷"]]) == 3.5


def test_result_is_plain_float() -> None:
    result = RPNEvaluator.evaluate([_num("1.5")])
    assert type(result) is float


def test_invalid_number_is_parse_error() -> None:
    with pytest.raises(ParseError):
        RPNEvaluator.evaluate([_num("1..2")])
    with pytest.raises(ParseError):
        RPNEvaluator.evaluate([_num(".")])


def test_missing_operand_is_stack_underflow() -> None:
    with pytest.raises(StackUnderflowError):
        RPNEvaluator.evaluate([_num("3"), TOKEN_DEFINITIONS["+"]])


def test_division_by_zero() -> None:
    with pytest.raises(DivisionByZeroError) as exc_info:
        RPNEvaluator.evaluate([_num("10"), _num("0"), TOKEN_DEFINITIONS["÷"]])
    assert isinstance(exc_info.value, ZeroDivisionError)
    assert str(exc_info.value) == "Division by zero"


def test_unknown_operator() -> None:
    postfix = [_num("1"), _num("2"), Token(TokenType.OPERATOR, "%")]
    with pytest.raises(UnknownOperatorError):
        RPNEvaluator.evaluate(postfix)


def test_leftover_operands_are_invalid() -> None:
    with pytest.raises(InvalidExpressionError):
        RPNEvaluator.evaluate([_num("1"), _num("2")])


def test_empty_postfix_is_invalid() -> None:
    with pytest.raises(InvalidExpressionError):
        RPNEvaluator.evaluate([])


def test_apply_rejects_unknown_symbol() -> None:
    with pytest.raises(UnknownOperatorError):
        Operators.apply("(", 1.0, 2.0)


def test_non_ascii_number_text_is_parse_error() -> None:
    with pytest.raises(ParseError):
        Operators.parse_number("٣")
    assert Operators.parse_number("0.5") == 0.5
