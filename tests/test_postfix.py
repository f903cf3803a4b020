from __future__ import annotations

import pytest

from core.errors import InvalidExpressionError, StackUnderflowError
from core.postfix import to_postfix
from core.token_system import tokenize


def _rpn(expression: str, strict: bool = False) -> str:
    return " ".join(t.value for t in to_postfix(tokenize(expression), strict=strict))


def test_precedence_orders_multiplication_first() -> None:
    assert _rpn("2+3×4") == "2 3 4 × +"
    assert _rpn("2×3+4") == "2 3 × 4 +"


def test_equal_precedence_is_left_associative() -> None:
    assert _rpn("2-3+4") == "2 3 - 4 +"
    assert _rpn("8÷4÷2") == "8 4 ÷ 2 ÷"


def test_parentheses_override_precedence() -> None:
    assert _rpn("(2+3)×4") == "2 3 + 4 ×"
    assert _rpn("((1+2)×(3-4))÷5") == "1 2 + 3 4 - × 5 ÷"


def test_unmatched_right_paren_is_stack_underflow() -> None:
    with pytest.raises(StackUnderflowError):
        to_postfix(tokenize("2+3)"))


def test_unmatched_left_paren_is_flushed_by_default() -> None:
    assert _rpn("(2+3") == "2 3 + ("


def test_unmatched_left_paren_rejected_in_strict_mode() -> None:
    with pytest.raises(InvalidExpressionError):
        to_postfix(tokenize("(2+3"), strict=True)


def test_empty_input() -> None:
    assert to_postfix([]) == []


def test_multiplication_and_division_share_precedence() -> None:
    assert _rpn("8÷2×4") == "8 2 ÷ 4 ×"
    assert _rpn("8×2÷4") == "8 2 × 4 ÷"
