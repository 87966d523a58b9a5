"""Stack evaluator for postfix token sequences."""

import logging
import math
import operator
from typing import Callable, Dict, List, Sequence

from smcalc.errors import (
    ArithmeticDomainError,
    DivisionByZero,
    InsufficientOperands,
    MalformedExpression,
    UnknownIdentifier,
    UnknownOperator,
)
from smcalc.tokens import FUNCTIONS, Token, TokenKind

logger = logging.getLogger(__name__)


def _divide(left: float, right: float) -> float:
    if right == 0:
        raise DivisionByZero()
    return left / right


def _power(left: float, right: float) -> float:
    try:
        return math.pow(left, right)
    except (ValueError, OverflowError) as err:
        raise ArithmeticDomainError(f"{left!r} ^ {right!r} ({err})") from err


BINARY_OPERATIONS: Dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
    "^": _power,
}


def _pop_operands(stack: List[float], token: Token, count: int) -> List[float]:
    if len(stack) < count:
        raise InsufficientOperands(token.text)
    operands = stack[-count:]
    del stack[-count:]
    return operands


def evaluate_postfix(tokens: Sequence[Token]) -> float:
    """Reduce a postfix token sequence to a single finite float."""
    stack: List[float] = []

    for token in tokens:
        if token.kind is TokenKind.NUMBER:
            stack.append(token.value)
        elif token.kind is TokenKind.UNARY_MINUS:
            (value,) = _pop_operands(stack, token, 1)
            stack.append(-value)
        elif token.kind is TokenKind.FUNCTION:
            (value,) = _pop_operands(stack, token, 1)
            func = FUNCTIONS.get(token.text)
            if func is None:
                raise UnknownIdentifier(token.text)
            stack.append(float(func(value)))
        elif token.kind is TokenKind.OPERATOR:
            left, right = _pop_operands(stack, token, 2)
            operation = BINARY_OPERATIONS.get(token.text)
            if operation is None:
                raise UnknownOperator(token.text)
            stack.append(operation(left, right))
        else:
            raise MalformedExpression(f"unexpected {token.text!r} in postfix input")
        logger.debug(f"{token} -> {stack}")

    if len(stack) != 1:
        raise MalformedExpression(f"{len(stack)} values left on the stack")

    result = stack[0]
    if not math.isfinite(result):
        raise ArithmeticDomainError(repr(result))
    return result
