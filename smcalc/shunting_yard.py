"""Infix tokenizer and shunting-yard conversion to postfix.

Example::

    >>> [str(t) for t in parse("2 + 3 * 4")]
    ['2', '3', '4', '*', '+']
    >>> [str(t) for t in parse("abs(-5)")]
    ['5', '~', 'abs']
"""

import logging
import re
from typing import Iterable, Iterator, List

from smcalc.errors import (
    EmptyExpression,
    InvalidNumberLiteral,
    MalformedExpression,
    MismatchedParentheses,
    UnexpectedCharacter,
    UnknownIdentifier,
)
from smcalc.tokens import BINARY_SYMBOLS, FUNCTIONS, Token, TokenKind, operator_info

logger = logging.getLogger(__name__)

# digits and points are scanned greedily, then validated as a whole
NUMBER_RUN_RE = re.compile(r"[0-9.]+")
NUMBER_RE = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")
IDENT_RE = re.compile(r"[A-Za-z]+")


def tokenize(expression: str) -> Iterator[Token]:
    """Yield infix tokens, telling unary minus apart from subtraction.

    Whitespace only separates tokens.
    """
    if not expression or expression.isspace():
        raise EmptyExpression()

    expect_value = True
    pos = 0
    while pos < len(expression):
        char = expression[pos]
        if char.isspace():
            pos += 1
            continue

        match = NUMBER_RUN_RE.match(expression, pos)
        if match:
            text = match.group()
            if not NUMBER_RE.fullmatch(text):
                raise InvalidNumberLiteral(text)
            yield Token.number(float(text), text)
            expect_value = False
            pos = match.end()
            continue

        match = IDENT_RE.match(expression, pos)
        if match:
            name = match.group()
            if name not in FUNCTIONS:
                raise UnknownIdentifier(name)
            yield Token.function(name)
            pos = match.end()
            continue

        if char == "(":
            yield Token.left_paren()
            expect_value = True
        elif char == ")":
            yield Token.right_paren()
            expect_value = False
        elif char == "-" and expect_value:
            yield Token.unary_minus()
            expect_value = True
        elif char in BINARY_SYMBOLS:
            yield Token.operator(char)
            expect_value = True
        else:
            raise UnexpectedCharacter(char, pos)
        pos += 1


def to_postfix(tokens: Iterable[Token]) -> List[Token]:
    output: List[Token] = []
    stack: List[Token] = []

    for token in tokens:
        if not isinstance(token, Token):
            raise MalformedExpression(f"not a token: {token!r}")
        if token.kind is TokenKind.NUMBER:
            output.append(token)
        elif token.kind in (TokenKind.FUNCTION, TokenKind.LEFT_PAREN):
            stack.append(token)
        elif token.kind is TokenKind.RIGHT_PAREN:
            while stack and stack[-1].kind is not TokenKind.LEFT_PAREN:
                output.append(stack.pop())
            if not stack:
                raise MismatchedParentheses()
            stack.pop()
            # the function owning this parenthesised argument
            if stack and stack[-1].kind is TokenKind.FUNCTION:
                output.append(stack.pop())
        else:
            incoming = operator_info(token)
            while (
                stack
                and stack[-1].is_operator
                and operator_info(stack[-1]).yields_to(incoming)
            ):
                output.append(stack.pop())
            stack.append(token)

    while stack:
        token = stack.pop()
        if token.is_paren:
            raise MismatchedParentheses()
        output.append(token)

    logger.debug(f"postfix: {' '.join(str(t) for t in output)}")
    return output


def parse(expression: str) -> List[Token]:
    """Convert an infix expression into a postfix token list."""
    return to_postfix(tokenize(expression))
