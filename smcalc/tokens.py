from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional

from smcalc.errors import UnknownOperator


UNARY_MINUS = "~"


class TokenKind(Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    UNARY_MINUS = "unary_minus"
    FUNCTION = "function"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    value: Optional[float] = None

    @classmethod
    def number(cls, value: float, text: Optional[str] = None) -> "Token":
        return cls(TokenKind.NUMBER, text if text is not None else repr(value), value)

    @classmethod
    def operator(cls, symbol: str) -> "Token":
        return cls(TokenKind.OPERATOR, symbol)

    @classmethod
    def unary_minus(cls) -> "Token":
        return cls(TokenKind.UNARY_MINUS, UNARY_MINUS)

    @classmethod
    def function(cls, name: str) -> "Token":
        return cls(TokenKind.FUNCTION, name)

    @classmethod
    def left_paren(cls) -> "Token":
        return cls(TokenKind.LEFT_PAREN, "(")

    @classmethod
    def right_paren(cls) -> "Token":
        return cls(TokenKind.RIGHT_PAREN, ")")

    @property
    def is_operator(self) -> bool:
        """Binary operators and unary minus, i.e. what the pop loop may move."""
        return self.kind in (TokenKind.OPERATOR, TokenKind.UNARY_MINUS)

    @property
    def is_paren(self) -> bool:
        return self.kind in (TokenKind.LEFT_PAREN, TokenKind.RIGHT_PAREN)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class OperatorInfo:
    symbol: str
    precedence: int
    associativity: Associativity

    def yields_to(self, incoming: "OperatorInfo") -> bool:
        """True when this operator, sitting on the stack, must be emitted
        before ``incoming`` is pushed."""
        if self.precedence > incoming.precedence:
            return True
        return (
            self.precedence == incoming.precedence
            and incoming.associativity is Associativity.LEFT
        )


OPERATORS: Dict[str, OperatorInfo] = {
    "+": OperatorInfo("+", 1, Associativity.LEFT),
    "-": OperatorInfo("-", 1, Associativity.LEFT),
    "*": OperatorInfo("*", 2, Associativity.LEFT),
    "/": OperatorInfo("/", 2, Associativity.LEFT),
    "^": OperatorInfo("^", 3, Associativity.RIGHT),
    # binds tighter than ^, so -2^2 == (-2)^2
    UNARY_MINUS: OperatorInfo(UNARY_MINUS, 4, Associativity.RIGHT),
}

BINARY_SYMBOLS = frozenset("+-*/^")

FUNCTIONS: Dict[str, Callable[[float], float]] = {
    "abs": abs,
}


def operator_info(token: Token) -> OperatorInfo:
    info = OPERATORS.get(token.text)
    if info is None:
        raise UnknownOperator(token.text)
    return info
