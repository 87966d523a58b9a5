"""SM.AI calculator: shunting-yard expression evaluator and unit converter."""

from smcalc.calculator import calculate, evaluate
from smcalc.errors import (
    ArithmeticDomainError,
    CalculatorError,
    ConversionError,
    ConversionSyntaxError,
    DivisionByZero,
    EmptyExpression,
    EvalError,
    IncompatibleUnits,
    InsufficientOperands,
    InvalidConversionValue,
    InvalidNumberLiteral,
    MalformedExpression,
    MismatchedParentheses,
    ParseError,
    UnexpectedCharacter,
    UnknownIdentifier,
    UnknownOperator,
    UnsupportedUnit,
)
from smcalc.formatting import format_number
from smcalc.postfix import evaluate_postfix
from smcalc.shunting_yard import parse, to_postfix, tokenize
from smcalc.units import convert

__all__ = [
    "ArithmeticDomainError",
    "CalculatorError",
    "ConversionError",
    "ConversionSyntaxError",
    "DivisionByZero",
    "EmptyExpression",
    "EvalError",
    "IncompatibleUnits",
    "InsufficientOperands",
    "InvalidConversionValue",
    "InvalidNumberLiteral",
    "MalformedExpression",
    "MismatchedParentheses",
    "ParseError",
    "UnexpectedCharacter",
    "UnknownIdentifier",
    "UnknownOperator",
    "UnsupportedUnit",
    "calculate",
    "convert",
    "evaluate",
    "evaluate_postfix",
    "format_number",
    "parse",
    "to_postfix",
    "tokenize",
]
