"""Exceptions raised by the calculator core and the unit converter.

Every error carries a message that the shell prints verbatim.
"""

from typing import Optional


class CalculatorError(Exception):
    pass


class ParseError(CalculatorError):
    pass


class EvalError(CalculatorError):
    pass


class EmptyExpression(ParseError):
    def __init__(self):
        super().__init__("Empty expression.")


class UnknownIdentifier(ParseError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Unknown function or identifier: {name}. Only 'abs' is supported."
        )


class UnknownOperator(ParseError):
    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Unknown operator: {symbol!r}")


class MismatchedParentheses(ParseError):
    def __init__(self):
        super().__init__("Mismatched parentheses.")


class InvalidNumberLiteral(ParseError):
    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid number literal: {text!r}")


class UnexpectedCharacter(ParseError):
    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"Unexpected character at position {position}: {char!r}")


class InsufficientOperands(EvalError):
    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Insufficient operands for '{symbol}'.")


class DivisionByZero(EvalError):
    def __init__(self):
        super().__init__("Division by zero.")


class MalformedExpression(EvalError):
    def __init__(self, detail: Optional[str] = None):
        msg = "Expression contains extraneous values or operators."
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)


class ArithmeticDomainError(EvalError):
    def __init__(self, detail: str):
        super().__init__(f"Result is not a finite number: {detail}")


class ConversionError(CalculatorError):
    pass


class ConversionSyntaxError(ConversionError):
    pass


class InvalidConversionValue(ConversionError):
    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid number for conversion ({text}).")


class UnsupportedUnit(ConversionError):
    def __init__(self, unit: str, role: str):
        self.unit = unit
        self.role = role
        super().__init__(f"Unsupported {role} unit: {unit}")


class IncompatibleUnits(ConversionError):
    def __init__(self, unit_from: str, unit_to: str):
        self.unit_from = unit_from
        self.unit_to = unit_to
        super().__init__(f"Cannot convert {unit_from} to {unit_to}.")
