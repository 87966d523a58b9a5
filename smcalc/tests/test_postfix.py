import pytest

from smcalc.errors import (
    ArithmeticDomainError,
    CalculatorError,
    DivisionByZero,
    InsufficientOperands,
    MalformedExpression,
    UnknownIdentifier,
    UnknownOperator,
)
from smcalc.postfix import evaluate_postfix
from smcalc.shunting_yard import parse
from smcalc.tokens import Token


def num(value):
    return Token.number(float(value))


class TestOperators:
    def test_subtraction_pops_right_operand_first(self):
        tokens = [num(10), num(4), Token.operator("-")]

        assert evaluate_postfix(tokens) == 6

    def test_division_order(self):
        tokens = [num(1), num(4), Token.operator("/")]

        assert evaluate_postfix(tokens) == 0.25

    def test_power(self):
        tokens = [num(2), num(10), Token.operator("^")]

        assert evaluate_postfix(tokens) == 1024

    def test_fractional_power(self):
        tokens = [num(9), num(0.5), Token.operator("^")]

        assert evaluate_postfix(tokens) == 3

    def test_unary_minus(self):
        tokens = [num(7), Token.unary_minus()]

        assert evaluate_postfix(tokens) == -7

    def test_abs(self):
        tokens = [num(-7.5), Token.function("abs")]

        assert evaluate_postfix(tokens) == 7.5


class TestErrors:
    def test_binary_needs_two_values(self):
        with pytest.raises(InsufficientOperands) as excinfo:
            evaluate_postfix([num(1), Token.operator("+")])
        assert excinfo.value.symbol == "+"

    def test_unary_needs_a_value(self):
        with pytest.raises(InsufficientOperands):
            evaluate_postfix([Token.unary_minus()])

    def test_function_needs_a_value(self):
        with pytest.raises(InsufficientOperands):
            evaluate_postfix([Token.function("abs")])

    @pytest.mark.parametrize("right", [0, 0.0, -0.0])
    def test_division_by_zero(self, right):
        with pytest.raises(DivisionByZero):
            evaluate_postfix([num(5), num(right), Token.operator("/")])

    def test_empty_sequence(self):
        with pytest.raises(MalformedExpression):
            evaluate_postfix([])

    def test_leftover_values(self):
        with pytest.raises(MalformedExpression):
            evaluate_postfix([num(1), num(2)])

    def test_parenthesis_in_postfix_input(self):
        with pytest.raises(MalformedExpression):
            evaluate_postfix([num(1), Token.left_paren()])

    @pytest.mark.parametrize("expression", ["(-8)^(1/3)", "0^-1", "10^400"])
    def test_power_outside_float_domain(self, expression):
        with pytest.raises(ArithmeticDomainError):
            evaluate_postfix(parse(expression))

    def test_infinite_result(self):
        huge = "1" + "0" * 309
        with pytest.raises(ArithmeticDomainError):
            evaluate_postfix(parse(f"{huge}*1"))


class TestUnknownTokens:
    def test_unknown_function(self):
        with pytest.raises(UnknownIdentifier) as excinfo:
            evaluate_postfix([num(1), Token.function("sin")])
        assert excinfo.value.name == "sin"

    def test_unknown_binary_operator(self):
        with pytest.raises(UnknownOperator) as excinfo:
            evaluate_postfix([num(1), num(2), Token.operator("%")])
        assert excinfo.value.symbol == "%"

    def test_unknown_tokens_are_calculator_errors(self):
        with pytest.raises(CalculatorError):
            evaluate_postfix([num(1), Token.function("sin")])
