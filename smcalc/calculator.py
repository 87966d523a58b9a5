from smcalc.formatting import format_number
from smcalc.postfix import evaluate_postfix
from smcalc.shunting_yard import parse


def evaluate(expression: str) -> float:
    return evaluate_postfix(parse(expression))


def calculate(expression: str) -> str:
    return format_number(evaluate(expression))
