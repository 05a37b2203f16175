from __future__ import annotations

import ast
import math
import operator
import re
from typing import Callable, Optional

from billsplit.config import get_settings
from billsplit.logging import get_logger
from billsplit.utils.money import round_amount


ALLOWED_CHARS = re.compile(r"[^0-9.+\-*/()\s]")
# ast rejects "05"; strip zeros leading an integer part
LEADING_ZEROS = re.compile(r"(?<![\d.])0+(?=\d)")

BINARY_OPERATORS: dict[type, Callable[[float, float], float]] = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: operator.mul,
    ast.Div: operator.truediv,
}

UNARY_OPERATORS: dict[type, Callable[[float], float]] = {
    ast.UAdd: operator.pos,
    ast.USub: operator.neg,
}


class AmountExpressionError(ValueError):
    pass


def _evaluate(node: ast.AST) -> float:
    if isinstance(node, ast.Expression):
        return _evaluate(node.body)
    if isinstance(node, ast.Constant) and isinstance(node.value, (int, float)) and not isinstance(node.value, bool):
        try:
            return float(node.value)
        except OverflowError as exc:
            raise AmountExpressionError("Amount is too large") from exc
    if isinstance(node, ast.BinOp) and type(node.op) in BINARY_OPERATORS:
        left = _evaluate(node.left)
        right = _evaluate(node.right)
        try:
            return BINARY_OPERATORS[type(node.op)](left, right)
        except ZeroDivisionError as exc:
            raise AmountExpressionError("Division by zero") from exc
    if isinstance(node, ast.UnaryOp) and type(node.op) in UNARY_OPERATORS:
        return UNARY_OPERATORS[type(node.op)](_evaluate(node.operand))
    raise AmountExpressionError(f"Unsupported expression element: {type(node).__name__}")


def evaluate_expression(text: str) -> float:
    """
    Evaluate an amount typed as simple arithmetic.

    Supported input:
    - 12.50
    - 10+5
    - 3*4.5
    - (20+10)/3

    Any character other than digits, ``.``, ``+ - * /``, parentheses and
    whitespace is discarded first, so ``"$10 + 5"`` reads as ``10 + 5``.
    """
    sanitized = ALLOWED_CHARS.sub("", text).strip()
    sanitized = LEADING_ZEROS.sub("", sanitized)
    if not sanitized:
        return 0.0

    try:
        tree = ast.parse(sanitized, mode="eval")
        result = _evaluate(tree)
    except SyntaxError as exc:
        raise AmountExpressionError(f"Invalid amount expression: {text!r}") from exc
    except (RecursionError, MemoryError) as exc:
        raise AmountExpressionError("Amount expression is too long") from exc

    if not math.isfinite(result):
        raise AmountExpressionError(f"Amount is not finite: {text!r}")
    return result


def parse_amount(text: str, places: Optional[int] = None) -> float:
    if places is None:
        places = get_settings().amount_places

    try:
        value = evaluate_expression(text)
    except AmountExpressionError as exc:
        get_logger(__name__).warning("amount.invalid_expression", text=text, error=str(exc))
        return 0.0
    return round_amount(value, places)
