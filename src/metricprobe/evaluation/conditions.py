# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Boolean condition evaluation.

Conditions are Python-style expressions over a single variable, `result`,
bound to the coerced measurement value, e.g. `result >= 5 and result < 100`.
Expressions are parsed with `ast` and walked against a whitelist; nothing is
passed to eval(). `true`, `false`, `nil` and `null` are accepted as literals.
"""

from __future__ import annotations

import ast
import math
import operator
from collections.abc import Callable
from typing import Any, Protocol

from ..errors import ConditionError

RESULT_NAME = "result"
MAX_POWER_BITS = 4096
MAX_REPEAT_LENGTH = 100_000


class ConditionEvaluator(Protocol):
    """Evaluates `expression` against `value`; raises ConditionError when it cannot."""

    def __call__(self, value: Any, expression: str) -> bool: ...


_LITERALS: dict[str, Any] = {
    "true": True,
    "false": False,
    "True": True,
    "False": False,
    "nil": None,
    "null": None,
    "None": None,
}


def _checked_pow(base: Any, exponent: Any) -> Any:
    if isinstance(base, int) and isinstance(exponent, int) and exponent > 0 and abs(base) > 1:
        if abs(base).bit_length() * exponent > MAX_POWER_BITS:
            raise ConditionError(f"exponent {exponent} is too large")
    return operator.pow(base, exponent)


def _checked_mul(left: Any, right: Any) -> Any:
    for sequence, count in ((left, right), (right, left)):
        if isinstance(sequence, (str, list, tuple)) and isinstance(count, int) and len(sequence) * count > MAX_REPEAT_LENGTH:
            raise ConditionError(f"repeating a sequence {count} times is too large")
    return operator.mul(left, right)


_COMPARE_OPS: dict[type, Callable[[Any, Any], Any]] = {
    ast.Eq: operator.eq,
    ast.NotEq: operator.ne,
    ast.Lt: operator.lt,
    ast.LtE: operator.le,
    ast.Gt: operator.gt,
    ast.GtE: operator.ge,
    ast.In: lambda x, y: x in y,
    ast.NotIn: lambda x, y: x not in y,
    ast.Is: operator.is_,
    ast.IsNot: operator.is_not,
}

_BIN_OPS: dict[type, Callable[[Any, Any], Any]] = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: _checked_mul,
    ast.Div: operator.truediv,
    ast.FloorDiv: operator.floordiv,
    ast.Mod: operator.mod,
    ast.Pow: _checked_pow,
}

_UNARY_OPS: dict[type, Callable[[Any], Any]] = {
    ast.Not: operator.not_,
    ast.USub: operator.neg,
    ast.UAdd: operator.pos,
}


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _is_inf(value: Any) -> bool:
    return isinstance(value, float) and math.isinf(value)


_FUNCTIONS: dict[str, Callable[..., Any]] = {
    "len": len,
    "abs": abs,
    "min": min,
    "max": max,
    "int": int,
    "float": float,
    "str": str,
    "asInt": int,
    "asFloat": float,
    "isNaN": _is_nan,
    "isInf": _is_inf,
}


def _evaluate_node(node: ast.AST, value: Any) -> Any:
    if isinstance(node, ast.Constant):
        return node.value
    if isinstance(node, ast.Name):
        if node.id == RESULT_NAME:
            return value
        if node.id in _LITERALS:
            return _LITERALS[node.id]
        raise ConditionError(f"unknown name {node.id!r}")
    if isinstance(node, (ast.List, ast.Tuple)):
        return [_evaluate_node(elt, value) for elt in node.elts]
    if isinstance(node, ast.Compare):
        left = _evaluate_node(node.left, value)
        for op, comparator in zip(node.ops, node.comparators):
            func = _COMPARE_OPS.get(type(op))
            if func is None:
                raise ConditionError(f"unsupported operator {type(op).__name__}")
            right = _evaluate_node(comparator, value)
            if not func(left, right):
                return False
            left = right
        return True
    if isinstance(node, ast.BoolOp):
        if isinstance(node.op, ast.And):
            return all(_evaluate_node(item, value) for item in node.values)
        return any(_evaluate_node(item, value) for item in node.values)
    if isinstance(node, ast.UnaryOp):
        func = _UNARY_OPS.get(type(node.op))
        if func is None:
            raise ConditionError(f"unsupported operator {type(node.op).__name__}")
        return func(_evaluate_node(node.operand, value))
    if isinstance(node, ast.BinOp):
        func = _BIN_OPS.get(type(node.op))
        if func is None:
            raise ConditionError(f"unsupported operator {type(node.op).__name__}")
        return func(_evaluate_node(node.left, value), _evaluate_node(node.right, value))
    if isinstance(node, ast.Subscript):
        return _evaluate_node(node.value, value)[_evaluate_node(node.slice, value)]
    if isinstance(node, ast.Call):
        if not isinstance(node.func, ast.Name) or node.func.id not in _FUNCTIONS or node.keywords:
            raise ConditionError("only builtin condition functions may be called")
        args = [_evaluate_node(arg, value) for arg in node.args]
        return _FUNCTIONS[node.func.id](*args)
    raise ConditionError(f"unsupported expression {type(node).__name__}")


def evaluate_condition(value: Any, expression: str) -> bool:
    """Evaluate `expression` with `result` bound to `value`."""
    try:
        tree = ast.parse(str(expression).strip(), mode="eval")
    except SyntaxError as exc:
        raise ConditionError(f"invalid condition {expression!r}: {exc.msg}") from exc

    try:
        outcome = _evaluate_node(tree.body, value)
    except ConditionError:
        raise
    except Exception as exc:  # noqa: BLE001
        raise ConditionError(f"could not evaluate {expression!r}: {exc}") from exc

    if not isinstance(outcome, bool):
        raise ConditionError(f"expected bool, but got {type(outcome).__name__} from {expression!r}")
    return outcome


__all__ = ["ConditionEvaluator", "RESULT_NAME", "evaluate_condition"]
