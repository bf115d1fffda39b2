# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Success/failure classification of a measured value."""

from __future__ import annotations

import logging
from typing import Any

from ..errors import ConditionError
from ..models.measurement import Phase
from .conditions import ConditionEvaluator, evaluate_condition

logger = logging.getLogger(__name__)


def _evaluate(evaluator: ConditionEvaluator, value: Any, expression: str) -> bool:
    try:
        outcome = evaluator(value, expression)
    except ConditionError:
        raise
    except Exception as exc:  # noqa: BLE001
        raise ConditionError(f"could not evaluate {expression!r}: {exc}") from exc
    if not isinstance(outcome, bool):
        raise ConditionError(f"expected bool, but got {type(outcome).__name__} from {expression!r}")
    return outcome


def resolve_phase(
    value: Any,
    success_condition: str,
    failure_condition: str,
    evaluator: ConditionEvaluator = evaluate_condition,
) -> Phase:
    """
    Decide the phase for `value`. Raises ConditionError if either condition fails to evaluate.

    - no conditions: Successful
    - success only: failure is `not success`
    - failure only: success is `not failure`
    - both: each stands on its own, and failure wins a tie
    """
    success = False
    failure = False

    if success_condition:
        success = _evaluate(evaluator, value, success_condition)
    if failure_condition:
        failure = _evaluate(evaluator, value, failure_condition)

    if not success_condition and not failure_condition:
        return Phase.SUCCESSFUL
    if success_condition and not failure_condition:
        failure = not success
    elif failure_condition and not success_condition:
        success = not failure

    if failure:
        return Phase.FAILED
    if not success:
        return Phase.INCONCLUSIVE
    return Phase.SUCCESSFUL


def classify(
    value: Any,
    success_condition: str,
    failure_condition: str,
    evaluator: ConditionEvaluator = evaluate_condition,
) -> Phase:
    """Like resolve_phase, but a condition error yields Phase.ERROR instead of raising."""
    try:
        return resolve_phase(value, success_condition, failure_condition, evaluator)
    except ConditionError as exc:
        logger.warning("%s", exc.describe())
        return Phase.ERROR


__all__ = ["classify", "resolve_phase"]
