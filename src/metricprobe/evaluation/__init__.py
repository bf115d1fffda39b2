# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Condition evaluation and phase classification."""

from .classifier import classify, resolve_phase
from .conditions import ConditionEvaluator, evaluate_condition

__all__ = ["ConditionEvaluator", "classify", "evaluate_condition", "resolve_phase"]
