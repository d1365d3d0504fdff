"""Rule evaluator - conditions, operators and rule reports."""

import operator as op
from collections.abc import Sequence

from loguru import logger

from app.models.body import (
    CountGroupsCondition,
    GoverningBody,
    Group,
    Rule,
    SumCondition,
)
from app.models.coalition import RuleResult
from engine.metrics import sum_metric
from engine.thresholds import resolve

OPERATORS = {
    ">": op.gt,
    ">=": op.ge,
    "<": op.lt,
    "<=": op.le,
    "==": op.eq,
    "=": op.eq,
    "!=": op.ne,
}


def compare(operator: str, a: float, b: float) -> bool:
    """Apply a comparison operator; unknown operators never hold."""
    fn = OPERATORS.get(operator)
    if fn is None:
        logger.warning("Unknown operator: {!r}", operator)
        return False
    return fn(a, b)


def find_rule(body: GoverningBody, rule_id: str | None) -> Rule | None:
    """Rule by id, falling back to the first declared rule."""
    for rule in body.rules:
        if rule.id == rule_id:
            return rule
    if body.rules:
        logger.debug("Rule {!r} not found, using {!r}", rule_id, body.rules[0].id)
        return body.rules[0]
    return None


def evaluate_condition(condition, coalition: Sequence[Group], body: GoverningBody) -> bool:
    """Evaluate one condition against coalition groups."""
    if isinstance(condition, SumCondition):
        coalition_sum = sum_metric(coalition, condition.metric)
        threshold = resolve(condition.threshold, condition.metric, body)
        return compare(condition.operator, coalition_sum, threshold)

    if isinstance(condition, CountGroupsCondition):
        return compare(condition.operator, len(coalition), condition.value)

    logger.warning("Unknown condition type: {!r}", getattr(condition, "type", None))
    return False


def evaluate(rule: Rule, coalition: Sequence[Group], body: GoverningBody) -> bool:
    """True iff every condition of the rule holds (empty rule holds)."""
    return all(evaluate_condition(c, coalition, body) for c in rule.conditions)


def evaluate_all(body: GoverningBody, coalition: Sequence[Group]) -> list[RuleResult]:
    """Evaluate every rule of the body, in declared order."""
    return [RuleResult(rule=rule, satisfied=evaluate(rule, coalition, body)) for rule in body.rules]
