"""Governing body validation."""

from collections import Counter

from app.models.body import (
    THRESHOLD_KINDS,
    CountGroupsCondition,
    GoverningBody,
    SumCondition,
    UnknownCondition,
)
from engine.metrics import default_metric
from engine.rules import OPERATORS


def validate_body(body: GoverningBody) -> dict:
    """Check a body for data the engine would silently degrade on."""
    issues = []
    stats = {
        "metrics": len(body.metrics),
        "groups": len(body.groups),
        "rules": len(body.rules),
        "default_metric": default_metric(body),
    }

    if not body.metrics:
        issues.append("No metrics defined")

    defaults = [m for m, d in body.metrics.items() if d.is_default]
    if len(defaults) > 1:
        issues.append(f"Multiple default metrics: {', '.join(defaults)}")

    dupes = [gid for gid, n in Counter(g.id for g in body.groups).items() if n > 1]
    if dupes:
        issues.append(f"Duplicate group ids: {', '.join(dupes)}")

    negative = [
        f"{g.id}.{m}"
        for g in body.groups
        for m, v in g.metrics.items()
        if isinstance(v, (int, float)) and not isinstance(v, bool) and v < 0
    ]
    if negative:
        issues.append(f"Negative metric values: {', '.join(negative)}")

    for rule in body.rules:
        name = rule.id or rule.name or "?"
        for cond in rule.conditions:
            if isinstance(cond, UnknownCondition):
                issues.append(f"Rule {name}: unknown condition type {cond.type!r}")
                continue
            if cond.operator not in OPERATORS:
                issues.append(f"Rule {name}: unknown operator {cond.operator!r}")
            if isinstance(cond, SumCondition):
                if cond.metric not in body.metrics:
                    issues.append(f"Rule {name}: sum over undeclared metric {cond.metric!r}")
                if cond.threshold.kind not in THRESHOLD_KINDS:
                    issues.append(f"Rule {name}: unknown threshold kind {cond.threshold.kind!r}")
            elif isinstance(cond, CountGroupsCondition) and cond.value < 0:
                issues.append(f"Rule {name}: negative group count {cond.value}")

    return {
        "body": body.id,
        "valid": len(issues) == 0,
        "stats": stats,
        "issues": issues,
    }
