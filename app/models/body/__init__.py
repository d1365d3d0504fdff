"""Governing body models."""

from app.models.body.entities import (
    ABSOLUTE,
    COUNT_GROUPS,
    FRACTION_OF_TOTAL,
    PERCENTAGE,
    SUM,
    THRESHOLD_KINDS,
    Condition,
    CountGroupsCondition,
    GoverningBody,
    Group,
    MetricDef,
    Rule,
    SumCondition,
    ThresholdSpec,
    UnknownCondition,
)

__all__ = [
    "SUM",
    "COUNT_GROUPS",
    "FRACTION_OF_TOTAL",
    "PERCENTAGE",
    "ABSOLUTE",
    "THRESHOLD_KINDS",
    "Condition",
    "CountGroupsCondition",
    "GoverningBody",
    "Group",
    "MetricDef",
    "Rule",
    "SumCondition",
    "ThresholdSpec",
    "UnknownCondition",
]
