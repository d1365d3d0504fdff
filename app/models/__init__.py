"""Models package - entities for governing bodies and coalitions."""

from app.models.body import (
    CountGroupsCondition,
    GoverningBody,
    Group,
    MetricDef,
    Rule,
    SumCondition,
    ThresholdSpec,
    UnknownCondition,
)
from app.models.coalition import CoalitionSummary, RuleResult, SearchResult
from app.models.common import BaseEntity

__all__ = [
    # Common
    "BaseEntity",
    # Body
    "GoverningBody",
    "MetricDef",
    "Group",
    "Rule",
    "SumCondition",
    "CountGroupsCondition",
    "UnknownCondition",
    "ThresholdSpec",
    # Coalition
    "RuleResult",
    "SearchResult",
    "CoalitionSummary",
]
