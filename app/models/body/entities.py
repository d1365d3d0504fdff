"""Governing body domain entities - metrics, groups, rules."""

from dataclasses import dataclass, field
from typing import Any

from app.models.common import BaseEntity

SUM = "sum"
COUNT_GROUPS = "countGroups"

FRACTION_OF_TOTAL = "fractionOfTotal"
PERCENTAGE = "percentage"
ABSOLUTE = "absolute"

THRESHOLD_KINDS = (FRACTION_OF_TOTAL, PERCENTAGE, ABSOLUTE)


@dataclass
class MetricDef(BaseEntity):
    """Declared metric of a body (e.g. seats)."""

    id: str
    label: str | None = None
    unit: str | None = None
    total: float | None = None
    is_default: bool = False


@dataclass
class Group(BaseEntity):
    """Faction or member block holding metric shares.

    ``metrics`` keeps raw document values: a missing key means no value,
    a non-numeric value is kept as-is and counts as 0 in sums.
    """

    id: str
    name: str | None = None
    short_name: str | None = None
    metrics: dict[str, Any] = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def display_name(self) -> str:
        return self.short_name or self.name or self.id


@dataclass
class ThresholdSpec(BaseEntity):
    """Declarative threshold, resolved against a metric context."""

    kind: str = ABSOLUTE
    value: float = 0
    offset: float = 0
    metric: str | None = None


@dataclass
class SumCondition(BaseEntity):
    """Coalition sum of a metric compared to a threshold."""

    metric: str | None
    operator: str = ">="
    threshold: ThresholdSpec = field(default_factory=ThresholdSpec)
    type: str = SUM


@dataclass
class CountGroupsCondition(BaseEntity):
    """Coalition size compared to a literal value."""

    operator: str = ">="
    value: float = 0
    type: str = COUNT_GROUPS


@dataclass
class UnknownCondition(BaseEntity):
    """Condition of an unsupported type, never satisfied."""

    type: str | None = None


Condition = SumCondition | CountGroupsCondition | UnknownCondition


@dataclass
class Rule(BaseEntity):
    """Named rule: satisfied iff all conditions hold."""

    id: str | None
    name: str | None = None
    conditions: tuple[Condition, ...] = ()

    @property
    def display_name(self) -> str:
        return self.name or self.id or "Rule"


@dataclass
class GoverningBody(BaseEntity):
    """Parliament, council or board with groups, metrics and rules."""

    id: str | None
    name: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    metrics: dict[str, MetricDef] = field(default_factory=dict)
    groups: tuple[Group, ...] = ()
    rules: tuple[Rule, ...] = ()

    @property
    def display_name(self) -> str:
        return self.name or self.id or "Governing body"

    @property
    def period(self) -> str | None:
        return self.metadata.get("period")

    @property
    def country(self) -> str | None:
        return self.metadata.get("country")

    def group(self, group_id: str) -> Group | None:
        """Look up a group by id."""
        for g in self.groups:
            if g.id == group_id:
                return g
        return None

    def select(self, group_ids) -> list[Group]:
        """Groups whose id is in ``group_ids``, in declared order."""
        ids = set(group_ids)
        return [g for g in self.groups if g.id in ids]
