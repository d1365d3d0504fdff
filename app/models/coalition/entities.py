"""Coalition domain entities - evaluation and search results."""

from dataclasses import dataclass, field

from app.models.body import Group, Rule
from app.models.common import BaseEntity


@dataclass
class RuleResult(BaseEntity):
    """Rule evaluated against a coalition."""

    rule: Rule
    satisfied: bool


@dataclass
class SearchResult(BaseEntity):
    """Minimal winning coalitions found for a rule.

    ``truncated`` is set when the search was rejected or stopped by a bound;
    ``coalitions`` then holds only what was found before stopping.
    """

    coalitions: list[list[Group]] = field(default_factory=list)
    rule_id: str | None = None
    metric_id: str | None = None
    threshold: float | None = None
    truncated: bool = False
    nodes: int = 0


@dataclass
class CoalitionSummary(BaseEntity):
    """Totals and rule results for a selected coalition."""

    group_count: int
    metric_id: str | None
    metric_label: str | None
    unit: str | None
    coalition_total: float | None
    body_total: float | None
    share_pct: float | None
    rules: list[RuleResult]
    headline: str
