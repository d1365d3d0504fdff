"""Coalition API response schemas."""

from pydantic import BaseModel


class BodyItem(BaseModel):
    """Available governing body."""

    id: str | None
    name: str
    period: str | None
    country: str | None
    groups: int
    rules: int


class BodiesResponse(BaseModel):
    """Bodies response."""

    items: list[BodyItem]


class RuleItem(BaseModel):
    """Rule result for the selection."""

    id: str | None
    name: str
    satisfied: bool
    symbol: str


class SummaryResponse(BaseModel):
    """Coalition summary response."""

    body_id: str | None
    selected: list[str]
    group_count: int
    metric: str | None
    coalition_total: float | None
    body_total: float | None
    share_pct: float | None
    headline: str
    rules: list[RuleItem]


class CoalitionItem(BaseModel):
    """Suggested coalition."""

    groups: list[str]
    labels: list[str]
    total: float


class SuggestionsResponse(BaseModel):
    """Suggested coalitions response."""

    body_id: str | None
    rule_id: str | None
    metric: str | None
    threshold: float | None
    truncated: bool
    items: list[CoalitionItem]
