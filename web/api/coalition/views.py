"""Coalition API views - thin layer over services."""

from app.container import container
from app.models.body import GoverningBody
from engine import sum_metric
from web.api.errors import NotFoundError, validate_selection

from .schemas import (
    BodiesResponse,
    BodyItem,
    CoalitionItem,
    RuleItem,
    SuggestionsResponse,
    SummaryResponse,
)


def _get_body(body_id: str, period: str | None) -> GoverningBody:
    body = container.bodies.get(body_id, period)
    if body is None:
        suffix = f" ({period})" if period else ""
        raise NotFoundError(f"Governing body not found: {body_id}{suffix}")
    return body


def get_bodies() -> BodiesResponse:
    """Get available governing bodies."""
    items = [
        BodyItem(
            id=b.id,
            name=b.display_name,
            period=b.period,
            country=b.country,
            groups=len(b.groups),
            rules=len(b.rules),
        )
        for b in container.bodies.bodies()
    ]
    return BodiesResponse(items=items)


def get_summary(body_id: str, selected: list[str], period: str | None = None) -> SummaryResponse:
    """Get coalition totals and rule results for a selection."""
    body = _get_body(body_id, period)
    selected_ids = validate_selection(body, selected)
    data = container.coalitions.summary(body, selected_ids)

    rules = [
        RuleItem(
            id=r.rule.id,
            name=r.rule.display_name,
            satisfied=r.satisfied,
            symbol="✔" if r.satisfied else "✖",
        )
        for r in data.rules
    ]

    return SummaryResponse(
        body_id=body.id,
        selected=[g.id for g in body.select(selected_ids)],
        group_count=data.group_count,
        metric=data.metric_id,
        coalition_total=data.coalition_total,
        body_total=data.body_total,
        share_pct=data.share_pct,
        headline=data.headline,
        rules=rules,
    )


def get_suggestions(
    body_id: str,
    selected: list[str],
    rule_id: str | None,
    period: str | None = None,
) -> SuggestionsResponse:
    """Get minimal winning coalitions extending a selection."""
    body = _get_body(body_id, period)
    selected_ids = validate_selection(body, selected)
    data = container.coalitions.suggestions(body, selected_ids, rule_id)

    items = [
        CoalitionItem(
            groups=[g.id for g in c],
            labels=[g.display_name for g in c],
            total=sum_metric(c, data.metric_id),
        )
        for c in data.coalitions
    ]

    return SuggestionsResponse(
        body_id=body.id,
        rule_id=data.rule_id,
        metric=data.metric_id,
        threshold=data.threshold,
        truncated=data.truncated,
        items=items,
    )
