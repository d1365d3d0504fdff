"""Coalition service - summaries, rule reports and suggestions."""

from collections.abc import Iterable

from loguru import logger

from app.models.body import GoverningBody
from app.models.coalition import CoalitionSummary, SearchResult
from engine import default_metric, evaluate_all, search_coalitions, sum_metric, total


class CoalitionService:
    """Coalition analytics over a body and an explicit selection."""

    def __init__(self, max_groups: int | None = None, max_nodes: int | None = None):
        self._bounds = {}
        if max_groups is not None:
            self._bounds["max_groups"] = max_groups
        if max_nodes is not None:
            self._bounds["max_nodes"] = max_nodes
        logger.debug("CoalitionService initialized")

    def summary(self, body: GoverningBody, selected_ids: Iterable[str]) -> CoalitionSummary:
        """Totals, share of body total and rule results for a selection."""
        coalition = body.select(selected_ids)
        metric_id = default_metric(body)
        metric = body.metrics.get(metric_id) if metric_id else None
        rules = evaluate_all(body, coalition)

        coalition_total = body_total = share = None
        if metric is not None:
            body_total = total(body, metric_id)
            coalition_total = sum_metric(coalition, metric_id)
            share = coalition_total / body_total * 100 if body_total > 0 else None

        if not coalition:
            headline = "No groups selected."
        elif metric is not None:
            pct = f" ({share:.1f}% of {body_total})" if share is not None else ""
            unit = metric.unit or metric.label or metric_id
            headline = f"Coalition: {len(coalition)} groups, {coalition_total} {unit}{pct}"
        else:
            headline = f"Coalition: {len(coalition)} groups."

        logger.debug("Summary for {}: {}", body.id, headline)
        return CoalitionSummary(
            group_count=len(coalition),
            metric_id=metric_id,
            metric_label=metric.label if metric else None,
            unit=metric.unit if metric else None,
            coalition_total=coalition_total,
            body_total=body_total,
            share_pct=round(share, 1) if share is not None else None,
            rules=rules,
            headline=headline,
        )

    def suggestions(
        self,
        body: GoverningBody,
        selected_ids: Iterable[str],
        selected_rule_id: str | None,
    ) -> SearchResult:
        """Minimal winning coalitions extending the selection; none without a rule."""
        if selected_rule_id is None:
            return SearchResult()

        result = search_coalitions(body, selected_ids, selected_rule_id, **self._bounds)
        logger.info(
            "Suggested {} coalitions for {} / {}",
            len(result.coalitions),
            body.id,
            result.rule_id,
        )
        return result
