"""Minimal winning coalition search.

Depth-first include/exclude enumeration over the groups outside the baseline,
driven by a single sum condition of the chosen rule on the body's default
metric. A branch stops as soon as it wins; a winning set is kept only if
dropping any single added group makes it lose.
"""

from collections.abc import Iterable

from loguru import logger

from app.models.body import GoverningBody, SumCondition
from app.models.coalition import SearchResult
from engine.metrics import default_metric, metric_value, sum_metric
from engine.rules import OPERATORS, compare, find_rule
from engine.thresholds import resolve
from settings import SEARCH_MAX_GROUPS, SEARCH_MAX_NODES


def _suffix_sums(values: list[float], keep) -> list[float]:
    """suffix[i] = sum of kept values[i:]."""
    suffix = [0] * (len(values) + 1)
    for i in range(len(values) - 1, -1, -1):
        v = values[i]
        suffix[i] = suffix[i + 1] + (v if keep(v) else 0)
    return suffix


def _bound(operator: str, values: list[float]):
    """Most favourable sum still reachable from index i, or None if not prunable.

    Reachable sums from ``current`` lie in [current + negatives, current + positives]
    of the remaining values, so only the side the operator moves towards matters.
    """
    if operator in (">", ">="):
        return _suffix_sums(values, lambda v: v > 0)
    if operator in ("<", "<="):
        return _suffix_sums(values, lambda v: v < 0)
    return None


def search_coalitions(
    body: GoverningBody,
    baseline_ids: Iterable[str],
    rule_id: str | None,
    max_groups: int | None = SEARCH_MAX_GROUPS,
    max_nodes: int | None = SEARCH_MAX_NODES,
) -> SearchResult:
    """Find every minimal winning superset of the baseline for a rule.

    ``max_groups`` rejects searches with more non-baseline groups than allowed,
    ``max_nodes`` stops the enumeration after that many visited nodes; both set
    ``truncated`` on the result. ``None`` disables a bound.
    """
    baseline = set(baseline_ids)

    metric_id = default_metric(body)
    if metric_id is None:
        logger.debug("No default metric for {}, nothing to search", body.id)
        return SearchResult()

    rule = find_rule(body, rule_id)
    if rule is None:
        return SearchResult(metric_id=metric_id)

    driver = next(
        (c for c in rule.conditions if isinstance(c, SumCondition) and c.metric == metric_id),
        None,
    )
    if driver is None:
        logger.debug("Rule {} has no sum condition on {}", rule.id, metric_id)
        return SearchResult(rule_id=rule.id, metric_id=metric_id)

    operator = driver.operator
    threshold = resolve(driver.threshold, metric_id, body)
    result = SearchResult(rule_id=rule.id, metric_id=metric_id, threshold=threshold)

    if operator not in OPERATORS:
        logger.warning("Unknown operator {!r} in rule {}, nothing can win", operator, rule.id)
        return result

    remaining = [g for g in body.groups if g.id not in baseline]
    k = len(remaining)
    if max_groups is not None and k > max_groups:
        logger.warning(
            "Search rejected for {}: {} non-baseline groups exceeds limit {}",
            body.id,
            k,
            max_groups,
        )
        result.truncated = True
        return result

    values = [metric_value(g, metric_id) for g in remaining]
    bound = _bound(operator, values)
    added: list[int] = []

    def dfs(index: int, current: float) -> None:
        if max_nodes is not None and result.nodes >= max_nodes:
            result.truncated = True
            return
        result.nodes += 1

        if compare(operator, current, threshold):
            # Minimal only if every added group is critical; baseline is never removed
            for i in added:
                if compare(operator, current - values[i], threshold):
                    return
            chosen = {remaining[i].id for i in added} | baseline
            result.coalitions.append(body.select(chosen))
            return

        if index >= k:
            return

        if bound is not None and not compare(operator, current + bound[index], threshold):
            return

        added.append(index)
        dfs(index + 1, current + values[index])
        added.pop()

        dfs(index + 1, current)

    dfs(0, sum_metric(body.select(baseline), metric_id))

    if result.truncated:
        logger.warning(
            "Search for {} stopped after {} nodes, {} coalitions so far",
            body.id,
            result.nodes,
            len(result.coalitions),
        )
    else:
        logger.debug("Search for {}: {} coalitions, {} nodes", body.id, len(result.coalitions), result.nodes)
    return result


def find_minimal_winning_coalitions(body: GoverningBody, baseline_ids: Iterable[str], rule_id: str | None, **bounds):
    """Minimal winning coalitions extending the baseline, in discovery order."""
    return search_coalitions(body, baseline_ids, rule_id, **bounds).coalitions
