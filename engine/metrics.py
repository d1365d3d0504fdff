"""Metric resolver - default metric, sums and totals."""

from collections.abc import Iterable

from app.models.body import GoverningBody, Group


def default_metric(body: GoverningBody) -> str | None:
    """Flagged default metric, else the first declared one, else None."""
    for metric_id, metric in body.metrics.items():
        if metric is not None and metric.is_default:
            return metric_id
    return next(iter(body.metrics), None)


def metric_value(group: Group, metric_id: str | None) -> float:
    """Numeric value of a metric for a group; absent or non-numeric is 0."""
    value = group.metrics.get(metric_id)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return value


def sum_metric(groups: Iterable[Group], metric_id: str | None) -> float:
    """Sum of a metric across groups."""
    return sum(metric_value(g, metric_id) for g in groups)


def total(body: GoverningBody, metric_id: str | None, groups: Iterable[Group] | None = None) -> float:
    """Declared total of a metric, else the sum over ``groups`` (default: all groups)."""
    metric = body.metrics.get(metric_id)
    if metric is not None and metric.total is not None:
        return metric.total
    return sum_metric(body.groups if groups is None else groups, metric_id)
