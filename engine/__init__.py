"""Coalition engine - metric sums, thresholds, rules and minimal coalition search.

Pure functions over immutable bodies: no I/O, no shared state.
"""

from engine.metrics import default_metric, metric_value, sum_metric, total
from engine.rules import compare, evaluate, evaluate_all, evaluate_condition, find_rule
from engine.search import find_minimal_winning_coalitions, search_coalitions
from engine.thresholds import resolve

__all__ = [
    # Metrics
    "default_metric",
    "metric_value",
    "sum_metric",
    "total",
    # Thresholds
    "resolve",
    # Rules
    "compare",
    "evaluate",
    "evaluate_all",
    "evaluate_condition",
    "find_rule",
    # Search
    "find_minimal_winning_coalitions",
    "search_coalitions",
]
