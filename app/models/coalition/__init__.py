"""Coalition models."""

from app.models.coalition.entities import CoalitionSummary, RuleResult, SearchResult

__all__ = [
    "CoalitionSummary",
    "RuleResult",
    "SearchResult",
]
