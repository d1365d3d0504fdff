"""Coalition API - summaries and suggestions."""

from .views import get_bodies, get_suggestions, get_summary

__all__ = [
    "get_bodies",
    "get_summary",
    "get_suggestions",
]
