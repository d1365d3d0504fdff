"""Coalition services."""

from app.services.coalition.service import CoalitionService

__all__ = [
    "CoalitionService",
]
