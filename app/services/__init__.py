"""Services package - service class exports."""

from app.services.coalition import CoalitionService

__all__ = [
    "CoalitionService",
]
