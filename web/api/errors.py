"""API errors and validation helpers."""

from collections.abc import Iterable

from app.models.body import GoverningBody


class NotFoundError(Exception):
    """Resource not found."""

    def __init__(self, message: str = "Resource not found"):
        self.message = message
        super().__init__(self.message)


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


def validate_selection(body: GoverningBody, selected: Iterable[str]) -> set[str]:
    """Check every selected id names a group of the body."""
    selected = set(selected)
    unknown = selected - {g.id for g in body.groups}
    if unknown:
        raise ValidationError(f"Unknown group ids for {body.id}: {', '.join(sorted(unknown))}")
    return selected
