"""Base entity class for all domain entities."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class BaseEntity:
    """Base class for all entities."""

    def to_dict(self, exclude: set[str] | None = None) -> dict[str, Any]:
        """Convert entity to dictionary, optionally dropping top-level fields."""
        data = asdict(self)
        for key in exclude or ():
            data.pop(key, None)
        return data
