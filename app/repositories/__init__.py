"""Repositories package - access to governing body documents."""

from app.repositories.base import BaseRepository
from app.repositories.body import BodyRepository

__all__ = [
    "BaseRepository",
    "BodyRepository",
]
