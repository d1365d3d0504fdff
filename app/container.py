"""Dependency Injection container - initialized at app startup."""

from pathlib import Path

from app.repositories.body import BodyRepository
from app.services.coalition import CoalitionService
from settings import CONFIG_DIR


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, config_dir: Path = CONFIG_DIR) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # Repositories (singletons)
        self.bodies = BodyRepository(config_dir=config_dir)

        # Services
        self.coalitions = CoalitionService()

        self._initialized = True

    def reset(self) -> None:
        """Drop all instances so the next init() starts fresh."""
        self._initialized = False


# Global container instance
container = Container()
