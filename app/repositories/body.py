"""Body repository - governing bodies from a local config directory."""

from pathlib import Path

from loguru import logger

from app.models.body import GoverningBody
from app.repositories.base import BaseRepository
from body_client.discovery import parse_manifest
from body_client.schemas import ConfigEntrySchema
from etl.cache import INDEX_NAME, CacheError, load_local, scan_config_dir, verify_json_file
from etl.loader import BodyDocumentError, parse_body
from settings import CONFIG_DIR


class BodyRepository(BaseRepository):
    """Repository for governing body documents.

    Bodies are keyed by (id, period). Registered bodies take precedence over
    files; files are parsed lazily and cached.
    """

    def __init__(self, config_dir: Path = CONFIG_DIR):
        super().__init__()
        self._config_dir = Path(config_dir)
        self._bodies: dict[tuple[str, str | None], GoverningBody] = {}

    def add(self, body: GoverningBody) -> None:
        """Register a parsed body."""
        self._bodies[(body.id, body.period)] = body
        logger.debug("Registered body {} ({})", body.id, body.period)

    def entries(self) -> list[ConfigEntrySchema]:
        """Config files: the generated index if present, else a directory scan."""

        def fetch():
            if not self._config_dir.is_dir():
                logger.warning("Config directory {} not found", self._config_dir)
                return []
            index = self._config_dir / INDEX_NAME
            if index.exists():
                try:
                    return parse_manifest(verify_json_file(index, "array"))
                except CacheError as e:
                    logger.warning("Ignoring {}: {}", INDEX_NAME, e)
            return scan_config_dir(self._config_dir)

        return self._cached("entries", fetch)

    def _file_bodies(self) -> list[GoverningBody]:
        def fetch():
            bodies = []
            for item in load_local(self._config_dir, self.entries()):
                try:
                    bodies.append(parse_body(item.config))
                except BodyDocumentError as e:
                    logger.warning("Skipping {}: {}", item.file, e)
            logger.info("Loaded {} bodies from {}", len(bodies), self._config_dir)
            return bodies

        return self._cached("bodies", fetch)

    def bodies(self) -> list[GoverningBody]:
        """All known bodies, registered first."""
        known = dict(self._bodies)
        for body in self._file_bodies():
            known.setdefault((body.id, body.period), body)
        return list(known.values())

    def get(self, body_id: str, period: str | None = None) -> GoverningBody | None:
        """Body by id; without a period, the latest period wins."""
        matches = [b for b in self.bodies() if b.id == body_id and (period is None or b.period == period)]
        if not matches:
            return None
        return max(matches, key=lambda b: b.period or "")
