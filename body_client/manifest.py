"""Bulk config loading and id/period manifest."""

import asyncio
from dataclasses import dataclass
from typing import Any

from loguru import logger

from body_client.base import BaseClient
from body_client.schemas import ConfigEntrySchema


@dataclass
class LoadedConfig:
    """Fetched config document."""

    file: str
    config: Any


class ManifestClient(BaseClient):
    """Client loading discovered config documents."""

    async def load_all(self, entries: list[ConfigEntrySchema]) -> list[LoadedConfig]:
        """Fetch all configs concurrently; failed ones are logged and skipped."""
        if not entries:
            logger.warning("No config entries discovered")
            return []

        results = await asyncio.gather(
            *(self._get_json(e.file) for e in entries),
            return_exceptions=True,
        )

        loaded = []
        for entry, result in zip(entries, results):
            if isinstance(result, Exception):
                logger.warning("Failed to load config {}: {}", entry.file, result)
                continue
            loaded.append(LoadedConfig(file=entry.file, config=result))

        logger.info("Loaded {}/{} configs", len(loaded), len(entries))
        return loaded


def _period_of(config: dict) -> Any:
    period = config.get("period")
    if period is None and isinstance(config.get("metadata"), dict):
        period = config["metadata"].get("period")
    return period


def create_manifest(loaded: list[LoadedConfig]) -> dict[str, dict[str, str]]:
    """Build {id: {period: file}} from loaded configs."""
    manifest: dict[str, dict[str, str]] = {}

    for item in loaded:
        config = item.config
        if not isinstance(config, dict):
            logger.warning("Skipping entry with invalid config: {}", item.file)
            continue

        body_id = config.get("id")
        if not isinstance(body_id, str) or not body_id:
            logger.warning("Skipping entry without valid id: {}", item.file)
            continue

        period = _period_of(config)
        if not isinstance(period, str) or not period:
            logger.warning("Skipping entry without valid period: {}", item.file)
            continue

        periods = manifest.setdefault(body_id, {})
        if period in periods and periods[period] != item.file:
            logger.warning(
                "Duplicate id/period {}/{}: existing {}, new {}",
                body_id,
                period,
                periods[period],
                item.file,
            )
        periods[period] = item.file

    return manifest
