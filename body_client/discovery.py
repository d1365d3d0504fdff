"""Config discovery - JSON manifest first, HTML directory listing as fallback."""

import re
from collections.abc import Callable
from urllib.parse import urljoin, urlsplit

import httpx
from bs4 import BeautifulSoup
from loguru import logger

from body_client.base import HTML_ACCEPT, BaseClient
from body_client.schemas import ConfigEntrySchema
from settings import AUTOINDEX_URL, MANIFEST_URL

_ABSOLUTE_URL = re.compile(r"^https?://", re.IGNORECASE)


class DiscoveryError(Exception):
    """Config index could not be discovered."""


def infer_label(file: str) -> str:
    """'config/no_storting_2025-2029.json' -> 'No storting 2025 2029'."""
    name = file.split("/")[-1] or file
    base = re.sub(r"[_-]+", " ", re.sub(r"\.json$", "", name, flags=re.IGNORECASE))
    return base[:1].upper() + base[1:]


def normalize_href(base_url: str, href: str) -> str:
    """Resolve a listing href to a path, keeping absolute hrefs untouched."""
    if _ABSOLUTE_URL.match(href) or href.startswith("/"):
        return href
    parts = urlsplit(urljoin(base_url, href))
    path = parts.path
    if parts.query:
        path += f"?{parts.query}"
    if parts.fragment:
        path += f"#{parts.fragment}"
    return path


def parse_manifest(data, label_fn: Callable[[str], str] = infer_label) -> list[ConfigEntrySchema] | None:
    """Normalize a manifest payload; None if it is not a list."""
    if not isinstance(data, list):
        return None

    entries = []
    for item in data:
        if isinstance(item, str):
            entries.append(ConfigEntrySchema(file=item, label=label_fn(item)))
        elif isinstance(item, dict) and isinstance(item.get("file"), str):
            label = item.get("label")
            entries.append(
                ConfigEntrySchema(
                    file=item["file"],
                    label=label if isinstance(label, str) else label_fn(item["file"]),
                )
            )
    return entries


def parse_autoindex(html: str, base_url: str, label_fn: Callable[[str], str] = infer_label) -> list[ConfigEntrySchema]:
    """Collect .json links from a directory listing page."""
    soup = BeautifulSoup(html, "html.parser")
    seen = set()
    entries = []

    for a in soup.find_all("a"):
        href = (a.get("href") or "").strip()
        if not href or href == "../" or "?" in href:
            continue
        if not href.lower().endswith(".json"):
            continue

        file = normalize_href(base_url, href)
        if file in seen:
            continue
        seen.add(file)
        entries.append(ConfigEntrySchema(file=file, label=label_fn(file)))

    return entries


class DiscoveryClient(BaseClient):
    """Client for config index discovery."""

    async def get_config_index(
        self,
        manifest_url: str = MANIFEST_URL,
        autoindex_url: str = AUTOINDEX_URL,
        label_fn: Callable[[str], str] = infer_label,
    ) -> list[ConfigEntrySchema]:
        """Available config files, from the manifest or the directory listing."""
        entries = await self._try_manifest(manifest_url, label_fn)
        if entries is not None:
            logger.info("Discovered {} configs from manifest {}", len(entries), manifest_url)
            return entries

        entries = await self._from_autoindex(autoindex_url, label_fn)
        logger.info("Discovered {} configs from listing {}", len(entries), autoindex_url)
        return entries

    async def _try_manifest(self, manifest_url: str, label_fn) -> list[ConfigEntrySchema] | None:
        try:
            resp = await self._fetch(manifest_url)
        except httpx.HTTPError as e:
            logger.warning("Failed to load manifest, falling back to listing: {}", e)
            return None

        if not resp.is_success:
            return None
        if "application/json" not in resp.headers.get("content-type", ""):
            return None

        try:
            data = resp.json()
        except ValueError as e:
            logger.warning("Manifest is not valid JSON, falling back to listing: {}", e)
            return None

        return parse_manifest(data, label_fn)

    async def _from_autoindex(self, autoindex_url: str, label_fn) -> list[ConfigEntrySchema]:
        try:
            resp = await self._fetch(autoindex_url, accept=HTML_ACCEPT)
        except httpx.HTTPError as e:
            raise DiscoveryError(f"Failed to load listing from {autoindex_url}: {e}") from e

        if not resp.is_success:
            raise DiscoveryError(f"Failed to load listing from {autoindex_url}: HTTP {resp.status_code}")

        return parse_autoindex(resp.text, autoindex_url, label_fn)
