"""Static deployment artifacts - config/index.json and config/manifest.json."""

import json
from pathlib import Path

from loguru import logger

from body_client.discovery import infer_label
from body_client.manifest import LoadedConfig, create_manifest
from body_client.schemas import ConfigEntrySchema

INDEX_NAME = "index.json"
MANIFEST_NAME = "manifest.json"


class CacheError(Exception):
    """Generated artifact failed verification."""


def scan_config_dir(config_dir: Path) -> list[ConfigEntrySchema]:
    """JSON configs in a directory, like a directory listing would show them."""
    skip = {INDEX_NAME, MANIFEST_NAME}
    files = sorted(p for p in Path(config_dir).iterdir() if p.suffix.lower() == ".json" and p.name not in skip)
    base = Path(config_dir).name
    return [ConfigEntrySchema(file=f"/{base}/{p.name}", label=infer_label(p.name)) for p in files]


def load_local(config_dir: Path, entries: list[ConfigEntrySchema]) -> list[LoadedConfig]:
    """Read discovered configs from disk; unreadable files are skipped."""
    loaded = []
    for entry in entries:
        path = Path(config_dir) / entry.file.rsplit("/", 1)[-1]
        try:
            loaded.append(LoadedConfig(file=entry.file, config=json.loads(path.read_text(encoding="utf-8"))))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Failed to load config {}: {}", entry.file, e)
    return loaded


def write_json(path: Path, data) -> None:
    """Write pretty JSON with a trailing newline."""
    Path(path).write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


def verify_json_file(path: Path, shape: str | None = None):
    """Check a generated file exists, is non-empty JSON of the expected shape."""
    path = Path(path)
    if not path.exists():
        raise CacheError(f"Expected file not found: {path}")
    if path.stat().st_size <= 0:
        raise CacheError(f"File is empty: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise CacheError(f"File is not valid JSON: {path}: {e}") from e

    if shape == "array" and not isinstance(data, list):
        raise CacheError(f"Expected JSON array in {path}")
    if shape == "object" and not isinstance(data, dict):
        raise CacheError(f"Expected JSON object in {path}")
    return data


def write_artifacts(
    config_dir: Path,
    entries: list[ConfigEntrySchema],
    loaded: list[LoadedConfig],
) -> dict[str, dict[str, str]]:
    """Write index.json and manifest.json into config_dir and verify them."""
    config_dir = Path(config_dir)
    index_path = config_dir / INDEX_NAME
    manifest_path = config_dir / MANIFEST_NAME

    write_json(index_path, [e.model_dump() for e in entries])
    verify_json_file(index_path, "array")
    logger.info("Wrote {} ({} entries)", index_path, len(entries))

    manifest = create_manifest(loaded)
    write_json(manifest_path, manifest)
    verify_json_file(manifest_path, "object")
    logger.info("Wrote {} ({} bodies)", manifest_path, len(manifest))
    return manifest


def build_local(config_dir: Path) -> dict[str, dict[str, str]]:
    """Regenerate both artifacts from the files in config_dir."""
    config_dir = Path(config_dir)
    if not config_dir.is_dir():
        raise CacheError(f"Missing config directory: {config_dir}")

    for name in (INDEX_NAME, MANIFEST_NAME):
        (config_dir / name).unlink(missing_ok=True)

    entries = scan_config_dir(config_dir)
    return write_artifacts(config_dir, entries, load_local(config_dir, entries))
