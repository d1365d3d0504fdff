#!/usr/bin/env python3
"""
Generate deployment cache files for the config directory.

Writes config/index.json (discovery index, for hosts without directory
listings) and config/manifest.json ({id: {period: file}}).

Usage:
    python build_cache.py                       # Scan local config directory
    python build_cache.py path/to/config        # Scan another directory
    python build_cache.py --base-url URL        # Discover and load over HTTP
    python build_cache.py --validate            # Validate bodies only
"""

import asyncio
import sys
from pathlib import Path

import httpx
from loguru import logger

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from body_client import DiscoveryClient, DiscoveryError, ManifestClient
from etl import BodyDocumentError, CacheError, build_local, load_body_file, validate_body, write_artifacts
from etl.cache import INDEX_NAME, MANIFEST_NAME
from settings import CONFIG_DIR
from settings.logging import setup_logging


def run_validation(config_dir: Path) -> bool:
    """Validate every body document in the directory."""
    files = sorted(p for p in config_dir.glob("*.json") if p.name not in (INDEX_NAME, MANIFEST_NAME))

    if not files:
        print(f"\n⚠️  No config files found in {config_dir}\n")
        return True

    print("\n" + "=" * 60)
    print("GOVERNING BODY VALIDATION REPORT")
    print("=" * 60)

    all_valid = True
    for path in files:
        try:
            body = load_body_file(path)
        except BodyDocumentError as e:
            all_valid = False
            print(f"\n{path.name} ❌\n  ⚠️  {e}")
            continue

        result = validate_body(body)
        status = "✅" if result["valid"] else "❌"
        print(f"\n{path.name}: {body.display_name} {status}")
        print(f"  Metrics: {result['stats']['metrics']} (default: {result['stats']['default_metric']})")
        print(f"  Groups: {result['stats']['groups']}")
        print(f"  Rules: {result['stats']['rules']}")
        if result["issues"]:
            all_valid = False
            for issue in result["issues"]:
                print(f"  ⚠️  {issue}")

    print("\n" + "=" * 60)
    print("✅ All bodies valid!" if all_valid else "❌ Some issues found.")
    print("=" * 60 + "\n")
    return all_valid


async def build_remote(base_url: str, config_dir: Path, transport: httpx.AsyncBaseTransport | None = None) -> dict:
    """Discover and load configs from a served directory, then write artifacts."""
    async with DiscoveryClient(base_url=base_url, transport=transport) as client:
        entries = await client.get_config_index()
    async with ManifestClient(base_url=base_url, transport=transport) as client:
        loaded = await client.load_all(entries)
    return write_artifacts(config_dir, entries, loaded)


def main():
    args = sys.argv[1:]
    setup_logging("build_cache", level="INFO", to_file=True)

    base_url = None
    if "--base-url" in args:
        i = args.index("--base-url")
        if i + 1 >= len(args):
            print(__doc__)
            sys.exit(1)
        base_url = args[i + 1]
        del args[i : i + 2]

    validate_only = "--validate" in args
    args = [a for a in args if a != "--validate"]
    config_dir = Path(args[0]) if args else CONFIG_DIR

    if validate_only:
        sys.exit(0 if run_validation(config_dir) else 1)

    try:
        if base_url:
            logger.info("Building cache from {}", base_url)
            manifest = asyncio.run(build_remote(base_url, config_dir))
        else:
            logger.info("Building cache from {}", config_dir)
            manifest = build_local(config_dir)
    except (CacheError, DiscoveryError, httpx.HTTPError) as e:
        logger.error("{}", e)
        sys.exit(1)

    logger.info("Cache complete: {} bodies", len(manifest))


if __name__ == "__main__":
    main()
