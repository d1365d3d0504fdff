"""Config source package - discovery and loading of governing body documents."""

from body_client.base import BaseClient
from body_client.discovery import DiscoveryClient, DiscoveryError, infer_label, normalize_href
from body_client.manifest import LoadedConfig, ManifestClient, create_manifest
from body_client.schemas import ConfigEntrySchema, GoverningBodySchema

__all__ = [
    # Base
    "BaseClient",
    # Discovery
    "DiscoveryClient",
    "DiscoveryError",
    "infer_label",
    "normalize_href",
    # Manifest
    "LoadedConfig",
    "ManifestClient",
    "create_manifest",
    # Schemas
    "ConfigEntrySchema",
    "GoverningBodySchema",
]
