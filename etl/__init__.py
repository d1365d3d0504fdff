"""ETL package - governing body documents, validation and static artifacts."""

from etl.cache import CacheError, build_local, verify_json_file, write_artifacts
from etl.loader import BodyDocumentError, load_body_file, parse_body
from etl.validation import validate_body

__all__ = [
    "BodyDocumentError",
    "CacheError",
    "build_local",
    "load_body_file",
    "parse_body",
    "validate_body",
    "verify_json_file",
    "write_artifacts",
]
