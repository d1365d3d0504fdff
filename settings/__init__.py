"""Application settings."""

import os
from pathlib import Path

# Config source
CONFIG_DIR = Path(os.getenv("GB_CONFIG_DIR", "config"))
CONFIG_BASE_URL = os.getenv("GB_CONFIG_BASE_URL", "http://127.0.0.1:8000")
MANIFEST_URL = "/config/index.json"
AUTOINDEX_URL = "/config/"

# Logging
LOG_DIR = Path(os.getenv("GB_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("GB_LOG_LEVEL")

# HTTP
API_TIMEOUT = 60
MAX_CONCURRENT = 20

# Coalition search bounds
SEARCH_MAX_GROUPS = int(os.getenv("GB_SEARCH_MAX_GROUPS", "25"))
SEARCH_MAX_NODES = int(os.getenv("GB_SEARCH_MAX_NODES", "1000000"))
