import os
from pathlib import Path

from schema_cache.core.loader import DEFAULT_EXTENSIONS_DIR

DEFAULT_SCHEMA_HOME = "../schema"


def get_schema_home() -> Path:
    return Path(os.getenv("SCHEMA_HOME", DEFAULT_SCHEMA_HOME))


def get_extensions_dir() -> str:
    return os.getenv("SCHEMA_EXTENSIONS_DIR", DEFAULT_EXTENSIONS_DIR)
