from schema_cache.sources.filesystem import FileSystemSource
from schema_cache.sources.memory import InMemorySource

__all__ = [
    "FileSystemSource",
    "InMemorySource",
]
