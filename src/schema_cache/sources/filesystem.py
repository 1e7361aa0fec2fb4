import os
from pathlib import Path

from schema_cache.core.ports.source import WalkResult


class FileSystemSource:
    """Read descriptor files from the local filesystem.

    Implements the ``DescriptorSource`` protocol.
    """

    def walk(self, directory: Path) -> WalkResult:
        files: list[Path] = []
        errors: list[OSError] = []
        for dirpath, dirnames, filenames in os.walk(directory, onerror=errors.append):
            dirnames.sort()
            files.extend(Path(dirpath) / name for name in filenames)
        return WalkResult(files=sorted(files), errors=errors)

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()
