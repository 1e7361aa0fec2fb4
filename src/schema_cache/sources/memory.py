import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from schema_cache.core.ports.source import WalkResult


class InMemorySource:
    """A synthetic descriptor tree held in memory.

    ``files`` maps a path to either raw text or a JSON-serializable value.
    Directories listed in ``unreadable`` report a ``PermissionError`` when
    walked, standing in for an inaccessible directory on disk.
    """

    def __init__(
        self,
        files: Mapping[str | Path, Any] | None = None,
        unreadable: Iterable[str | Path] = (),
    ) -> None:
        self.files: dict[Path, str] = {}
        self.unreadable: set[Path] = {Path(p) for p in unreadable}
        self.reads: list[Path] = []
        for path, content in (files or {}).items():
            self.add(path, content)

    def add(self, path: str | Path, content: Any) -> None:
        self.files[Path(path)] = content if isinstance(content, str) else json.dumps(content)

    def walk(self, directory: Path) -> WalkResult:
        blocked = sorted(d for d in self.unreadable if d == directory or directory in d.parents)
        errors: list[OSError] = [PermissionError(13, "Permission denied", str(d)) for d in blocked]
        files = [
            p
            for p in self.files
            if directory in p.parents and not any(b in p.parents for b in blocked)
        ]
        return WalkResult(files=sorted(files), errors=errors)

    def read_text(self, path: Path) -> str:
        self.reads.append(path)
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(f"File not found: {path}") from None

    def is_file(self, path: Path) -> bool:
        return path in self.files

    def is_dir(self, path: Path) -> bool:
        return any(path in p.parents for p in self.files) or path in self.unreadable
