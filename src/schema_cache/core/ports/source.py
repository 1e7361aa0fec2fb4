from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol


@dataclass(frozen=True)
class WalkResult:
    """Outcome of a directory traversal.

    ``files`` is sorted; ``errors`` holds every failure met during the walk
    instead of raising mid-walk.
    """

    files: list[Path] = field(default_factory=list)
    errors: list[OSError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class DescriptorSource(Protocol):
    def walk(self, directory: Path) -> WalkResult: ...

    def read_text(self, path: Path) -> str: ...

    def is_file(self, path: Path) -> bool: ...

    def is_dir(self, path: Path) -> bool: ...
