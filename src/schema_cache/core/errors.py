"""Fatal errors raised while building the schema model.

Every error here means the descriptor tree is structurally invalid and no
partial model may be served. Callers decide whether to terminate.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class SchemaError(Exception):
    """Base class for all fatal schema build errors."""


class DescriptorDecodeError(SchemaError):
    def __init__(self, source: str | Path, reason: str) -> None:
        self.source = str(source)
        self.reason = reason
        super().__init__(f"invalid descriptor {self.source}: {reason}")


class DirectoryAccessError(SchemaError):
    def __init__(self, directory: str | Path, errors: Sequence[OSError]) -> None:
        self.directory = str(directory)
        self.errors = list(errors)
        details = "; ".join(str(e) for e in self.errors)
        super().__init__(f"unable to access {self.directory} directory: {details}")


class IncludeNotFoundError(SchemaError):
    def __init__(self, owner: str, path: str | Path) -> None:
        self.owner = owner
        self.path = str(path)
        super().__init__(f"{owner} includes missing file: {self.path}")


class UndefinedExtendsError(SchemaError):
    def __init__(self, kind: str, name: str, parent: str) -> None:
        self.kind = kind
        self.name = name
        self.parent = parent
        super().__init__(f"{kind} {name} extends undefined {kind}: {parent}")


class ExtendsCycleError(SchemaError):
    def __init__(self, kind: str, chain: Sequence[str]) -> None:
        self.kind = kind
        self.chain = list(chain)
        super().__init__(f"cyclic {kind} extends chain: {' -> '.join(self.chain)}")


class InvalidCategoryError(SchemaError):
    def __init__(self, class_name: str, category: str | None) -> None:
        self.class_name = class_name
        self.category = category
        super().__init__(f"{class_name} has invalid category: {category}")
