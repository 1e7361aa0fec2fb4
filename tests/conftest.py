"""Shared fixtures and helpers for tests."""

from pathlib import Path
from typing import Any

import pytest

from schema_cache.cache import Cache
from schema_cache.core.build import build_cache, load_cache
from schema_cache.sources import InMemorySource

_REPO_ROOT = Path(__file__).parent.parent
FIXTURE_HOME = _REPO_ROOT / "tests" / "fixtures" / "schema"
HOME = Path("/schema")


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# In-memory schema trees
# ---------------------------------------------------------------------------


def schema_files(
    classes: dict[str, Any] | None = None,
    objects: dict[str, Any] | None = None,
    categories: dict[str, Any] | None = None,
    dictionary: dict[str, Any] | None = None,
    extra: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a minimal file map rooted at ``/schema``.

    ``classes`` and ``objects`` map a descriptor file name (without suffix)
    to its content; ``extra`` adds files at arbitrary paths below the home.
    """
    files: dict[str, Any] = {
        f"{HOME}/version.json": {"version": "1.0.0"},
        f"{HOME}/categories.json": {
            "attributes": categories if categories is not None else {"system": {"id": 1, "caption": "System"}}
        },
        f"{HOME}/dictionary.json": {
            "attributes": dictionary
            if dictionary is not None
            else {
                "message": {"type": "string_t", "description": "Y", "requirement": "optional"},
            }
        },
    }
    for name, content in (classes or {}).items():
        files[f"{HOME}/events/{name}.json"] = content
    for name, content in (objects or {}).items():
        files[f"{HOME}/objects/{name}.json"] = content
    for path, content in (extra or {}).items():
        files[f"{HOME}/{path}"] = content
    return files


def build_from(files: dict[str, Any], **kwargs: Any) -> Cache:
    return build_cache(InMemorySource(files), HOME, **kwargs)


@pytest.fixture
def memory_source() -> InMemorySource:
    return InMemorySource(schema_files())


@pytest.fixture(scope="session")
def fixture_home() -> Path:
    """Return the path to the on-disk fixture schema."""
    return FIXTURE_HOME


@pytest.fixture(scope="session")
def fixture_cache() -> Cache:
    return load_cache(FIXTURE_HOME)
