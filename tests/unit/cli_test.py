"""Tests for the command line interface."""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest
from conftest import build_from, schema_files
from typer.testing import CliRunner

from schema_cache.cache import Cache
from schema_cache.cli.app import app
from schema_cache.config import DEFAULT_SCHEMA_HOME, get_extensions_dir, get_schema_home

runner = CliRunner()


@pytest.fixture
def cache() -> Cache:
    return build_from(
        schema_files(
            classes={
                "login": {
                    "type": "login",
                    "name": "Login",
                    "uid": 7,
                    "category": "system",
                    "attributes": {"message": {}},
                },
                "logout": {"type": "logout", "name": "Logout", "uid": 3, "category": "system"},
            },
            objects={"user": {"type": "user", "name": "User"}},
        )
    )


def _invoke(cache: Cache, *args: str) -> Any:
    with patch("schema_cache.cli.query._get_cache", return_value=cache):
        return runner.invoke(app, ["query", *args])


@pytest.mark.parametrize(
    "args",
    [[], ["check"], ["query"], ["query", "classes"], ["query", "find-class"]],
    ids=["root", "check", "query", "query-classes", "query-find-class"],
)
def test_short_help_flag(args: list[str]) -> None:
    result = runner.invoke(app, [*args, "-h"])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_version(cache: Cache) -> None:
    result = _invoke(cache, "version")
    assert result.exit_code == 0
    assert "1.0.0" in result.output


def test_classes_listing(cache: Cache) -> None:
    result = _invoke(cache, "classes")
    assert result.exit_code == 0
    assert "login" in result.output
    assert "logout" in result.output
    assert "(2 rows)" in result.output
    assert result.output.index("logout") < result.output.index("login")


def test_class_detail_is_enriched_json(cache: Cache) -> None:
    result = _invoke(cache, "classes", "login")
    assert result.exit_code == 0
    assert '"string_t"' in result.output
    assert '"event_uid"' in result.output


def test_unknown_class_exits_with_not_found(cache: Cache) -> None:
    result = _invoke(cache, "classes", "nope")
    assert result.exit_code == 1
    assert "Not Found: nope" in result.output


def test_find_class(cache: Cache) -> None:
    assert _invoke(cache, "find-class", "7").exit_code == 0
    missing = _invoke(cache, "find-class", "99")
    assert missing.exit_code == 1
    assert "Not Found: 99" in missing.output


def test_category_detail_lists_classes(cache: Cache) -> None:
    result = _invoke(cache, "categories", "system")
    assert result.exit_code == 0
    assert result.output.index('"logout"') < result.output.index('"login"')


def test_categories_and_objects_listings(cache: Cache) -> None:
    assert "system" in _invoke(cache, "categories").output
    assert "user" in _invoke(cache, "objects").output
    assert _invoke(cache, "objects", "user").exit_code == 0
    assert _invoke(cache, "objects", "nope").exit_code == 1


def test_dictionary_listing(cache: Cache) -> None:
    result = _invoke(cache, "dictionary")
    assert result.exit_code == 0
    assert "message" in result.output


def test_fatal_schema_error_exits_with_status_1(tmp_path: Path) -> None:
    (tmp_path / "categories.json").write_text("{not json", encoding="utf-8")

    result = runner.invoke(app, ["check", "--home", str(tmp_path)])

    assert result.exit_code == 1
    assert "Error" in result.output



def test_undecodable_descriptor_exits_with_status_1(tmp_path: Path) -> None:
    (tmp_path / "categories.json").write_bytes(b"\xff\xfe")

    result = runner.invoke(app, ["check", "--home", str(tmp_path)])

    assert result.exit_code == 1
    assert "Error" in result.output
    assert not isinstance(result.exception, UnicodeDecodeError)

class TestConfig:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SCHEMA_HOME", raising=False)
        monkeypatch.delenv("SCHEMA_EXTENSIONS_DIR", raising=False)

        assert get_schema_home() == Path(DEFAULT_SCHEMA_HOME)
        assert get_extensions_dir() == "extensions"

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCHEMA_HOME", "/opt/schema")
        monkeypatch.setenv("SCHEMA_EXTENSIONS_DIR", "plugins")

        assert get_schema_home() == Path("/opt/schema")
        assert get_extensions_dir() == "plugins"
