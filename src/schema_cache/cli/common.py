from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from schema_cache.cache import Cache
from schema_cache.config import get_extensions_dir, get_schema_home
from schema_cache.core.build import load_cache
from schema_cache.core.errors import SchemaError

console = Console()

HomeOption = Annotated[
    Path | None,
    typer.Option("--home", envvar="SCHEMA_HOME", help="Schema home directory (default: ../schema)."),
]
ExtensionsOption = Annotated[
    str | None,
    typer.Option("--extensions-dir", help="Name of the extensions directory below the schema home."),
]


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _get_cache(home: Path | None = None, extensions_dir: str | None = None) -> Cache:
    """Build the cache, exiting with status 1 if the schema is structurally invalid."""
    try:
        return load_cache(home or get_schema_home(), extensions_dir or get_extensions_dir())
    except SchemaError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1) from exc
