from collections.abc import Sequence
from typing import Annotated, Any

import typer
from pydantic import BaseModel
from rich.table import Table

from schema_cache.cli.common import ExtensionsOption, HomeOption, _get_cache, console

query_app = typer.Typer(help="Query the resolved schema.")

IdArgument = Annotated[str | None, typer.Argument(help="Identifier of a single entry.")]


def _render_table(headers: Sequence[str], rows: Sequence[tuple[Any, ...]]) -> None:
    table = Table(show_lines=False)
    for h in headers:
        table.add_column(h)
    for row in rows:
        table.add_row(*("" if v is None else str(v) for v in row))
    console.print(table)
    console.print(f"({len(rows)} rows)")


def _render_entity(entity: BaseModel | None, id: str) -> None:
    if entity is None:
        console.print(f"Not Found: {id}")
        raise typer.Exit(1)
    console.print_json(data=entity.model_dump(mode="json", exclude_none=True))


@query_app.command("version")
def version(home: HomeOption = None, extensions_dir: ExtensionsOption = None) -> None:
    """Show the schema version."""
    console.print(_get_cache(home, extensions_dir).version())


@query_app.command("categories")
def categories(id: IdArgument = None, home: HomeOption = None, extensions_dir: ExtensionsOption = None) -> None:
    """List categories, or show one category and its classes."""
    cache = _get_cache(home, extensions_dir)
    if id is None:
        rows = sorted(
            ((name, c.id, c.caption or c.name) for name, c in cache.categories().attributes.items()),
            key=lambda r: r[1],
        )
        _render_table(["name", "id", "caption"], rows)
        return

    category = cache.categories(id)
    if category is not None:
        category = category.model_copy(
            update={"classes": sorted(category.classes, key=lambda cls: cls.uid if cls.uid is not None else -1)}
        )
    _render_entity(category, id)


@query_app.command("classes")
def classes(id: IdArgument = None, home: HomeOption = None, extensions_dir: ExtensionsOption = None) -> None:
    """List classes, or show one class with its attributes enriched."""
    cache = _get_cache(home, extensions_dir)
    if id is None:
        rows = sorted(
            ((name, cls.uid, cls.category, cls.display_name) for name, cls in cache.classes().items()),
            key=lambda r: r[1] if r[1] is not None else -1,
        )
        _render_table(["name", "uid", "category", "caption"], rows)
        return

    _render_entity(cache.classes(id), id)


@query_app.command("find-class")
def find_class(
    uid: Annotated[int, typer.Argument(help="Numeric class uid.")],
    home: HomeOption = None,
    extensions_dir: ExtensionsOption = None,
) -> None:
    """Show the class with the given uid."""
    _render_entity(_get_cache(home, extensions_dir).find_class(uid), str(uid))


@query_app.command("objects")
def objects(id: IdArgument = None, home: HomeOption = None, extensions_dir: ExtensionsOption = None) -> None:
    """List objects, or show one object with its attributes enriched."""
    cache = _get_cache(home, extensions_dir)
    if id is None:
        rows = sorted((name, obj.display_name) for name, obj in cache.objects().items())
        _render_table(["name", "caption"], rows)
        return

    _render_entity(cache.objects(id), id)


@query_app.command("dictionary")
def dictionary(home: HomeOption = None, extensions_dir: ExtensionsOption = None) -> None:
    """List the attribute dictionary."""
    attributes = _get_cache(home, extensions_dir).dictionary().attributes
    rows = [
        (name, attr.get("type"), attr.get("caption") or attr.get("name"), attr.get("requirement"))
        for name, attr in sorted(attributes.items())
    ]
    _render_table(["name", "type", "caption", "requirement"], rows)
