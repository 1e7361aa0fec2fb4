from rich.table import Table

from schema_cache.cli.common import ExtensionsOption, HomeOption, _get_cache, console


def check(home: HomeOption = None, extensions_dir: ExtensionsOption = None) -> None:
    """Load the schema and report what was resolved."""
    cache = _get_cache(home, extensions_dir)

    table = Table(show_lines=False)
    table.add_column("item")
    table.add_column("count", justify="right")
    table.add_row("categories", str(len(cache.categories().attributes)))
    table.add_row("classes", str(len(cache.classes())))
    table.add_row("objects", str(len(cache.objects())))
    table.add_row("dictionary attributes", str(len(cache.dictionary().attributes)))

    console.print(f"[green]Loaded[/green] schema version {cache.version()}")
    console.print(table)
