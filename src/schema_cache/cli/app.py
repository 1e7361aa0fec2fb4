from typing import Annotated

import typer

from schema_cache.cli.check import check
from schema_cache.cli.common import configure_logging
from schema_cache.cli.query import query_app

app = typer.Typer(
    name="schema-cache",
    help="Schema cache CLI: resolve and query schema descriptor trees.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log load progress.")] = False,
) -> None:
    configure_logging(verbose)


app.command("check")(check)
app.add_typer(query_app, name="query")


def main() -> None:
    app()
