# roc/cli.py
from __future__ import annotations
import logging
from typing import Optional

import typer
from rich import print
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel

from roc import __version__, roots
from roc.errors import DocRootNotFoundError, RocError
from roc.locate import Locator
from roc.parse import DocParser
from roc.query import is_crate_listing, parse_query
from roc.table import header, pprint_as_columns

app = typer.Typer(add_completion=False, no_args_is_help=True)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _fail(message: str) -> typer.Exit:
    print(Panel.fit(f"[bold red]{escape(message)}[/bold red]"))
    return typer.Exit(code=1)


def _version(value: bool) -> None:
    if value:
        typer.echo(f"roc {__version__}")
        raise typer.Exit()


def list_crates() -> str:
    """
    Grid of the crates documented in the local crate's target/doc.
    """
    root = roots.doc_root(is_stdlib=False)
    if root is None:
        raise DocRootNotFoundError("cannot locate crate documentation root")
    crates = roots.list_crates(root)
    if not crates:
        return "no documented crates found"
    return f"{header('crates')}\n{pprint_as_columns(crates)}"


def lookup(
    raw: str,
    *,
    list_modules: bool = False,
    open_in_browser: bool = False,
    show_examples: bool = False,
    pattern: Optional[str] = None,
) -> Optional[str]:
    """
    Resolve raw and return the text to print (None when a browser was opened).
    Raises typer.Exit(1) if the query does not resolve.
    """
    query = parse_query(raw)
    root = roots.doc_root(query.is_stdlib)
    if root is None:
        kind = "standard library" if query.is_stdlib else "crate"
        raise DocRootNotFoundError(f"cannot locate {kind} documentation root")

    tagged_path = Locator(root).resolve(query)
    if tagged_path is None:
        raise _fail(f"unable to resolve query path: {raw}")

    if open_in_browser:
        typer.launch(str(tagged_path.full_path))
        return None

    parser = DocParser(tagged_path, pattern=pattern, show_examples=show_examples)
    if list_modules:
        return parser.child_modules()
    return parser.parse()


@app.command()
def main(
    query: str = typer.Argument(..., help="<mod>[::<symbol>[.<method>]], or '.' to list crates"),
    list_modules: bool = typer.Option(
        False, "--list", "-l", help="List the child modules of the query"
    ),
    show_examples: bool = typer.Option(
        False, "--show-examples", "-e", help="Show example code from the full docs"
    ),
    open_in_browser: bool = typer.Option(
        False, "--open", "-o", help="Open the doc page in the browser instead"
    ),
    grep: Optional[str] = typer.Option(
        None, "--string", "-s", help="Only keep lines matching this string or regex"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log lookup details"),
    version: bool = typer.Option(
        False, "--version", callback=_version, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """
    roc - command line rust documentation that rocks.
    """
    _setup_logging(verbose)

    try:
        if is_crate_listing(query):
            output = list_crates()
        else:
            output = lookup(
                query,
                list_modules=list_modules,
                open_in_browser=open_in_browser,
                show_examples=show_examples,
                pattern=grep,
            )
    except RocError as exc:
        raise _fail(str(exc)) from exc

    if output is not None:
        typer.echo(output)
