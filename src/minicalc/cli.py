"""
minicalc command-line interface.

Words given on the command line are joined with spaces into one source
string, so ``minicalc eval 2 * 3`` evaluates ``"2 * 3"``. Quote arguments
the shell would otherwise expand.
"""

from __future__ import annotations

import logging
import platform
from pathlib import Path

import typer

from minicalc import __version__
from minicalc.core.config import load_config
from minicalc.core.errors import MinicalcError, format_error
from minicalc.core.lexer import tokenize
from minicalc.core.pipeline import parse_source

app = typer.Typer(
    help="Evaluate arithmetic, comparison and assignment expressions.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"minicalc version {__version__}")
        typer.echo(f"Python {platform.python_implementation()} {platform.python_version()}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _fail(error: MinicalcError, source: str) -> typer.Exit:
    typer.echo(format_error(error, source), err=True)
    return typer.Exit(code=1)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """minicalc - a tiny expression calculator."""
    _configure_logging(verbose)


@app.command("eval")
def eval_command(
    words: list[str] = typer.Argument(..., help="Expression source"),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Path to minicalc.toml (default: ./minicalc.toml)"
    ),
) -> None:
    """Evaluate an expression and print one result per statement."""
    source = " ".join(words)

    try:
        settings = load_config(config)
    except MinicalcError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1) from e

    try:
        results = settings.make_context().run(parse_source(source))
    except MinicalcError as e:
        raise _fail(e, source) from e

    for value in results:
        typer.echo(settings.output.format(value))


@app.command("tokens")
def tokens_command(
    words: list[str] = typer.Argument(..., help="Expression source"),
) -> None:
    """Print the token stream for an expression."""
    source = " ".join(words)
    try:
        tokens = tokenize(source)
    except MinicalcError as e:
        raise _fail(e, source) from e

    for token in tokens:
        typer.echo(f"{token.line}:{token.column}\t{token.type.name}\t{token.value}")


@app.command("ast")
def ast_command(
    words: list[str] = typer.Argument(..., help="Expression source"),
    as_json: bool = typer.Option(False, "--json", help="Print the tree as JSON"),
) -> None:
    """Print the parse tree for an expression."""
    source = " ".join(words)
    try:
        root = parse_source(source)
    except MinicalcError as e:
        raise _fail(e, source) from e

    if as_json:
        typer.echo(root.model_dump_json(indent=2))
    else:
        typer.echo(str(root))


if __name__ == "__main__":
    app()
