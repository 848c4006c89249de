"""``json-to-nest`` command: read JSON from stdin, print declarations.

By default every non-empty input line is converted on its own, so a stream
of one-document-per-line JSON can be piped through.  ``--big`` buffers the
whole of stdin and converts it as a single document.
"""

from __future__ import annotations

import logging
import sys
from typing import Annotated, Iterable

import typer

from .converter import convert
from .document import ConversionResult
from .options import Mode

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="Translate JSON into NestJS interfaces or DTOs.")


def _documents(big: bool) -> Iterable[str]:
    if big:
        yield sys.stdin.read()
        return
    for line in sys.stdin:
        if line.strip():
            yield line


def _emit(result: ConversionResult) -> None:
    if result.ok:
        typer.echo(result.content)
    else:
        typer.echo(f"error: {result.error}", err=True)


@app.command()
def main(
    big: Annotated[
        bool, typer.Option("--big", help="Buffer all of stdin and convert it once.")
    ] = False,
    mode: Annotated[
        str,
        typer.Option("--mode", "-m", help="'interface', or any other value for DTO classes."),
    ] = Mode.INTERFACE.value,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log debug output to stderr.")
    ] = False,
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    output_mode = Mode.parse(mode)
    failures = 0
    for text in _documents(big):
        result = convert(text, output_mode)
        _emit(result)
        if not result.ok:
            failures += 1

    if failures:
        logger.debug("%d document(s) failed to convert", failures)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
