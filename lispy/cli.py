"""Typer CLI entrypoint."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from loguru import logger

from lispy.errors import LispyError
from lispy.interpreter import Interpreter
from lispy.logging_utils import configure_logging

app = typer.Typer(name="lispy", help="A minimal Lisp interpreter", add_completion=False)


@app.command()
def main(
    file: Annotated[Optional[Path], typer.Argument(exists=True, dir_okay=False, readable=True)] = None,
    recover: Annotated[bool, typer.Option("--recover", help="Report errors and continue with the next form")] = False,
    max_depth: Annotated[Optional[int], typer.Option("--max-depth", min=1, help="Defaults to LISPY_MAX_DEPTH")] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Defaults to LISPY_LOG_LEVEL")] = None,
) -> None:
    """Read, evaluate and print every form from FILE (or stdin)."""

    configure_logging(log_level)
    interp = Interpreter(out=sys.stdout, max_depth=max_depth)
    logger.info("lispy.start source={}", str(file) if file else "<stdin>")
    try:
        if file is None:
            interp.run(sys.stdin, recover=recover)
        else:
            with file.open(encoding="utf-8") as source:
                interp.run(source, recover=recover)
    except LispyError as exc:
        sys.stdout.flush()
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from None


if __name__ == "__main__":
    app()
