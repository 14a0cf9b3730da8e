#!/usr/bin/env python3

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from .config import get_settings
from .engine import Session, print_help
from .errors import DbError
from .logging_setup import configure_logging

app = typer.Typer(help="In-memory row store with an interactive prompt.", add_completion=False)


@app.command()
def run(
    script: Optional[Path] = typer.Option(
        None,
        "--script",
        "-s",
        help="Run commands from this file before the interactive prompt starts.",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Override the log level (default from MEMDB_LOG_LEVEL).",
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Do not print the banner."),
) -> None:
    """
    Start the REPL. Type .exit to quit.
    """
    settings = get_settings()
    configure_logging(level=log_level or settings.log_level, json_logs=settings.json_logs)

    session = Session(prompt=settings.prompt)
    if not quiet:
        print("***memdb***\n")
        print_help()

    try:
        if script is not None:
            try:
                session.run_script(str(script))
            except DbError as e:
                print(f"Error: {e}")
        session.run()
    except KeyboardInterrupt:
        typer.echo("\nCancelled by user.", err=True)
        raise typer.Exit(130)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
