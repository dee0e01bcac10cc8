"""Shared source-argument handling for CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path

import click


def read_source(source: str | None, file: str | None) -> str:
    """Return style text from ``--file``, ``-`` (stdin), or the literal argument."""
    if file is not None:
        return Path(file).read_text(encoding="utf-8")
    if source is None:
        raise click.UsageError("Provide a style string, '-' for stdin, or --file.")
    if source == "-":
        return sys.stdin.read()
    return source


source_argument = click.argument("source", required=False)
file_option = click.option(
    "--file", "file", type=click.Path(exists=True, dir_okay=False), help="Read styles from a file."
)
