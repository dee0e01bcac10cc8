"""CLI command: condstyle merge -- combine style strings, leftmost wins."""

from __future__ import annotations

import click

from condstyle.merge import merge as merge_styles


@click.command()
@click.argument("inputs", nargs=-1, required=True)
def merge(inputs: tuple[str, ...]) -> None:
    """Merge style strings; for a repeated key the leftmost INPUT wins."""
    click.echo(merge_styles(*inputs))
