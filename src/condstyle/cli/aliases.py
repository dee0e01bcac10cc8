"""CLI command: condstyle aliases -- list property aliases."""

from __future__ import annotations

import click

from condstyle.aliases import alias_hints


@click.command()
@click.option("--category", default=None, help="Only show one category (e.g. Spacing).")
def aliases(category: str | None) -> None:
    """List built-in property aliases grouped by category."""
    current = None
    for hint in alias_hints():
        if category and hint.category.lower() != category.lower():
            continue
        if hint.category != current:
            current = hint.category
            click.echo(f"{current}:")
        click.echo(f"  {hint.alias:<14} {hint.property}")
