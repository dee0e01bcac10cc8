"""CLI command: condstyle parse -- show the declarations of a style string."""

from __future__ import annotations

import json

import click

from condstyle.cli._source import file_option, read_source, source_argument
from condstyle.parser import parse as parse_styles


@click.command()
@source_argument
@file_option
@click.option("--json", "as_json", is_flag=True, help="Emit JSON instead of a table.")
def parse(source: str | None, file: str | None, as_json: bool) -> None:
    """Parse a style string and display its declarations.

    Each line shows the conditions (theme, breakpoint, states), the resolved
    property, and the value.
    """
    parsed = parse_styles(read_source(source, file))

    if as_json:
        payload = [
            {
                "property": d.property,
                "value": d.value,
                "theme": d.conditions.theme,
                "breakpoint": d.conditions.breakpoint,
                "states": list(d.conditions.states),
            }
            for d in parsed
        ]
        click.echo(json.dumps(payload, indent=2))
        return

    click.echo(f"Declarations: {len(parsed)}")
    for d in parsed:
        parts = [f"  {d.property}: {d.value}"]
        if d.conditions.theme:
            parts.append(f"theme={d.conditions.theme}")
        if d.conditions.breakpoint:
            parts.append(f"breakpoint={d.conditions.breakpoint}")
        if d.conditions.states:
            parts.append(f"states={','.join(d.conditions.states)}")
        click.echo("  ".join(parts))
