"""CLI command: condstyle validate -- report problems in a style string."""

from __future__ import annotations

import sys

import click

from condstyle.cli._source import file_option, read_source, source_argument
from condstyle.model.diagnostic import Severity
from condstyle.validation import validate as run_validate


@click.command()
@source_argument
@file_option
def validate(source: str | None, file: str | None) -> None:
    """Validate a style string.

    Prints diagnostics (errors, warnings, info) and exits with code 0 if
    no errors are found, or code 1 if there are errors.
    """
    diagnostics = run_validate(read_source(source, file))

    if not diagnostics:
        click.echo("OK: styles are valid (0 diagnostics)")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]
    infos = [d for d in diagnostics if d.severity is Severity.INFO]

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(
        f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), {len(infos)} info"
    )

    if errors:
        sys.exit(1)
    sys.exit(0)
