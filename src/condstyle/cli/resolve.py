"""CLI command: condstyle resolve -- render CSS for a given context."""

from __future__ import annotations

import click

from condstyle.cli._source import file_option, read_source, source_argument
from condstyle.conditions import ConditionClassifier
from condstyle.engine import resolve as resolve_styles
from condstyle.engine import resolve_themed
from condstyle.model.context import BreakpointStrategy, ResolutionContext, ThemeStrategy
from condstyle.parser import StyleParser


@click.command()
@source_argument
@file_option
@click.option("--theme", default=None, help="Active theme (dark, light, or custom).")
@click.option("--breakpoint", default=None, help="Active breakpoint (xs..2xl or custom).")
@click.option("--state", "states", multiple=True, help="Active state; repeat for several.")
@click.option(
    "--breakpoint-strategy",
    type=click.Choice([s.value for s in BreakpointStrategy]),
    default=BreakpointStrategy.EXACT.value,
    show_default=True,
)
@click.option(
    "--theme-strategy",
    type=click.Choice([s.value for s in ThemeStrategy]),
    default=ThemeStrategy.STRICT.value,
    show_default=True,
)
@click.option("--themed", is_flag=True, help="Use fallback theming with a light/dark default.")
@click.option("--prefer-dark", is_flag=True, help="With --themed, default to the dark theme.")
@click.option(
    "--custom-breakpoint",
    "custom_breakpoints",
    multiple=True,
    help="Treat this token as a breakpoint rather than a theme; repeatable.",
)
def resolve(
    source: str | None,
    file: str | None,
    theme: str | None,
    breakpoint: str | None,
    states: tuple[str, ...],
    breakpoint_strategy: str,
    theme_strategy: str,
    themed: bool,
    prefer_dark: bool,
    custom_breakpoints: tuple[str, ...],
) -> None:
    """Resolve a style string against a context and print the CSS."""
    parser = StyleParser(classifier=ConditionClassifier(breakpoints=custom_breakpoints))
    parsed = parser.parse(read_source(source, file))
    context = ResolutionContext(
        theme=theme,
        breakpoint=breakpoint,
        states=states,
        breakpoint_strategy=breakpoint_strategy,
        theme_strategy=theme_strategy,
    )
    if themed or prefer_dark:
        click.echo(resolve_themed(parsed, context, prefer_dark=prefer_dark))
    else:
        click.echo(resolve_styles(parsed, context))
