"""Resolution: filter parsed declarations by context and serialize to CSS."""

from __future__ import annotations

from typing import Any

from condstyle.engine.matcher import declaration_matches
from condstyle.model.context import ResolutionContext, ThemeStrategy
from condstyle.model.declaration import ParsedStyles

__all__ = ["resolve", "resolve_dict", "resolve_themed", "to_css"]

_DEFAULT_CONTEXT = ResolutionContext()


def _context(context: ResolutionContext | None, overrides: dict[str, Any]) -> ResolutionContext:
    ctx = context if context is not None else _DEFAULT_CONTEXT
    if overrides:
        ctx = ctx.with_overrides(**overrides)
    return ctx


def resolve_dict(
    parsed: ParsedStyles, context: ResolutionContext | None = None, **overrides: Any
) -> dict[str, str]:
    """Winning value per property for *context*.

    The last matching declaration in source order wins; properties keep the
    order in which they first matched.
    """
    ctx = _context(context, overrides)
    declarations = parsed.declarations
    winners: dict[str, str] = {}
    for declaration in declarations:
        if declaration_matches(declaration, ctx, declarations):
            winners[declaration.property] = declaration.value
    return winners


def to_css(properties: dict[str, str]) -> str:
    """Serialize a property mapping as ``prop: value;`` pairs joined by spaces."""
    return " ".join(f"{prop}: {value};" for prop, value in properties.items())


def resolve(
    parsed: ParsedStyles, context: ResolutionContext | None = None, **overrides: Any
) -> str:
    """Resolve *parsed* against *context* into a CSS declaration string.

    Keyword overrides (``theme=``, ``breakpoint=``, ``states=``/``state=``,
    ``breakpoint_strategy=``, ``theme_strategy=``) are applied on top of
    *context*.  Returns ``""`` when nothing matches.
    """
    return to_css(resolve_dict(parsed, context, **overrides))


def resolve_themed(
    parsed: ParsedStyles,
    context: ResolutionContext | None = None,
    prefer_dark: bool = False,
    **overrides: Any,
) -> str:
    """Resolve with the fallback theme strategy and a dark/light default theme.

    An explicit theme (on *context* or as an override) wins over *prefer_dark*.
    """
    ctx = _context(context, overrides)
    theme = ctx.theme or ("dark" if prefer_dark else "light")
    ctx = ctx.with_overrides(theme=theme, theme_strategy=ThemeStrategy.FALLBACK)
    return resolve(parsed, ctx)
