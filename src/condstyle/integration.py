"""Helpers for tools that inspect style strings rather than render them."""

from __future__ import annotations

from condstyle.model.declaration import Declaration
from condstyle.parser import default_parser
from condstyle.parser.parser import StyleParser

__all__ = [
    "extract_breakpoints",
    "extract_properties",
    "extract_states",
    "extract_themes",
    "filter_by_condition",
    "to_dict",
]


def _declarations(source: str, parser: StyleParser | None) -> tuple[Declaration, ...]:
    return (parser or default_parser).parse(source).declarations


def extract_properties(source: str, parser: StyleParser | None = None) -> list[str]:
    """Sorted distinct (alias-resolved) property names."""
    return sorted({d.property for d in _declarations(source, parser)})


def extract_themes(source: str, parser: StyleParser | None = None) -> list[str]:
    return sorted({
        d.conditions.theme for d in _declarations(source, parser) if d.conditions.theme
    })


def extract_breakpoints(source: str, parser: StyleParser | None = None) -> list[str]:
    return sorted({
        d.conditions.breakpoint
        for d in _declarations(source, parser)
        if d.conditions.breakpoint
    })


def extract_states(source: str, parser: StyleParser | None = None) -> list[str]:
    return sorted({s for d in _declarations(source, parser) for s in d.conditions.states})


def filter_by_condition(
    source: str,
    theme: str | None = None,
    breakpoint: str | None = None,
    state: str | None = None,
    parser: StyleParser | None = None,
) -> list[Declaration]:
    """Declarations carrying the given qualifiers (plain equality, no strategies).

    Unset arguments do not filter.
    """
    result = []
    for d in _declarations(source, parser):
        if theme and d.conditions.theme != theme:
            continue
        if breakpoint and d.conditions.breakpoint != breakpoint:
            continue
        if state and state not in d.conditions.states:
            continue
        result.append(d)
    return result


def to_dict(source: str, parser: StyleParser | None = None) -> dict[str, str]:
    """Base declarations only, as a property/value mapping (later wins)."""
    return {d.property: d.value for d in _declarations(source, parser) if d.is_base}
