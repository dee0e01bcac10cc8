"""Declaration matching: decides whether one declaration applies to a context.

A declaration applies when all of the following hold:

1. Base - a declaration with no conditions always applies.
2. States - every state it requires is active (requested states may be a superset).
3. Breakpoint - per ``BreakpointStrategy``; custom breakpoints match exactly.
4. Theme - per ``ThemeStrategy``; ``FALLBACK`` walks ``FALLBACK_RULES``.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from condstyle.conditions import breakpoint_ordinal
from condstyle.model.context import BreakpointStrategy, ResolutionContext, ThemeStrategy
from condstyle.model.declaration import Declaration

__all__ = [
    "FALLBACK_RULES",
    "FallbackCase",
    "FallbackRule",
    "declaration_matches",
    "match_breakpoint",
    "match_states",
    "match_theme",
]


def match_states(declaration: Declaration, context: ResolutionContext) -> bool:
    """Required states must be a subset of the requested states."""
    return declaration.conditions.state_set <= context.state_set


def match_breakpoint(declaration: Declaration, context: ResolutionContext) -> bool:
    required = declaration.conditions.breakpoint
    if required is None:
        return True
    if context.breakpoint is None:
        return False

    required_ord = breakpoint_ordinal(required)
    current_ord = breakpoint_ordinal(context.breakpoint)
    if required_ord is None or current_ord is None:
        # Custom breakpoints carry no ordering, whatever the strategy.
        return required == context.breakpoint

    strategy = context.breakpoint_strategy
    if strategy is BreakpointStrategy.MOBILE_FIRST:
        return required_ord <= current_ord
    if strategy is BreakpointStrategy.DESKTOP_FIRST:
        return required_ord >= current_ord
    return required == context.breakpoint


# ---------------------------------------------------------------------------
# Theme matching
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FallbackCase:
    """A themed declaration evaluated under the fallback theme strategy."""

    declaration: Declaration
    context: ResolutionContext
    declarations: Sequence[Declaration]

    def siblings(self) -> list[Declaration]:
        """Declarations for the same property."""
        prop = self.declaration.property
        return [d for d in self.declarations if d.property == prop]


@dataclass(frozen=True)
class FallbackRule:
    """One row of the fallback decision table.

    The first rule whose ``applies`` is true decides the outcome via ``verdict``.
    """

    name: str
    applies: Callable[[FallbackCase], bool]
    verdict: Callable[[FallbackCase], bool]


def _always(case: FallbackCase) -> bool:
    return True


def _never(case: FallbackCase) -> bool:
    return False


def _theme_is_requested_one(case: FallbackCase) -> bool:
    return case.declaration.conditions.theme == case.context.theme


def _no_theme_requested(case: FallbackCase) -> bool:
    return case.context.theme is None


def _exact_theme_exists(case: FallbackCase) -> bool:
    conditions = case.declaration.conditions
    return any(
        d.conditions.theme == case.context.theme and d.conditions.same_level(conditions)
        for d in case.siblings()
    )


def _requested_state_uncovered(case: FallbackCase) -> bool:
    return bool(case.context.states) and not case.declaration.conditions.states


def _no_themeless_at_same_level(case: FallbackCase) -> bool:
    conditions = case.declaration.conditions
    return not any(
        d.conditions.theme is None and d.conditions.same_level(conditions)
        for d in case.siblings()
    )


def _requested_breakpoint_uncovered(case: FallbackCase) -> bool:
    return case.context.breakpoint is not None and case.declaration.conditions.breakpoint is None


def _no_themeless_with_same_states(case: FallbackCase) -> bool:
    states = case.declaration.conditions.state_set
    return not any(
        d.conditions.theme is None and d.conditions.state_set == states
        for d in case.siblings()
    )


FALLBACK_RULES: tuple[FallbackRule, ...] = (
    FallbackRule("requested_theme", _theme_is_requested_one, _always),
    FallbackRule("no_theme_requested", _no_theme_requested, _never),
    FallbackRule("exact_theme_exists", _exact_theme_exists, _never),
    FallbackRule("state_uncovered", _requested_state_uncovered, _no_themeless_at_same_level),
    FallbackRule(
        "breakpoint_uncovered", _requested_breakpoint_uncovered, _no_themeless_with_same_states
    ),
    FallbackRule("cross_theme", _always, _always),
)


def fallback_rule_for(case: FallbackCase) -> FallbackRule:
    """The decision-table row that decides *case*."""
    for rule in FALLBACK_RULES:
        if rule.applies(case):
            return rule
    raise AssertionError("FALLBACK_RULES must end with a catch-all rule")


def match_theme(
    declaration: Declaration,
    context: ResolutionContext,
    declarations: Sequence[Declaration] = (),
) -> bool:
    """Theme check; *declarations* is the full set, needed by the fallback rules."""
    theme = declaration.conditions.theme
    if theme is None:
        return True
    if context.theme_strategy is ThemeStrategy.STRICT:
        return theme == context.theme
    case = FallbackCase(declaration=declaration, context=context, declarations=declarations)
    return fallback_rule_for(case).verdict(case)


def declaration_matches(
    declaration: Declaration,
    context: ResolutionContext,
    declarations: Sequence[Declaration] = (),
) -> bool:
    """True if *declaration* applies under *context*."""
    if declaration.is_base:
        return True
    return (
        match_states(declaration, context)
        and match_breakpoint(declaration, context)
        and match_theme(declaration, context, declarations)
    )
