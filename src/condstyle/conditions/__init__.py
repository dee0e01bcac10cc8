"""Condition token classifier for the colon-delimited style micro-syntax.

Classification priority (first match wins):
    1. known breakpoint  xs | sm | md | lg | xl | 2xl  (+ custom breakpoints)
    2. known state       hover | active | focus | visited | focus-visible |
                         focus-within | disabled | enabled | checked | current
                         (+ custom states)
    3. known theme       dark | light
    4. breakpoint shape  <digits>xl | [xsml]+      (3xl, 4xl, xxl, ...)
    5. anything else     theme                     (custom theme names)
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from condstyle.model.conditions import ConditionKind

__all__ = [
    "BREAKPOINT_ORDER",
    "KNOWN_BREAKPOINTS",
    "KNOWN_STATES",
    "KNOWN_THEMES",
    "ConditionClassifier",
    "breakpoint_ordinal",
    "classify_condition",
    "default_classifier",
    "is_known_condition",
    "looks_like_breakpoint",
]

BREAKPOINT_ORDER: dict[str, int] = {
    "xs": 0,
    "sm": 1,
    "md": 2,
    "lg": 3,
    "xl": 4,
    "2xl": 5,
}

KNOWN_BREAKPOINTS = frozenset(BREAKPOINT_ORDER)

KNOWN_STATES = frozenset({
    "hover",
    "active",
    "focus",
    "visited",
    "focus-visible",
    "focus-within",
    "disabled",
    "enabled",
    "checked",
    "current",
})

KNOWN_THEMES = frozenset({"dark", "light"})

_BREAKPOINT_SHAPE_RE = re.compile(r"^\d+xl$|^[xsml]+$")


def looks_like_breakpoint(token: str) -> bool:
    """Shape heuristic for breakpoints outside the fixed vocabulary."""
    return bool(_BREAKPOINT_SHAPE_RE.match(token))


class ConditionClassifier:
    """Classifies condition tokens, optionally with extra vocabulary.

    Custom breakpoints (``tablet``) and states (``selected``) are matched
    before the theme default, so they no longer fall through to being
    treated as theme names.  Custom breakpoints have no ordinal and only
    ever match exactly.
    """

    def __init__(
        self,
        breakpoints: Iterable[str] = (),
        states: Iterable[str] = (),
    ) -> None:
        self.breakpoints = KNOWN_BREAKPOINTS | frozenset(breakpoints)
        self.states = KNOWN_STATES | frozenset(states)

    def classify(self, token: str) -> ConditionKind:
        """Classify a single condition token.

        Never fails: an unrecognised token that is not shaped like a
        breakpoint is taken to be a custom theme name.
        """
        if token in self.breakpoints:
            return ConditionKind.BREAKPOINT
        if token in self.states:
            return ConditionKind.STATE
        if token in KNOWN_THEMES:
            return ConditionKind.THEME
        if looks_like_breakpoint(token):
            return ConditionKind.BREAKPOINT
        return ConditionKind.THEME

    def is_known(self, token: str) -> bool:
        """True if *token* is in a vocabulary (no shape heuristic or theme default)."""
        return token in self.breakpoints or token in self.states or token in KNOWN_THEMES

    def __repr__(self) -> str:
        custom = sorted((self.breakpoints - KNOWN_BREAKPOINTS) | (self.states - KNOWN_STATES))
        return f"ConditionClassifier(custom={custom})"


default_classifier = ConditionClassifier()


def classify_condition(token: str) -> ConditionKind:
    """Classify *token* with the built-in vocabulary."""
    return default_classifier.classify(token)


def is_known_condition(token: str) -> bool:
    return default_classifier.is_known(token)


def breakpoint_ordinal(breakpoint: str | None) -> int | None:
    """Ordinal of a known breakpoint, ``None`` for custom or missing ones."""
    if breakpoint is None:
        return None
    return BREAKPOINT_ORDER.get(breakpoint)
