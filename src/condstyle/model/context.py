"""Resolution context: the runtime theme/breakpoint/states plus strategies."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Any


class BreakpointStrategy(StrEnum):
    """How a declaration breakpoint is compared to the requested one."""

    EXACT = "exact"
    MOBILE_FIRST = "mobile-first"  # current breakpoint and all smaller
    DESKTOP_FIRST = "desktop-first"  # current breakpoint and all larger


class ThemeStrategy(StrEnum):
    """How a declaration theme is compared to the requested one."""

    STRICT = "strict"
    FALLBACK = "fallback"


def _coerce_states(states: str | Iterable[str] | None) -> tuple[str, ...]:
    if not states:
        return ()
    if isinstance(states, str):
        states = [states]
    return tuple(dict.fromkeys(s for s in states if s))


@dataclass(frozen=True)
class ResolutionContext:
    """Everything the resolution engine needs to pick declarations.

    Instances are immutable so a single parsed style string can be resolved
    against many contexts without any per-call setup.  Strategy fields accept
    either the enum or its string value (``"mobile-first"``); an unknown
    string raises ``ValueError``.
    """

    theme: str | None = None
    breakpoint: str | None = None
    states: tuple[str, ...] = ()
    breakpoint_strategy: BreakpointStrategy = BreakpointStrategy.EXACT
    theme_strategy: ThemeStrategy = ThemeStrategy.STRICT

    def __post_init__(self) -> None:
        object.__setattr__(self, "states", _coerce_states(self.states))
        object.__setattr__(
            self, "breakpoint_strategy", BreakpointStrategy(self.breakpoint_strategy)
        )
        object.__setattr__(self, "theme_strategy", ThemeStrategy(self.theme_strategy))
        if self.theme == "":
            object.__setattr__(self, "theme", None)
        if self.breakpoint == "":
            object.__setattr__(self, "breakpoint", None)

    @property
    def state_set(self) -> frozenset[str]:
        return frozenset(self.states)

    def with_overrides(self, **overrides: Any) -> ResolutionContext:
        """Return a copy with the given fields replaced (``None`` values ignored)."""
        if "state" in overrides:
            overrides["states"] = overrides.pop("state")
        updates = {k: v for k, v in overrides.items() if v is not None}
        if not updates:
            return self
        return replace(self, **updates)
