"""Condition model: the theme/breakpoint/state qualifiers of one declaration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ConditionKind(Enum):
    """Category a condition token is classified into."""

    BREAKPOINT = "breakpoint"
    STATE = "state"
    THEME = "theme"


@dataclass(frozen=True, eq=False)
class ConditionSet:
    """Qualifiers narrowing when a declaration applies.

    Holds at most one theme and at most one breakpoint, but any number of
    states (a conjunction: ``hover:active:`` requires both).  States keep
    their encounter order for display, while equality and hashing treat
    them as a set so ``hover:active`` and ``active:hover`` compare equal.
    """

    theme: str | None = None
    breakpoint: str | None = None
    states: tuple[str, ...] = ()

    @property
    def is_base(self) -> bool:
        """True when no qualifier is present (the declaration always applies)."""
        return self.theme is None and self.breakpoint is None and not self.states

    @property
    def state_set(self) -> frozenset[str]:
        return frozenset(self.states)

    def same_level(self, other: ConditionSet) -> bool:
        """True if *other* has the same breakpoint and states, ignoring theme."""
        return self.breakpoint == other.breakpoint and self.state_set == other.state_set

    def tokens(self) -> list[str]:
        """Condition tokens in canonical order: theme, breakpoint, states."""
        parts: list[str] = []
        if self.theme is not None:
            parts.append(self.theme)
        if self.breakpoint is not None:
            parts.append(self.breakpoint)
        parts.extend(self.states)
        return parts

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConditionSet):
            return NotImplemented
        return (
            self.theme == other.theme
            and self.breakpoint == other.breakpoint
            and self.state_set == other.state_set
        )

    def __hash__(self) -> int:
        return hash((self.theme, self.breakpoint, self.state_set))

    def __str__(self) -> str:
        return ":".join(self.tokens())


BASE = ConditionSet()
