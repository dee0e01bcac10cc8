"""Declaration model: Declaration and ParsedStyles dataclasses."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from condstyle.model.conditions import BASE, ConditionSet


@dataclass(frozen=True)
class Declaration:
    """A single property/value pair plus the conditions it applies under."""

    property: str  # canonical kebab-case name
    value: str  # opaque, never interpreted
    conditions: ConditionSet = field(default=BASE)

    @property
    def is_base(self) -> bool:
        return self.conditions.is_base

    def signature(self) -> tuple[ConditionSet, str]:
        """Override key: later declarations with the same signature replace earlier ones."""
        return (self.conditions, self.property)

    def to_source(self) -> str:
        """Render back into the colon-delimited micro-syntax."""
        return ":".join([*self.conditions.tokens(), self.property, self.value])


@dataclass(frozen=True)
class ParsedStyles:
    """Declarations parsed from one style string, in source order."""

    declarations: tuple[Declaration, ...] = ()

    def __len__(self) -> int:
        return len(self.declarations)

    def __iter__(self) -> Iterator[Declaration]:
        return iter(self.declarations)

    def __getitem__(self, index: int) -> Declaration:
        return self.declarations[index]

    def __bool__(self) -> bool:
        return bool(self.declarations)

    @property
    def properties(self) -> list[str]:
        """Distinct property names in first-seen order."""
        return list(dict.fromkeys(d.property for d in self.declarations))

    def to_source(self) -> str:
        return "; ".join(d.to_source() for d in self.declarations)
