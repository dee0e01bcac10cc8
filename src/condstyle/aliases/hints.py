"""Alias hints for autocomplete and documentation tooling."""

from __future__ import annotations

from dataclasses import dataclass

from condstyle.aliases.defaults import ALIAS_CATEGORIES
from condstyle.aliases.table import AliasTable

_CATEGORY_BY_ALIAS = {
    alias: category for category, aliases in ALIAS_CATEGORIES.items() for alias in aliases
}


@dataclass(frozen=True)
class AliasHint:
    alias: str
    property: str
    category: str


def alias_hints(table: AliasTable) -> list[AliasHint]:
    """Every alias in *table* with its category, sorted by category then alias.

    Aliases outside the built-in categories (custom registrations) are
    grouped under ``Other``.
    """
    hints = [
        AliasHint(alias=alias, property=prop, category=_CATEGORY_BY_ALIAS.get(alias, "Other"))
        for alias, prop in table.all_aliases().items()
    ]
    return sorted(hints, key=lambda h: (h.category, h.alias))
