"""Property aliases and the process-wide default alias table.

The module-level functions operate on ``default_table``, which is shared
mutable state for the whole process: registrations made by one caller are
visible to every later ``parse()`` that uses the default table, and nothing
here is synchronized.  Callers that need isolation build their own
``AliasTable`` and pass it to a ``StyleParser``.
"""

from __future__ import annotations

from collections.abc import Mapping

from condstyle.aliases.defaults import ALIAS_CATEGORIES, DEFAULT_ALIASES
from condstyle.aliases.hints import AliasHint
from condstyle.aliases.hints import alias_hints as _alias_hints
from condstyle.aliases.table import AliasTable, to_kebab_case

__all__ = [
    "ALIAS_CATEGORIES",
    "DEFAULT_ALIASES",
    "AliasHint",
    "AliasTable",
    "alias_hints",
    "clear_custom_aliases",
    "default_table",
    "get_all_aliases",
    "is_alias",
    "register_alias",
    "register_aliases",
    "resolve_property",
    "to_kebab_case",
]

default_table = AliasTable()


def register_alias(alias: str, prop: str) -> None:
    """Register a custom alias on the default table."""
    default_table.register(alias, prop)


def register_aliases(aliases: Mapping[str, str]) -> None:
    """Register several custom aliases on the default table."""
    default_table.register_many(aliases)


def clear_custom_aliases() -> None:
    default_table.clear_custom()


def get_all_aliases() -> dict[str, str]:
    return default_table.all_aliases()


def is_alias(token: str) -> bool:
    return default_table.is_alias(token)


def resolve_property(token: str) -> str:
    """Resolve *token* through the default table (custom > built-in > kebab-case)."""
    return default_table.resolve(token)


def alias_hints(table: AliasTable | None = None) -> list[AliasHint]:
    return _alias_hints(table or default_table)
