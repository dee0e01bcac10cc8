"""Two-layer alias table: built-in aliases plus user-registered overrides."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from condstyle.aliases.defaults import DEFAULT_ALIASES

logger = logging.getLogger(__name__)

_VENDOR_PREFIXES = ("webkit", "moz", "ms", "o")
_LOWER_UPPER_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_ACRONYM_RE = re.compile(r"(?<=[A-Z])(?=[A-Z][a-z])")


def to_kebab_case(name: str) -> str:
    """Convert a camelCase or PascalCase property name to kebab-case.

    ``backgroundColor`` -> ``background-color``, ``WebkitTransition`` ->
    ``-webkit-transition``.  Names without uppercase letters and custom
    properties (``--brand``) are returned unchanged.
    """
    if name.startswith("--") or name == name.lower():
        return name
    kebab = _ACRONYM_RE.sub("-", _LOWER_UPPER_RE.sub("-", name)).lower()
    head, _, rest = kebab.partition("-")
    if rest and head in _VENDOR_PREFIXES and name[len(head)].isupper():
        return f"-{kebab}"
    return kebab


class AliasTable:
    """Maps short alias tokens to canonical CSS property names.

    Lookup order: custom layer, built-in layer, then case normalization.
    Only the custom layer is mutable.  A table is not synchronized; share
    one across threads only with external locking.
    """

    def __init__(
        self,
        custom: Mapping[str, str] | None = None,
        builtin: Mapping[str, str] = DEFAULT_ALIASES,
    ) -> None:
        self._builtin = builtin
        self._custom: dict[str, str] = dict(custom) if custom else {}

    # --- registration ---------------------------------------------------------

    def register(self, alias: str, prop: str) -> None:
        """Register (or override) a single custom alias."""
        self._custom[alias] = prop
        logger.info("Registered alias %r -> %r", alias, prop)

    def register_many(self, aliases: Mapping[str, str]) -> None:
        """Register several custom aliases at once."""
        self._custom.update(aliases)
        logger.info("Registered %d aliases", len(aliases))

    def clear_custom(self) -> None:
        """Drop every custom alias; built-in aliases are unaffected."""
        if self._custom:
            logger.info("Cleared %d custom aliases", len(self._custom))
        self._custom = {}

    # --- lookup ---------------------------------------------------------------

    def resolve(self, token: str) -> str:
        """Resolve *token* to its canonical property name."""
        prop = self._custom.get(token)
        if prop:
            return prop
        prop = self._builtin.get(token)
        if prop:
            return prop
        return to_kebab_case(token)

    def is_alias(self, token: str) -> bool:
        return token in self._custom or token in self._builtin

    def all_aliases(self) -> dict[str, str]:
        """Built-in and custom aliases merged; custom entries win."""
        return {**self._builtin, **self._custom}

    @property
    def custom(self) -> dict[str, str]:
        return dict(self._custom)

    def targets(self) -> set[str]:
        """Every property name some alias resolves to."""
        return set(self.all_aliases().values())

    def copy(self) -> AliasTable:
        return AliasTable(custom=self._custom, builtin=self._builtin)

    def __contains__(self, token: str) -> bool:
        return self.is_alias(token)

    def __repr__(self) -> str:
        return f"AliasTable(builtin={len(self._builtin)}, custom={len(self._custom)})"
