"""Configuration and an engine bound to explicit (non-global) alias state."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from condstyle.aliases import AliasTable
from condstyle.conditions import ConditionClassifier
from condstyle.engine.resolver import resolve, resolve_dict, resolve_themed
from condstyle.model.context import BreakpointStrategy, ResolutionContext, ThemeStrategy
from condstyle.model.declaration import ParsedStyles
from condstyle.parser.parser import StyleParser
from condstyle.parser.properties import PropertyRecognizer
from condstyle.validation.validator import validate_or_raise

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StyleConfig:
    breakpoint_strategy: BreakpointStrategy = BreakpointStrategy.EXACT
    theme_strategy: ThemeStrategy = ThemeStrategy.STRICT
    prefer_dark: bool = False
    aliases: dict[str, str] = field(default_factory=dict, hash=False)
    extra_properties: tuple[str, ...] = ()
    custom_breakpoints: tuple[str, ...] = ()
    custom_states: tuple[str, ...] = ()
    strict: bool = False  # validate before parsing and raise on errors


class StyleEngine:
    """Parser and resolver sharing one private alias table.

    Unlike the module-level functions, registrations on an engine never leak
    into other engines or into the process-wide default table.
    """

    def __init__(self, config: StyleConfig | None = None) -> None:
        self.config = config or StyleConfig()
        self.aliases = AliasTable(custom=self.config.aliases)
        self.properties = PropertyRecognizer()
        if self.config.extra_properties:
            self.properties.add(*self.config.extra_properties)
        self.classifier = ConditionClassifier(
            breakpoints=self.config.custom_breakpoints, states=self.config.custom_states
        )
        self.parser = StyleParser(
            aliases=self.aliases, properties=self.properties, classifier=self.classifier
        )

    def register_alias(self, alias: str, prop: str) -> StyleEngine:
        self.aliases.register(alias, prop)
        return self

    def context(self, **fields: Any) -> ResolutionContext:
        """A ``ResolutionContext`` seeded with this engine's default strategies."""
        base = ResolutionContext(
            breakpoint_strategy=self.config.breakpoint_strategy,
            theme_strategy=self.config.theme_strategy,
        )
        return base.with_overrides(**fields)

    def parse(self, source: str) -> ParsedStyles:
        if self.config.strict:
            validate_or_raise(source, parser=self.parser)
        return self.parser.parse(source)

    def resolve(self, parsed: ParsedStyles, **fields: Any) -> str:
        return resolve(parsed, self.context(**fields))

    def resolve_dict(self, parsed: ParsedStyles, **fields: Any) -> dict[str, str]:
        return resolve_dict(parsed, self.context(**fields))

    def resolve_themed(
        self, parsed: ParsedStyles, prefer_dark: bool | None = None, **fields: Any
    ) -> str:
        """Fallback-theme resolution; *prefer_dark* defaults to the configured value."""
        if prefer_dark is None:
            prefer_dark = self.config.prefer_dark
        return resolve_themed(parsed, self.context(**fields), prefer_dark=prefer_dark)

    def render(self, source: str, **fields: Any) -> str:
        """Parse and resolve in one step (no caching)."""
        logger.debug("Rendering %r with %s", source, fields)
        return self.resolve(self.parse(source), **fields)
