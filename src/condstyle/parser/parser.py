"""Hand-written parser for the colon-delimited conditional style syntax.

Syntax example:
    color:black; dark:color:white; md:hover:bg:gray; font:family:Georgia

Declarations are separated by ``;``.  Within one declaration the last token
is the value, the token(s) before it name the property, and everything
earlier is a condition (theme, breakpoint or state) in any order.  There is
no escaping: a value containing ``:`` or ``;`` cannot be expressed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from condstyle.aliases import AliasTable, default_table, to_kebab_case
from condstyle.conditions import ConditionClassifier, default_classifier
from condstyle.model.conditions import ConditionKind, ConditionSet
from condstyle.model.declaration import Declaration, ParsedStyles
from condstyle.parser.properties import PropertyRecognizer

__all__ = ["ParsedSegment", "StyleParser", "build_conditions", "split_declarations"]

logger = logging.getLogger(__name__)

EMPTY = ParsedStyles()


def split_declarations(source: str) -> list[str]:
    """Split *source* on ``;`` and return the trimmed, non-empty segments."""
    return [s.strip() for s in source.split(";") if s.strip()]


@dataclass(frozen=True)
class ParsedSegment:
    """Everything the parser learned about one ``;``-separated segment.

    ``declaration`` is ``None`` when the segment was skipped, in which case
    ``skip_reason`` says why.
    """

    raw: str
    tokens: tuple[str, ...]
    condition_tokens: tuple[str, ...] = ()
    property_token: str = ""
    declaration: Declaration | None = None
    skip_reason: str = ""

    @property
    def skipped(self) -> bool:
        return self.declaration is None


class StyleParser:
    """Parses style strings using an explicit alias table, property recognizer
    and condition classifier.

    The module-level ``parse()`` uses a parser bound to the process-wide
    default alias table; build a ``StyleParser`` with your own
    ``AliasTable`` to keep registrations isolated.
    """

    def __init__(
        self,
        aliases: AliasTable | None = None,
        properties: PropertyRecognizer | None = None,
        classifier: ConditionClassifier | None = None,
    ) -> None:
        self.aliases = aliases if aliases is not None else default_table
        self.properties = properties if properties is not None else PropertyRecognizer()
        self.classifier = classifier if classifier is not None else default_classifier

    # --- public API -----------------------------------------------------------

    def parse(self, source: object) -> ParsedStyles:
        """Parse a style string into ``ParsedStyles``.

        Never raises: non-string or empty input gives an empty result and
        malformed segments are dropped.
        """
        if not source or not isinstance(source, str):
            return EMPTY
        declarations = tuple(
            seg.declaration for seg in self.iter_segments(source) if seg.declaration is not None
        )
        return ParsedStyles(declarations=declarations)

    def iter_segments(self, source: str) -> Iterator[ParsedSegment]:
        """Yield a ``ParsedSegment`` for every non-empty segment, skipped ones included."""
        for raw in split_declarations(source):
            segment = self.parse_segment(raw)
            if segment.skipped:
                logger.debug("Skipping declaration %r: %s", raw, segment.skip_reason)
            yield segment

    def parse_segment(self, raw: str) -> ParsedSegment:
        """Parse a single declaration segment (no ``;``)."""
        tokens = tuple(t.strip() for t in raw.split(":"))
        if len(tokens) < 2:
            return ParsedSegment(raw=raw, tokens=tokens, skip_reason="expected property:value")

        split_at = self._find_boundary(tokens)
        property_token = "-".join(tokens[split_at:-1])
        value = tokens[-1]
        condition_tokens = tokens[:split_at]

        if not property_token:
            return ParsedSegment(
                raw=raw, tokens=tokens, condition_tokens=condition_tokens,
                skip_reason="empty property",
            )
        if not value:
            return ParsedSegment(
                raw=raw, tokens=tokens, condition_tokens=condition_tokens,
                property_token=property_token, skip_reason="empty value",
            )

        declaration = Declaration(
            property=self.aliases.resolve(property_token),
            value=value,
            conditions=build_conditions(condition_tokens, self.classifier),
        )
        return ParsedSegment(
            raw=raw,
            tokens=tokens,
            condition_tokens=condition_tokens,
            property_token=property_token,
            declaration=declaration,
        )

    # --- internals ------------------------------------------------------------

    def _is_property(self, token: str) -> bool:
        return self.properties.is_known(self.aliases.resolve(token))

    def _find_boundary(self, tokens: tuple[str, ...]) -> int:
        """Index of the first property token; tokens before it are conditions.

        Only a literal (or camelCase) property name is trusted on its own.
        A token that is merely an alias (``size``, ``align``, ``w``) may be
        the tail of a property written with colons (``font:size``), so the
        joins are tried before falling back to it.
        """
        last = len(tokens) - 1
        if self.properties.is_known(to_kebab_case(tokens[last - 1])):
            return last - 1
        # Multi-word property written with colons, e.g. font:family:Arial.
        for i in range(last - 2, -1, -1):
            joined = "-".join(tokens[i:last])
            if self._is_property(joined):
                logger.debug("Joined %r into property %r", tokens[i:last], joined)
                return i
        return last - 1


def build_conditions(
    tokens: tuple[str, ...] | list[str],
    classifier: ConditionClassifier = default_classifier,
) -> ConditionSet:
    """Fold condition tokens into a ``ConditionSet``.

    A later breakpoint or theme token replaces an earlier one; states
    accumulate in encounter order.  Empty tokens are ignored.
    """
    theme: str | None = None
    breakpoint: str | None = None
    states: list[str] = []
    for token in tokens:
        if not token:
            continue
        kind = classifier.classify(token)
        if kind is ConditionKind.BREAKPOINT:
            breakpoint = token
        elif kind is ConditionKind.STATE:
            if token not in states:
                states.append(token)
        else:
            theme = token
    return ConditionSet(theme=theme, breakpoint=breakpoint, states=tuple(states))
