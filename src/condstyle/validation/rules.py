"""Validation rules for conditional style strings.

Each rule is a function taking a ``StyleSource`` and returning a list of
Diagnostic objects describing any issues found.  Parsing itself is
permissive; these rules surface what the parser silently accepted or dropped.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass

from condstyle.model.conditions import ConditionKind
from condstyle.model.diagnostic import Diagnostic, Severity
from condstyle.parser.parser import ParsedSegment, StyleParser


@dataclass(frozen=True)
class StyleSource:
    """A raw style string together with its segment-level parse."""

    source: str
    segments: tuple[ParsedSegment, ...]
    parser: StyleParser

    @classmethod
    def from_string(cls, source: str, parser: StyleParser) -> StyleSource:
        return cls(source=source, segments=tuple(parser.iter_segments(source)), parser=parser)

    @property
    def parsed_segments(self) -> list[ParsedSegment]:
        return [s for s in self.segments if not s.skipped]


# ---------------------------------------------------------------------------
# Structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_not_empty(style: StyleSource) -> list[Diagnostic]:
    """Non-blank input must yield at least one declaration."""
    if style.source.strip() and not style.parsed_segments:
        return [
            Diagnostic(
                rule="check_not_empty",
                severity=Severity.ERROR,
                message="No valid declarations found.",
                fix="Write declarations as [conditions:]property:value separated by ';'.",
            )
        ]
    return []


# ---------------------------------------------------------------------------
# Suspicious input (WARNING severity)
# ---------------------------------------------------------------------------


def check_malformed_segments(style: StyleSource) -> list[Diagnostic]:
    """Segments the parser dropped."""
    return [
        Diagnostic(
            rule="check_malformed_segments",
            severity=Severity.WARNING,
            message=f"Declaration '{seg.raw}' was skipped: {seg.skip_reason}.",
            declaration=seg.raw,
            fix="Use property:value, optionally prefixed by conditions.",
        )
        for seg in style.segments
        if seg.skipped
    ]


def check_unknown_conditions(style: StyleSource) -> list[Diagnostic]:
    """Condition tokens outside the fixed vocabularies (possible typos)."""
    classifier = style.parser.classifier
    diagnostics: list[Diagnostic] = []
    for seg in style.parsed_segments:
        for token in seg.condition_tokens:
            if not token or classifier.is_known(token):
                continue
            kind = classifier.classify(token)
            if kind is ConditionKind.BREAKPOINT:
                message = f"Unknown condition '{token}' treated as a custom breakpoint."
            else:
                message = f"Unknown condition '{token}' treated as a custom theme."
            diagnostics.append(
                Diagnostic(
                    rule="check_unknown_conditions",
                    severity=Severity.WARNING,
                    message=message,
                    declaration=seg.raw,
                    token=token,
                    fix="Check for a misspelled breakpoint, state, or theme.",
                )
            )
    return diagnostics


def check_conflicting_conditions(style: StyleSource) -> list[Diagnostic]:
    """More than one breakpoint or theme in one declaration; only the last is kept."""
    classifier = style.parser.classifier
    diagnostics: list[Diagnostic] = []
    for seg in style.parsed_segments:
        by_kind: dict[ConditionKind, list[str]] = defaultdict(list)
        for token in seg.condition_tokens:
            if token:
                by_kind[classifier.classify(token)].append(token)
        for kind in (ConditionKind.BREAKPOINT, ConditionKind.THEME):
            tokens = by_kind.get(kind, [])
            if len(tokens) > 1:
                diagnostics.append(
                    Diagnostic(
                        rule="check_conflicting_conditions",
                        severity=Severity.WARNING,
                        message=(
                            f"Multiple {kind.value}s {tokens}; only '{tokens[-1]}' applies."
                        ),
                        declaration=seg.raw,
                        token=tokens[-1],
                        fix=f"Keep a single {kind.value} per declaration.",
                    )
                )
    return diagnostics


# ---------------------------------------------------------------------------
# Informational rules (INFO severity)
# ---------------------------------------------------------------------------


def check_unknown_properties(style: StyleSource) -> list[Diagnostic]:
    """Properties that are neither known CSS properties nor alias targets."""
    known_targets = style.parser.aliases.targets()
    diagnostics: list[Diagnostic] = []
    for seg in style.parsed_segments:
        prop = seg.declaration.property
        if prop.startswith("--") or prop in known_targets or style.parser.properties.is_known(prop):
            continue
        diagnostics.append(
            Diagnostic(
                rule="check_unknown_properties",
                severity=Severity.INFO,
                message=f"Property '{prop}' is not a recognized CSS property; passed through as-is.",
                declaration=seg.raw,
                token=seg.property_token,
            )
        )
    return diagnostics


def check_shadowed_declarations(style: StyleSource) -> list[Diagnostic]:
    """A later declaration with identical conditions and property replaces an earlier one."""
    seen: dict[tuple, str] = {}
    diagnostics: list[Diagnostic] = []
    for seg in style.parsed_segments:
        signature = seg.declaration.signature()
        if signature in seen:
            diagnostics.append(
                Diagnostic(
                    rule="check_shadowed_declarations",
                    severity=Severity.INFO,
                    message=f"'{seg.raw}' overrides earlier '{seen[signature]}'.",
                    declaration=seg.raw,
                )
            )
        seen[signature] = seg.raw
    return diagnostics


# ---------------------------------------------------------------------------
# Rule registry
# ---------------------------------------------------------------------------

ALL_RULES = [
    check_not_empty,
    check_malformed_segments,
    check_unknown_conditions,
    check_conflicting_conditions,
    check_unknown_properties,
    check_shadowed_declarations,
]
