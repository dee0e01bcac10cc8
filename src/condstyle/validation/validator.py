"""Style validator: runs all validation rules and reports diagnostics."""

from __future__ import annotations

from typing import Callable

from condstyle.model.diagnostic import Diagnostic
from condstyle.parser import default_parser
from condstyle.parser.parser import StyleParser
from condstyle.validation.rules import ALL_RULES, StyleSource


class ValidationError(Exception):
    """Raised when validation produces ERROR-severity diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Validation failed with {len(messages)} error(s): " + "; ".join(messages)
        )


RuleFunc = Callable[[StyleSource], list[Diagnostic]]


def validate(
    source: str,
    parser: StyleParser | None = None,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Lint a style string without changing how it parses.

    *source* is split into segments by *parser* (the default parser when
    omitted), so custom aliases, properties and condition vocabulary count
    as known.  Every rule in ``ALL_RULES`` runs, then any *extra_rules*;
    findings come back in rule order.  A non-string *source* is linted as
    ``""`` and yields nothing.
    """
    if not isinstance(source, str):
        source = ""
    style = StyleSource.from_string(source, parser or default_parser)
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(style))
    return diagnostics


def validate_or_raise(
    source: str,
    parser: StyleParser | None = None,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run validation; raises :class:`ValidationError` if any ERROR diagnostics exist.

    Returns the non-error diagnostics (warnings/info) when no errors are found.
    """
    diagnostics = validate(source, parser=parser, extra_rules=extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise ValidationError(errors)
    return diagnostics
