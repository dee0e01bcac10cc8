"""Tests for style validation rules and the validator."""

import pytest

from condstyle.conditions import ConditionClassifier
from condstyle.model.diagnostic import Diagnostic, Severity
from condstyle.parser import StyleParser, default_parser
from condstyle.validation import ValidationError, validate, validate_or_raise
from condstyle.validation.rules import (
    ALL_RULES,
    StyleSource,
    check_conflicting_conditions,
    check_malformed_segments,
    check_not_empty,
    check_shadowed_declarations,
    check_unknown_conditions,
    check_unknown_properties,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _style(source: str, parser: StyleParser | None = None) -> StyleSource:
    return StyleSource.from_string(source, parser or default_parser)


# ---------------------------------------------------------------------------
# check_not_empty
# ---------------------------------------------------------------------------


class TestCheckNotEmpty:
    def test_nothing_parsed(self):
        diags = check_not_empty(_style("oops; also-bad"))
        assert len(diags) == 1
        assert diags[0].severity is Severity.ERROR
        assert "No valid declarations" in diags[0].message

    def test_blank_input_is_fine(self):
        assert check_not_empty(_style("   ")) == []

    def test_one_good_declaration(self):
        assert check_not_empty(_style("oops; color:red")) == []


# ---------------------------------------------------------------------------
# check_malformed_segments
# ---------------------------------------------------------------------------


class TestCheckMalformedSegments:
    def test_reports_each_skipped_segment(self):
        diags = check_malformed_segments(_style("color:red; oops; margin:"))
        assert [d.declaration for d in diags] == ["oops", "margin:"]
        assert all(d.severity is Severity.WARNING for d in diags)
        assert "expected property:value" in diags[0].message
        assert "empty value" in diags[1].message

    def test_clean_input(self):
        assert check_malformed_segments(_style("color:red; dark:color:white")) == []


# ---------------------------------------------------------------------------
# check_unknown_conditions
# ---------------------------------------------------------------------------


class TestCheckUnknownConditions:
    def test_custom_theme(self):
        diags = check_unknown_conditions(_style("midnight:color:purple"))
        assert len(diags) == 1
        assert diags[0].token == "midnight"
        assert "custom theme" in diags[0].message

    def test_custom_breakpoint(self):
        diags = check_unknown_conditions(_style("3xl:padding:4rem"))
        assert len(diags) == 1
        assert "custom breakpoint" in diags[0].message

    def test_known_vocabulary(self):
        assert check_unknown_conditions(_style("dark:md:hover:color:red")) == []

    def test_registered_breakpoint_is_known(self):
        parser = StyleParser(classifier=ConditionClassifier(breakpoints=["tablet"]))
        assert check_unknown_conditions(_style("tablet:color:red", parser)) == []
        assert len(check_unknown_conditions(_style("tablet:color:red"))) == 1


# ---------------------------------------------------------------------------
# check_conflicting_conditions
# ---------------------------------------------------------------------------


class TestCheckConflictingConditions:
    def test_two_breakpoints(self):
        diags = check_conflicting_conditions(_style("sm:lg:padding:1rem"))
        assert len(diags) == 1
        assert diags[0].token == "lg"
        assert "only 'lg' applies" in diags[0].message

    def test_two_themes(self):
        diags = check_conflicting_conditions(_style("dark:light:color:red"))
        assert len(diags) == 1
        assert diags[0].token == "light"

    def test_multiple_states_are_not_a_conflict(self):
        assert check_conflicting_conditions(_style("hover:active:bg:red")) == []


# ---------------------------------------------------------------------------
# check_unknown_properties
# ---------------------------------------------------------------------------


class TestCheckUnknownProperties:
    def test_unknown(self):
        diags = check_unknown_properties(_style("rounded:4px"))
        assert len(diags) == 1
        assert diags[0].severity is Severity.INFO
        assert "'rounded'" in diags[0].message

    def test_alias_target_known(self):
        assert check_unknown_properties(_style("bg:red; mx:auto")) == []

    def test_custom_property_known(self):
        assert check_unknown_properties(_style("--brand:#123")) == []


# ---------------------------------------------------------------------------
# check_shadowed_declarations
# ---------------------------------------------------------------------------


class TestCheckShadowedDeclarations:
    def test_same_conditions_and_property(self):
        diags = check_shadowed_declarations(_style("dark:color:red; dark:color:blue"))
        assert len(diags) == 1
        assert diags[0].declaration == "dark:color:blue"
        assert "overrides earlier 'dark:color:red'" in diags[0].message

    def test_alias_and_full_name_collide(self):
        assert len(check_shadowed_declarations(_style("bg:red; background:blue"))) == 1

    def test_condition_order_irrelevant(self):
        diags = check_shadowed_declarations(_style("dark:md:p:1; md:dark:p:2"))
        assert len(diags) == 1

    def test_different_conditions(self):
        assert check_shadowed_declarations(_style("color:red; dark:color:blue")) == []


# ---------------------------------------------------------------------------
# validate / validate_or_raise
# ---------------------------------------------------------------------------


class TestValidate:
    def test_clean_source(self):
        assert validate("bg:white; dark:bg:black; md:hover:p:20px") == []

    def test_empty_source(self):
        assert validate("") == []

    def test_non_string_source(self):
        assert validate(None) == []

    def test_collects_from_all_rules(self):
        diags = validate("oops")
        rules = {d.rule for d in diags}
        assert rules == {"check_not_empty", "check_malformed_segments"}

    def test_extra_rules(self):
        def no_red(style):
            return [
                Diagnostic(rule="no_red", severity=Severity.WARNING, message="red", declaration=s.raw)
                for s in style.parsed_segments
                if s.declaration.value == "red"
            ]

        diags = validate("color:red; bg:blue", extra_rules=[no_red])
        assert [d.rule for d in diags] == ["no_red"]

    def test_all_rules_registry(self):
        assert check_not_empty in ALL_RULES
        assert len(ALL_RULES) == 6


class TestValidateOrRaise:
    def test_raises_on_error(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_or_raise("nothing here")
        assert len(exc_info.value.diagnostics) == 1
        assert "1 error(s)" in str(exc_info.value)

    def test_returns_warnings(self):
        diags = validate_or_raise("midnight:color:red")
        assert len(diags) == 1
        assert diags[0].is_warning


class TestDiagnosticStr:
    def test_with_declaration(self):
        d = Diagnostic(rule="r", severity=Severity.WARNING, message="bad", declaration="x:y")
        assert str(d) == "WARNING [x:y]: bad"

    def test_without_declaration(self):
        d = Diagnostic(rule="r", severity=Severity.ERROR, message="bad")
        assert str(d) == "ERROR: bad"
