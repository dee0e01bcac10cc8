"""Tests for exact, mobile-first and desktop-first breakpoint matching."""

import pytest

from condstyle import parse
from condstyle.engine import resolve
from condstyle.model import BreakpointStrategy

SCALE = parse(
    "font-size:14px; sm:font-size:16px; md:font-size:18px; lg:font-size:20px; xl:font-size:24px"
)


class TestExact:
    def test_default_is_exact(self):
        assert resolve(SCALE, breakpoint="md") == "font-size: 18px;"

    def test_explicit_exact(self):
        assert resolve(SCALE, breakpoint="md", breakpoint_strategy="exact") == "font-size: 18px;"

    def test_unmatched_breakpoint_gives_base(self):
        assert resolve(SCALE, breakpoint="xs") == "font-size: 14px;"


class TestMobileFirst:
    @pytest.mark.parametrize("bp, expected", [
        ("xs", "14px"),
        ("sm", "16px"),
        ("md", "18px"),
        ("xl", "24px"),
        ("2xl", "24px"),
    ])
    def test_scale(self, bp, expected):
        result = resolve(SCALE, breakpoint=bp, breakpoint_strategy=BreakpointStrategy.MOBILE_FIRST)
        assert result == f"font-size: {expected};"

    def test_larger_breakpoints_excluded(self):
        parsed = parse("padding:10px; sm:padding:15px; md:padding:20px; color:black; lg:color:blue")
        result = resolve(parsed, breakpoint="md", breakpoint_strategy="mobile-first")
        assert result == "padding: 20px; color: black;"

    def test_responsive_typography(self):
        parsed = parse("""
            font-size:16px;
            line-height:1.5;
            sm:font-size:18px;
            md:font-size:20px;
            md:line-height:1.6;
            lg:font-size:24px
        """)
        assert (
            resolve(parsed, breakpoint="md", breakpoint_strategy="mobile-first")
            == "font-size: 20px; line-height: 1.6;"
        )
        assert (
            resolve(parsed, breakpoint="sm", breakpoint_strategy="mobile-first")
            == "font-size: 18px; line-height: 1.5;"
        )

    def test_with_theme(self):
        parsed = parse("""
            color:black;
            dark:color:white;
            sm:font-size:16px;
            md:font-size:18px;
            dark:md:background:gray
        """)
        result = resolve(parsed, theme="dark", breakpoint="md", breakpoint_strategy="mobile-first")
        assert result == "color: white; font-size: 18px; background: gray;"


class TestDesktopFirst:
    def test_source_order_decides_among_matches(self):
        result = resolve(SCALE, breakpoint="md", breakpoint_strategy="desktop-first")
        assert result == "font-size: 24px;"

    def test_at_xs_everything_matches(self):
        assert resolve(SCALE, breakpoint="xs", breakpoint_strategy="desktop-first") == "font-size: 24px;"

    def test_spacing_written_largest_first(self):
        parsed = parse("padding:40px; lg:padding:30px; md:padding:20px; sm:padding:15px")
        assert resolve(parsed, breakpoint="md", breakpoint_strategy="desktop-first") == "padding: 20px;"
        assert resolve(parsed, breakpoint="lg", breakpoint_strategy="desktop-first") == "padding: 30px;"

    def test_with_state(self):
        parsed = parse("""
            opacity:1;
            hover:opacity:0.8;
            md:padding:20px;
            lg:padding:30px;
            hover:lg:transform:scale(1.1)
        """)
        result = resolve(parsed, state="hover", breakpoint="md", breakpoint_strategy="desktop-first")
        assert result == "opacity: 0.8; padding: 30px; transform: scale(1.1);"


class TestCustomBreakpoints:
    def test_custom_breakpoints_match_exactly(self):
        parsed = parse("font-size:14px; 3xl:font-size:32px; 4xl:font-size:40px")
        for strategy in BreakpointStrategy:
            assert resolve(parsed, breakpoint="3xl", breakpoint_strategy=strategy) == "font-size: 32px;"
            assert resolve(parsed, breakpoint="4xl", breakpoint_strategy=strategy) == "font-size: 40px;"

    def test_standard_declaration_vs_custom_request(self):
        parsed = parse("font-size:14px; md:font-size:18px")
        assert resolve(parsed, breakpoint="3xl", breakpoint_strategy="mobile-first") == "font-size: 14px;"


class TestEdgeCases:
    def test_no_breakpoint_requested(self):
        assert resolve(SCALE, breakpoint_strategy="mobile-first") == "font-size: 14px;"

    def test_empty_styles(self):
        assert resolve(parse(""), breakpoint="md", breakpoint_strategy="mobile-first") == ""

    def test_no_breakpoint_declarations(self):
        parsed = parse("color:red; padding:10px")
        result = resolve(parsed, breakpoint="md", breakpoint_strategy="mobile-first")
        assert result == "color: red; padding: 10px;"
