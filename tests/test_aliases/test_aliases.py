"""Tests for the alias table and the default-table helpers."""

import pytest

from condstyle import parse
from condstyle.aliases import (
    DEFAULT_ALIASES,
    AliasTable,
    alias_hints,
    clear_custom_aliases,
    get_all_aliases,
    is_alias,
    register_alias,
    register_aliases,
    resolve_property,
    to_kebab_case,
)


# ---------------------------------------------------------------------------
# Built-in aliases
# ---------------------------------------------------------------------------


class TestBuiltinAliases:
    @pytest.mark.parametrize("alias, prop", [
        ("bg", "background"),
        ("text", "color"),
        ("size", "font-size"),
        ("p", "padding"),
        ("mx", "margin-inline"),
        ("w", "width"),
        ("z", "z-index"),
        ("shadow", "box-shadow"),
    ])
    def test_resolves(self, alias, prop):
        assert resolve_property(alias) == prop

    def test_canonical_name_passes_through(self):
        assert resolve_property("background-color") == "background-color"

    def test_unknown_lowercase_unchanged(self):
        assert resolve_property("rounded") == "rounded"

    def test_builtin_table_is_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_ALIASES["bg"] = "background-color"


# ---------------------------------------------------------------------------
# Custom aliases on the default table
# ---------------------------------------------------------------------------


class TestCustomAliases:
    def test_register_new_alias(self):
        register_alias("brand", "--brand-color")
        assert resolve_property("brand") == "--brand-color"
        assert is_alias("brand")

    def test_custom_overrides_builtin(self):
        register_alias("bg", "background-color")
        assert parse("bg:red")[0].property == "background-color"

    def test_clear_restores_builtin(self):
        register_alias("bg", "background-color")
        clear_custom_aliases()
        assert parse("bg:red")[0].property == "background"

    def test_register_many(self):
        register_aliases({"fs": "font-size", "lh": "line-height"})
        assert resolve_property("fs") == "font-size"
        assert resolve_property("lh") == "line-height"

    def test_get_all_aliases_includes_both_layers(self):
        register_alias("brand", "--brand-color")
        aliases = get_all_aliases()
        assert aliases["bg"] == "background"
        assert aliases["brand"] == "--brand-color"

    def test_get_all_aliases_returns_copy(self):
        get_all_aliases()["bg"] = "nope"
        assert resolve_property("bg") == "background"

    def test_is_alias_false_for_plain_property(self):
        assert not is_alias("color")

    def test_registration_visible_to_later_parses(self):
        before = parse("brand:red")[0].property
        register_alias("brand", "--brand-color")
        assert before == "brand"
        assert parse("brand:red")[0].property == "--brand-color"


# ---------------------------------------------------------------------------
# Isolated tables
# ---------------------------------------------------------------------------


class TestAliasTable:
    def test_isolated_from_default(self):
        table = AliasTable()
        table.register("bg", "background-color")
        assert table.resolve("bg") == "background-color"
        assert resolve_property("bg") == "background"

    def test_copy_is_independent(self):
        table = AliasTable(custom={"fs": "font-size"})
        clone = table.copy()
        clone.register("lh", "line-height")
        assert "lh" in clone
        assert "lh" not in table
        assert clone.resolve("fs") == "font-size"

    def test_custom_builtin_layer(self):
        table = AliasTable(builtin={"c": "color"})
        assert table.resolve("c") == "color"
        assert table.resolve("bg") == "bg"

    def test_targets(self):
        table = AliasTable(custom={"fs": "font-size"}, builtin={"c": "color"})
        assert table.targets() == {"font-size", "color"}

    def test_clear_custom_keeps_builtin(self):
        table = AliasTable(custom={"bg": "background-color"})
        table.clear_custom()
        assert table.custom == {}
        assert table.resolve("bg") == "background"


# ---------------------------------------------------------------------------
# Case normalization
# ---------------------------------------------------------------------------


class TestKebabCase:
    @pytest.mark.parametrize("name, expected", [
        ("backgroundColor", "background-color"),
        ("fontSize", "font-size"),
        ("borderTopLeftRadius", "border-top-left-radius"),
        ("WebkitTransition", "-webkit-transition"),
        ("MozAppearance", "-moz-appearance"),
        ("color", "color"),
        ("--brandColor", "--brandColor"),
    ])
    def test_conversion(self, name, expected):
        assert to_kebab_case(name) == expected

    def test_alias_takes_priority_over_case_conversion(self):
        table = AliasTable(custom={"fontSz": "font-size"})
        assert table.resolve("fontSz") == "font-size"


# ---------------------------------------------------------------------------
# Hints
# ---------------------------------------------------------------------------


class TestAliasHints:
    def test_every_alias_has_a_hint(self):
        hints = alias_hints()
        assert {h.alias for h in hints} == set(get_all_aliases())

    def test_categories(self):
        by_alias = {h.alias: h for h in alias_hints()}
        assert by_alias["bg"].category == "Background"
        assert by_alias["bg"].property == "background"
        assert by_alias["p"].category == "Spacing"

    def test_custom_alias_in_other(self):
        register_alias("brand", "--brand-color")
        by_alias = {h.alias: h for h in alias_hints()}
        assert by_alias["brand"].category == "Other"

    def test_sorted_by_category_then_alias(self):
        hints = alias_hints()
        keys = [(h.category, h.alias) for h in hints]
        assert keys == sorted(keys)

    def test_explicit_table(self):
        table = AliasTable(builtin={"c": "color"})
        assert [h.alias for h in alias_hints(table)] == ["c"]
