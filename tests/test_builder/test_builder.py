"""Tests for the fluent style builder."""

from condstyle import StyleBuilder, parse, resolve, style_object


class TestStyleBuilder:
    def test_chained_build(self):
        result = (
            StyleBuilder()
            .style("bg", "blue")
            .themed("dark", "bg", "black")
            .responsive("md", "p", "20px")
            .state("hover", "opacity", "0.8")
            .build()
        )
        assert result == "bg:blue; dark:bg:black; md:p:20px; hover:opacity:0.8"

    def test_empty(self):
        assert StyleBuilder().build() == ""

    def test_multiple_states(self):
        assert StyleBuilder().state(["hover", "active"], "bg", "red").build() == "hover:active:bg:red"

    def test_conditional(self):
        result = StyleBuilder().conditional(
            "bg", "black", theme="dark", breakpoint="md", states=["hover"]
        ).build()
        assert result == "dark:md:hover:bg:black"

    def test_conditional_without_conditions(self):
        assert StyleBuilder().conditional("color", "red").build() == "color:red"

    def test_clear_and_len(self):
        builder = StyleBuilder().style("color", "red").style("margin", "0")
        assert len(builder) == 2
        builder.clear()
        assert len(builder) == 0
        assert str(builder) == ""

    def test_output_round_trips_through_parser(self):
        source = (
            StyleBuilder()
            .style("color", "black")
            .themed("dark", "color", "white")
            .conditional("padding", "2rem", breakpoint="lg", states="focus")
            .build()
        )
        assert resolve(parse(source), theme="dark") == "color: white;"
        assert resolve(parse(source), breakpoint="lg", state="focus") == "color: black; padding: 2rem;"


class TestStyleObject:
    def test_mapping(self):
        assert style_object({"bg": "blue", "dark:bg": "black"}) == "bg:blue; dark:bg:black"

    def test_none_values_dropped(self):
        assert style_object({"bg": "blue", "color": None}) == "bg:blue"

    def test_empty(self):
        assert style_object({}) == ""
