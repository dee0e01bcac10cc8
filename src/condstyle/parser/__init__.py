from condstyle.parser.parser import ParsedSegment, StyleParser, build_conditions, split_declarations
from condstyle.parser.properties import KNOWN_CSS_PROPERTIES, PropertyRecognizer
from condstyle.model.declaration import ParsedStyles

__all__ = [
    "KNOWN_CSS_PROPERTIES",
    "ParsedSegment",
    "PropertyRecognizer",
    "StyleParser",
    "build_conditions",
    "default_parser",
    "parse",
    "split_declarations",
]

default_parser = StyleParser()


def parse(source: object) -> ParsedStyles:
    """Parse *source* with the default parser (process-wide alias table)."""
    return default_parser.parse(source)
