"""condstyle - conditional style micro-syntax parser and resolver.

    >>> from condstyle import parse, resolve
    >>> styles = parse("bg:white; dark:bg:black; md:p:20px")
    >>> resolve(styles, theme="dark", breakpoint="md")
    'background: black; padding: 20px;'
"""

from condstyle.aliases import (
    DEFAULT_ALIASES,
    AliasHint,
    AliasTable,
    alias_hints,
    clear_custom_aliases,
    get_all_aliases,
    is_alias,
    register_alias,
    register_aliases,
    resolve_property,
)
from condstyle.builder import StyleBuilder, style_object
from condstyle.conditions import ConditionClassifier, classify_condition
from condstyle.config import StyleConfig, StyleEngine
from condstyle.engine import resolve, resolve_dict, resolve_themed
from condstyle.merge import merge, normalize_input
from condstyle.model import (
    BreakpointStrategy,
    ConditionKind,
    ConditionSet,
    Declaration,
    Diagnostic,
    ParsedStyles,
    ResolutionContext,
    Severity,
    ThemeStrategy,
)
from condstyle.parser import PropertyRecognizer, StyleParser, parse
from condstyle.validation import ValidationError, validate, validate_or_raise

__version__ = "0.1.0"

__all__ = [
    # parse / resolve
    "parse",
    "resolve",
    "resolve_dict",
    "resolve_themed",
    "merge",
    "normalize_input",
    # aliases
    "DEFAULT_ALIASES",
    "AliasHint",
    "AliasTable",
    "alias_hints",
    "clear_custom_aliases",
    "get_all_aliases",
    "is_alias",
    "register_alias",
    "register_aliases",
    "resolve_property",
    # model
    "BreakpointStrategy",
    "ConditionKind",
    "ConditionSet",
    "Declaration",
    "ParsedStyles",
    "ResolutionContext",
    "ThemeStrategy",
    "ConditionClassifier",
    "classify_condition",
    # parser
    "PropertyRecognizer",
    "StyleParser",
    # builder
    "StyleBuilder",
    "style_object",
    # validation
    "Diagnostic",
    "Severity",
    "ValidationError",
    "validate",
    "validate_or_raise",
    # config
    "StyleConfig",
    "StyleEngine",
    "__version__",
]
