from condstyle.engine.matcher import FALLBACK_RULES, FallbackRule, declaration_matches
from condstyle.engine.resolver import resolve, resolve_dict, resolve_themed, to_css

__all__ = [
    "FALLBACK_RULES",
    "FallbackRule",
    "declaration_matches",
    "resolve",
    "resolve_dict",
    "resolve_themed",
    "to_css",
]
