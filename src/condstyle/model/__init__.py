"""condstyle model layer -- public type re-exports."""

from condstyle.model.conditions import BASE, ConditionKind, ConditionSet
from condstyle.model.context import BreakpointStrategy, ResolutionContext, ThemeStrategy
from condstyle.model.declaration import Declaration, ParsedStyles
from condstyle.model.diagnostic import Diagnostic, Severity

__all__ = [
    # conditions
    "BASE",
    "ConditionKind",
    "ConditionSet",
    # declaration
    "Declaration",
    "ParsedStyles",
    # context
    "BreakpointStrategy",
    "ThemeStrategy",
    "ResolutionContext",
    # diagnostic
    "Severity",
    "Diagnostic",
]
