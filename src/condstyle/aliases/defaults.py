"""Built-in property aliases for the compact style syntax."""

from __future__ import annotations

from types import MappingProxyType

_DEFAULTS: dict[str, str] = {
    # Background
    "bg": "background",
    "bg-color": "background-color",
    "bg-image": "background-image",
    "bg-size": "background-size",
    "bg-position": "background-position",
    "bg-repeat": "background-repeat",
    "bg-attachment": "background-attachment",
    "bg-clip": "background-clip",
    "bg-origin": "background-origin",
    # Text & typography
    "text": "color",
    "size": "font-size",
    # Sizing
    "w": "width",
    "h": "height",
    "min-w": "min-width",
    "max-w": "max-width",
    "min-h": "min-height",
    "max-h": "max-height",
    # Margin
    "m": "margin",
    "mt": "margin-top",
    "mr": "margin-right",
    "mb": "margin-bottom",
    "ml": "margin-left",
    "mx": "margin-inline",
    "my": "margin-block",
    "ms": "margin-inline-start",
    "me": "margin-inline-end",
    # Padding
    "p": "padding",
    "pt": "padding-top",
    "pr": "padding-right",
    "pb": "padding-bottom",
    "pl": "padding-left",
    "px": "padding-inline",
    "py": "padding-block",
    "ps": "padding-inline-start",
    "pe": "padding-inline-end",
    # Space between
    "space-x": "column-gap",
    "space-y": "row-gap",
    # Border
    "border-w": "border-width",
    "border-t": "border-top",
    "border-r": "border-right",
    "border-b": "border-bottom",
    "border-l": "border-left",
    # Layout
    "z": "z-index",
    # Flexbox
    "justify": "justify-content",
    "items": "align-items",
    "align": "align-self",
    "grow": "flex-grow",
    "shrink": "flex-shrink",
    "basis": "flex-basis",
    # Grid
    "grid-cols": "grid-template-columns",
    "grid-rows": "grid-template-rows",
    "col": "grid-column",
    "col-start": "grid-column-start",
    "col-end": "grid-column-end",
    "row": "grid-row",
    "row-start": "grid-row-start",
    "row-end": "grid-row-end",
    "gap-x": "column-gap",
    "gap-y": "row-gap",
    # Effects
    "shadow": "box-shadow",
    "mix-blend": "mix-blend-mode",
    "bg-blend": "background-blend-mode",
    # Transforms
    "origin": "transform-origin",
    # Transitions & animation
    "duration": "transition-duration",
    "delay": "transition-delay",
    "animate": "animation",
    # Overflow
    "overscroll": "overscroll-behavior",
    "overscroll-x": "overscroll-behavior-x",
    "overscroll-y": "overscroll-behavior-y",
    # Misc
    "outline-w": "outline-width",
    "aspect": "aspect-ratio",
    "object": "object-fit",
    "list": "list-style-type",
    "break": "word-break",
    "break-words": "overflow-wrap",
    "whitespace": "white-space",
    "stroke-w": "stroke-width",
}

# Read-only view; the built-in layer is never mutated at runtime.
DEFAULT_ALIASES = MappingProxyType(_DEFAULTS)

ALIAS_CATEGORIES: dict[str, tuple[str, ...]] = {
    "Background": (
        "bg", "bg-color", "bg-image", "bg-size", "bg-position", "bg-repeat",
        "bg-attachment", "bg-clip", "bg-origin",
    ),
    "Typography": ("text", "size"),
    "Spacing": (
        "m", "mt", "mr", "mb", "ml", "mx", "my", "ms", "me",
        "p", "pt", "pr", "pb", "pl", "px", "py", "ps", "pe",
    ),
    "Sizing": ("w", "h", "min-w", "max-w", "min-h", "max-h"),
    "Border": ("border-w", "border-t", "border-r", "border-b", "border-l"),
    "Layout": ("z",),
    "Flexbox": ("justify", "items", "align", "grow", "shrink", "basis"),
    "Grid": (
        "grid-cols", "grid-rows", "col", "col-start", "col-end", "row",
        "row-start", "row-end", "gap-x", "gap-y", "space-x", "space-y",
    ),
    "Effects": ("shadow", "mix-blend", "bg-blend"),
    "Transforms": ("origin",),
    "Animation": ("duration", "delay", "animate"),
    "Overflow": ("overscroll", "overscroll-x", "overscroll-y"),
}
