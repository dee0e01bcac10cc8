"""Known CSS property names used to find the property/value boundary."""

from __future__ import annotations

from collections.abc import Callable, Iterable

KNOWN_CSS_PROPERTIES = frozenset({
    # Box model
    "margin", "margin-top", "margin-right", "margin-bottom", "margin-left",
    "margin-inline", "margin-block", "margin-inline-start", "margin-inline-end",
    "padding", "padding-top", "padding-right", "padding-bottom", "padding-left",
    "padding-inline", "padding-block", "padding-inline-start", "padding-inline-end",
    "border", "border-top", "border-right", "border-bottom", "border-left",
    "border-width", "border-style", "border-color", "border-radius",
    "outline", "outline-width", "outline-style", "outline-color", "outline-offset",
    "box-sizing",
    # Sizing
    "width", "height", "min-width", "min-height", "max-width", "max-height",
    "aspect-ratio",
    # Positioning & display
    "display", "position", "top", "right", "bottom", "left", "inset",
    "z-index", "float", "clear", "visibility", "overflow", "overflow-x",
    "overflow-y", "overflow-wrap", "overscroll-behavior",
    "overscroll-behavior-x", "overscroll-behavior-y",
    # Flexbox
    "flex", "flex-direction", "flex-wrap", "flex-flow", "flex-grow",
    "flex-shrink", "flex-basis", "justify-content", "justify-items",
    "justify-self", "align-items", "align-content", "align-self", "order",
    # Grid
    "grid", "grid-template", "grid-template-columns", "grid-template-rows",
    "grid-template-areas", "grid-column", "grid-column-start", "grid-column-end",
    "grid-row", "grid-row-start", "grid-row-end", "grid-area", "grid-gap",
    "gap", "row-gap", "column-gap", "place-items", "place-content",
    # Colour & background
    "color", "background", "background-color", "background-image",
    "background-size", "background-position", "background-repeat",
    "background-attachment", "background-clip", "background-origin",
    "background-blend-mode", "mix-blend-mode", "opacity",
    # Typography
    "font", "font-family", "font-size", "font-weight", "font-style",
    "font-variant", "text", "text-align", "text-decoration", "text-transform",
    "text-overflow", "text-indent", "line-height", "letter-spacing",
    "word-spacing", "word-break", "white-space", "vertical-align",
    "list-style", "list-style-type",
    # Effects
    "box-shadow", "text-shadow", "filter", "backdrop-filter", "clip-path",
    "transform", "transform-origin", "transition", "transition-property",
    "transition-duration", "transition-delay", "transition-timing-function",
    "animation", "animation-name", "animation-duration", "animation-delay",
    # Interaction
    "cursor", "pointer-events", "user-select", "resize",
    # Media
    "object-fit", "object-position",
    # SVG
    "fill", "stroke", "stroke-width",
    # Content
    "content",
})


class PropertyRecognizer:
    """Decides whether a (resolved) token names a known CSS property.

    Starts from ``KNOWN_CSS_PROPERTIES`` and can be extended with extra
    names or a predicate, so multi-word properties the built-in set lacks
    can still be reconstructed from ``font:feature:settings`` style input.
    """

    def __init__(
        self,
        properties: Iterable[str] | None = None,
        predicate: Callable[[str], bool] | None = None,
    ) -> None:
        self._properties = set(KNOWN_CSS_PROPERTIES if properties is None else properties)
        self._predicate = predicate

    def add(self, *names: str) -> None:
        self._properties.update(names)

    def is_known(self, name: str) -> bool:
        if name in self._properties:
            return True
        if self._predicate is not None:
            return bool(self._predicate(name))
        return False

    def __contains__(self, name: str) -> bool:
        return self.is_known(name)

    def copy(self) -> PropertyRecognizer:
        return PropertyRecognizer(self._properties, self._predicate)

    def __repr__(self) -> str:
        return f"PropertyRecognizer(properties={len(self._properties)})"
