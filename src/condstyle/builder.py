"""Fluent builder for conditional style strings."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

__all__ = ["StyleBuilder", "style_object"]


class StyleBuilder:
    """Accumulates declarations and renders them in the colon-delimited syntax.

    Example::

        StyleBuilder().style("bg", "blue").themed("dark", "bg", "black") \\
            .responsive("md", "p", "20px").state("hover", "opacity", "0.8").build()
        # 'bg:blue; dark:bg:black; md:p:20px; hover:opacity:0.8'
    """

    def __init__(self) -> None:
        self._declarations: list[str] = []

    def _add(self, *parts: str) -> StyleBuilder:
        self._declarations.append(":".join(parts))
        return self

    def style(self, prop: str, value: str) -> StyleBuilder:
        """Base declaration with no conditions."""
        return self._add(prop, value)

    def themed(self, theme: str, prop: str, value: str) -> StyleBuilder:
        return self._add(theme, prop, value)

    def responsive(self, breakpoint: str, prop: str, value: str) -> StyleBuilder:
        return self._add(breakpoint, prop, value)

    def state(self, state: str | Iterable[str], prop: str, value: str) -> StyleBuilder:
        """State declaration; pass several states to require all of them."""
        states = [state] if isinstance(state, str) else list(state)
        return self._add(*states, prop, value)

    def conditional(
        self,
        prop: str,
        value: str,
        *,
        theme: str | None = None,
        breakpoint: str | None = None,
        states: str | Iterable[str] = (),
    ) -> StyleBuilder:
        parts: list[str] = []
        if theme:
            parts.append(theme)
        if breakpoint:
            parts.append(breakpoint)
        parts.extend([states] if isinstance(states, str) else states)
        return self._add(*parts, prop, value)

    def build(self) -> str:
        return "; ".join(self._declarations)

    def clear(self) -> StyleBuilder:
        self._declarations = []
        return self

    def __len__(self) -> int:
        return len(self._declarations)

    def __str__(self) -> str:
        return self.build()


def style_object(styles: Mapping[str, str | None]) -> str:
    """Render a mapping such as ``{"bg": "blue", "dark:bg": "black"}``; ``None`` values are dropped."""
    return "; ".join(f"{key}:{value}" for key, value in styles.items() if value is not None)
