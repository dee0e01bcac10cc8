"""Merging of serialized style strings with left-argument priority.

Works on the raw ``conditions:property:value`` text rather than on parsed
declarations: the key of an entry is everything before its last colon, so
``hover:bg`` and ``hover:dark:bg`` are distinct keys.  Keys are compared
verbatim (aliases are not resolved and condition order matters).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

__all__ = ["StyleInput", "merge", "normalize_input"]

StyleInput = Union[str, Mapping[str, Any], list, tuple, None]


def _from_mapping(mapping: Mapping[str, Any]) -> str:
    return "; ".join(f"{key}:{value}" for key, value in mapping.items())


def normalize_input(value: StyleInput) -> str:
    """Normalize a string, mapping, or list of either into a ``;``-joined string.

    Anything else normalizes to ``""`` so a stray value never breaks a merge.
    """
    if not value:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        return _from_mapping(value)
    if isinstance(value, (list, tuple)):
        return "; ".join(
            normalize_input(item) for item in value if isinstance(item, (str, Mapping))
        )
    return ""


def merge(*inputs: StyleInput) -> str:
    """Merge style inputs; for any key the leftmost input wins.

    ``merge(child, parent)`` lets *child* override *parent*.  The result is
    compact ``key:value`` pairs joined by ``;`` with no trailing separator.
    """
    if not inputs:
        return ""
    if len(inputs) == 1:
        return normalize_input(inputs[0])

    entries: dict[str, str] = {}
    # Right to left so that earlier arguments overwrite later ones.
    for item in reversed(inputs):
        normalized = normalize_input(item)
        if not normalized:
            continue
        for piece in normalized.split(";"):
            piece = piece.strip()
            if not piece:
                continue
            key, sep, value = piece.rpartition(":")
            if not sep:
                continue
            key = key.strip()
            if key:
                entries[key] = value.strip()

    return ";".join(f"{key}:{value}" for key, value in entries.items())
