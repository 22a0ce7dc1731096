"""Normalizer: turn any raw class input into a flat, unique token sequence."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from better_bem.model.inputs import ConditionalMap, Text, flatten

__all__ = ["normalize", "dedupe"]


def dedupe(tokens: Iterable[str]) -> tuple[str, ...]:
    """Remove duplicates, keeping the first occurrence of each token."""
    return tuple(dict.fromkeys(tokens))


def _format_value(value: Any) -> str | None:
    """Render a modifier value for ``key{glue}value`` names.

    Returns None for values that only toggle the modifier on.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else str(value)
    return None


def _map_names(
    leaf: ConditionalMap, key_value_mode: bool, key_value_glue: str
) -> list[str]:
    names: list[str] = []
    for key, value in leaf.enabled():
        rendered = _format_value(value) if key_value_mode else None
        if rendered is None:
            names.append(key)
        else:
            names.append(f"{key}{key_value_glue}{rendered}")
    return names


def normalize(
    raw: Any = (), key_value_mode: bool = False, key_value_glue: str = ""
) -> tuple[str, ...]:
    """Normalize *raw* into an ordered tuple of unique class-name tokens.

    Strings are split on whitespace, sequences are flattened at any depth and
    mappings contribute the keys whose value is not False or None.  With
    *key_value_mode* set, mapping entries whose value is a string or number
    become ``key{key_value_glue}value``.  Unsupported values are dropped.
    """
    strings: list[str] = []
    for leaf in flatten(raw):
        if isinstance(leaf, Text):
            strings.append(leaf.value)
        else:
            strings.extend(_map_names(leaf, key_value_mode, key_value_glue))

    return dedupe(fragment for s in strings for fragment in s.split())
