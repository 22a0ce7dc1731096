"""Class-name resolution: shape filtering and CSS-module map lookup.

Shape rule:
    ClassName = '-'? ( letter | '_' ) ( letter | digit | '-' | '_' )*

Map lookup:
    no map / empty map  -> tokens pass through unchanged
    strict              -> tokens missing from the map are dropped
    non-strict          -> tokens missing from the map are kept as written
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

__all__ = ["is_valid_class_name", "filter_valid", "resolve"]

log = logging.getLogger("better_bem")

_CLASS_NAME_RE = re.compile(r"-?[_a-zA-Z][-_a-zA-Z0-9]*")


def is_valid_class_name(token: str) -> bool:
    """Return True if *token* has the shape of a CSS class name."""
    return _CLASS_NAME_RE.fullmatch(token) is not None


def filter_valid(tokens: Iterable[str]) -> tuple[str, ...]:
    """Drop tokens that are not well-formed class names."""
    valid: list[str] = []
    for token in tokens:
        if is_valid_class_name(token):
            valid.append(token)
        else:
            log.debug("Dropping malformed class name %r", token)
    return tuple(valid)


def resolve(
    tokens: Sequence[str],
    class_name_map: Mapping[str, Any] | None = None,
    strict: bool = True,
) -> str:
    """Map *tokens* through *class_name_map* and join them with spaces."""
    if not isinstance(class_name_map, Mapping) or not class_name_map:
        return " ".join(tokens)

    resolved: list[str] = []
    for token in tokens:
        mapped = class_name_map.get(token)
        # Empty map entries count as missing.
        if mapped is not None and mapped != "":
            resolved.append(str(mapped))
        elif not strict:
            resolved.append(token)
    return " ".join(resolved)
