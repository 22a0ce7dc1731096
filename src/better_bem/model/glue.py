"""Glue configuration: the separators placed between BEM name segments."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

log = logging.getLogger("better_bem")

# Short keys accepted by the original JavaScript-style options object.
_ALIASES = {
    "el": "element",
    "mod": "modifier",
    "prop": "key_value",
}


@dataclass(frozen=True)
class GlueSet:
    """Separators used when composing class names.

    Attributes:
        element: Placed between a block and an element (``block__element``).
        modifier: Placed between a name and its modifier (``block--mod``).
        key_value: Placed between a modifier key and its value (``size-lg``).
    """

    element: str = "__"
    modifier: str = "--"
    key_value: str = "-"

    @classmethod
    def from_partial(cls, options: GlueSet | Mapping[str, Any] | None = None) -> GlueSet:
        """Build a GlueSet from a partial mapping, filling in the defaults.

        Both the field names and the short aliases ``el``/``mod``/``prop`` are
        accepted.  Unknown keys and non-string values are ignored.
        """
        if isinstance(options, GlueSet):
            return options
        if not isinstance(options, Mapping):
            if options is not None:
                log.debug("Ignoring glue options of type %s", type(options).__name__)
            return cls()

        known = {f.name for f in fields(cls)}
        values: dict[str, str] = {}
        for key, value in options.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                log.debug("Ignoring unknown glue option %r", key)
                continue
            if not isinstance(value, str):
                log.debug("Ignoring non-string glue for %r: %r", key, value)
                continue
            values[name] = value
        return cls(**values)


DEFAULT_GLUE = GlueSet()
