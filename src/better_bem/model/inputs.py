"""Raw class-name input shapes.

Callers hand the engine plain Python values: a string, a list/tuple of
further inputs, or a mapping of candidate names to "enabled" values.  These
are classified once into a small tagged union so the rest of the engine never
has to probe types itself:

    RawClassInput = Text | Group | ConditionalMap

Values of any other type classify to ``None`` and contribute nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Union

log = logging.getLogger("better_bem")


@dataclass(frozen=True)
class Text:
    """A string of one or more whitespace-separated class names."""

    value: str


@dataclass(frozen=True)
class Group:
    """An ordered sequence of nested raw inputs."""

    items: tuple[Any, ...]


@dataclass(frozen=True)
class ConditionalMap:
    """Candidate class names paired with the value that enables them."""

    entries: tuple[tuple[str, Any], ...]

    def enabled(self) -> Iterator[tuple[str, Any]]:
        """Yield ``(name, value)`` pairs whose value is not False or None.

        ``0`` and ``""`` count as enabled.
        """
        for name, value in self.entries:
            if value is False or value is None:
                continue
            yield name, value


RawClassInput = Union[Text, Group, ConditionalMap]


def classify(raw: Any) -> RawClassInput | None:
    """Wrap a plain Python value in its tagged input variant."""
    if isinstance(raw, (Text, Group, ConditionalMap)):
        return raw
    if isinstance(raw, str):
        return Text(raw)
    if isinstance(raw, (list, tuple)):
        return Group(tuple(raw))
    if isinstance(raw, Mapping):
        entries = []
        for key, value in raw.items():
            if not isinstance(key, str):
                log.debug("Dropping non-string class map key %r", key)
                continue
            entries.append((key, value))
        return ConditionalMap(tuple(entries))
    if raw is not None:
        log.debug("Dropping class input of type %s: %r", type(raw).__name__, raw)
    return None


def flatten(raw: Any) -> list[Text | ConditionalMap]:
    """Flatten *raw* into its leaves, in order, at any nesting depth."""
    leaves: list[Text | ConditionalMap] = []
    stack: list[Any] = [raw]
    while stack:
        node = classify(stack.pop())
        if node is None:
            continue
        if isinstance(node, Group):
            # Reversed so items come off the stack in their original order.
            stack.extend(reversed(node.items))
        else:
            leaves.append(node)
    return leaves
