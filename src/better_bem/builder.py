"""Chainable BEM block builder.

A :class:`Block` is an immutable value.  ``element()`` and ``modifier()``
return new blocks; ``class_name`` is recomputed on every read so changes the
caller makes to the class-name map are picked up.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from better_bem.model.glue import GlueSet
from better_bem.resolution import filter_valid, resolve
from better_bem.tokens import combine, dedupe, expand_modifiers, normalize

__all__ = ["Block", "create", "factory", "resolve_class_name"]


@dataclass(frozen=True)
class Block:
    """Snapshot of a BEM builder.

    Attributes:
        base_tokens: Block or element names the modifiers apply to.
        modifier_tokens: Accumulated modifier names (``key-value`` pairs already
            expanded).
        class_name_map: CSS-module style lookup table, held by reference.
        strict: Drop names that are missing from a non-empty map.
        glue: Separators used to compose names.
    """

    base_tokens: tuple[str, ...] = ()
    modifier_tokens: tuple[str, ...] = ()
    class_name_map: Mapping[str, Any] | None = field(default=None, compare=False)
    strict: bool = True
    glue: GlueSet = field(default_factory=GlueSet)

    # --- derivation -----------------------------------------------------------

    def element(self, elements: Any = ()) -> Block:
        """Return a block for the given element(s) of this block.

        With no element names the result has no base names at all.
        """
        names = normalize(elements)
        if not names:
            return replace(self, base_tokens=())
        return replace(self, base_tokens=combine(self.base_tokens, names, self.glue.element))

    def modifier(self, modifiers: Any = ()) -> Block:
        """Return a copy of this block with *modifiers* added to the existing ones."""
        added = normalize(modifiers, key_value_mode=True, key_value_glue=self.glue.key_value)
        return replace(self, modifier_tokens=dedupe([*self.modifier_tokens, *added]))

    el = element
    mod = modifier

    # --- resolution -----------------------------------------------------------

    @property
    def tokens(self) -> tuple[str, ...]:
        """Valid class names before the class-name map is applied."""
        expanded = expand_modifiers(
            self.base_tokens, self.modifier_tokens, self.glue.modifier, self.glue.key_value
        )
        return filter_valid(expanded)

    @property
    def class_name(self) -> str:
        return resolve_class_name(self)

    @property
    def cn(self) -> str:
        return resolve_class_name(self)

    def __str__(self) -> str:
        return resolve_class_name(self)


def resolve_class_name(block: Block) -> str:
    """Compute the class attribute value for *block*."""
    return resolve(block.tokens, block.class_name_map, block.strict)


def create(
    base: Any = (),
    class_name_map: Mapping[str, Any] | None = None,
    strict: bool = True,
    glue: GlueSet | Mapping[str, Any] | None = None,
) -> Block:
    """Create a block builder from one or more block class names.

    Args:
        base: Block name(s): a string, a sequence, or a ``{name: enabled}`` map.
        class_name_map: Optional CSS-module map from authored to output names.
        strict: When a map is given, drop names the map does not contain.
        glue: A :class:`GlueSet` or a partial mapping of separators.
    """
    return Block(
        base_tokens=normalize(base),
        class_name_map=class_name_map,
        strict=bool(strict),
        glue=GlueSet.from_partial(glue),
    )


def factory(
    class_name_map: Mapping[str, Any] | None = None,
    strict: bool = True,
    glue: GlueSet | Mapping[str, Any] | None = None,
) -> Callable[..., Block]:
    """Bind a class-name map and options once, e.g. per imported CSS module.

    The returned callable takes the block name(s) and returns a :class:`Block`.
    """
    glue_set = GlueSet.from_partial(glue)

    def make(base: Any = ()) -> Block:
        return create(base, class_name_map, strict, glue_set)

    return make
