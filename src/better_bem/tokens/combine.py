"""Combiner: cross-join token sequences into BEM element and modifier names."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from better_bem.tokens.normalize import dedupe, normalize

__all__ = ["combine", "expand_modifiers"]


def combine(base: Sequence[str], extra: Sequence[str], glue: str) -> tuple[str, ...]:
    """Join every *base* token with every *extra* token using *glue*.

    Output is base-major: ``[a, b] x [x, y]`` -> ``a_x a_y b_x b_y``.  An empty
    *base* returns *extra* unchanged; an empty *extra* returns nothing.  Glue
    is only placed between two non-empty parts.
    """
    if not base:
        return tuple(extra)
    return tuple(
        f"{b}{glue if b and e else ''}{e}"
        for b in base
        for e in extra
    )


def expand_modifiers(
    element_tokens: Sequence[str],
    modifier_input: Any,
    mod_glue: str,
    prop_glue: str,
) -> tuple[str, ...]:
    """Return *element_tokens* followed by each of them modified.

    Modifiers are normalized in key-value mode, so ``{"size": "lg"}`` becomes
    the modifier ``size{prop_glue}lg``.
    """
    if not element_tokens:
        return ()
    modifiers = normalize(modifier_input, key_value_mode=True, key_value_glue=prop_glue)
    return dedupe([*element_tokens, *combine(element_tokens, modifiers, mod_glue)])
