"""better_bem model layer -- public type re-exports."""

from better_bem.model.glue import DEFAULT_GLUE, GlueSet
from better_bem.model.inputs import (
    ConditionalMap,
    Group,
    RawClassInput,
    Text,
    classify,
    flatten,
)

__all__ = [
    # glue
    "GlueSet",
    "DEFAULT_GLUE",
    # inputs
    "Text",
    "Group",
    "ConditionalMap",
    "RawClassInput",
    "classify",
    "flatten",
]
