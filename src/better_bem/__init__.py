"""better_bem -- BEM class-name builder with CSS-module map support.

Example:
    >>> from better_bem import create
    >>> create("card").element("title").modifier({"size": "lg"}).class_name
    'card__title card__title--size-lg'
"""

from better_bem.builder import Block, create, factory, resolve_class_name
from better_bem.model import DEFAULT_GLUE, GlueSet
from better_bem.resolution import filter_valid, is_valid_class_name, resolve
from better_bem.tokens import combine, dedupe, expand_modifiers, normalize

__version__ = "0.1.0"

__all__ = [
    # builder
    "Block",
    "create",
    "factory",
    "resolve_class_name",
    # model
    "GlueSet",
    "DEFAULT_GLUE",
    # tokens
    "normalize",
    "dedupe",
    "combine",
    "expand_modifiers",
    # resolution
    "resolve",
    "filter_valid",
    "is_valid_class_name",
    "__version__",
]
