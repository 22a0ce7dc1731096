from better_bem.tokens.normalize import dedupe, normalize
from better_bem.tokens.combine import combine, expand_modifiers

__all__ = ["normalize", "dedupe", "combine", "expand_modifiers"]
