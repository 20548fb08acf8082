from .merge import DEFAULT_MAX_DEPTH, deep_merge
from .resolver import DEFAULT_SECTION_KEY, KEY_SEPARATOR, Resolver

__all__ = ["DEFAULT_MAX_DEPTH", "DEFAULT_SECTION_KEY", "KEY_SEPARATOR", "Resolver", "deep_merge"]
