from .finder import Parser, conforms, find_or_none, finds_or_none

__all__ = ["Parser", "conforms", "find_or_none", "finds_or_none"]
