from .view import ConfigView

__all__ = ["ConfigView"]
