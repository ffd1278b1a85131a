from .css import inject_theme

__all__ = ["inject_theme"]
