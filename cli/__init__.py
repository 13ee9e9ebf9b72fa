from .commands import find, show

__all__ = ["find", "show"]
