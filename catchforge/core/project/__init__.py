from .layout import ProjectLayout

__all__ = ["ProjectLayout"]
