"""catchforge - scaffolding for Seam Catch exception handler containers."""

__version__ = "0.1.0"

__all__ = ["__version__"]
