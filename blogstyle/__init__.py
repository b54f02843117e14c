"""blogstyle: design tokens and stylesheet for a static blog."""

__all__ = ["__version__"]
__version__ = "0.1.0"
