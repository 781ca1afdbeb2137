"""A small interactive shell, a pipex-style pipeline runner and their helpers."""

__version__ = "0.1.0"
__all__ = ["__version__"]