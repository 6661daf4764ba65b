"""A small SQL-like database kept in plain text files, with an interactive shell."""

__version__ = "0.1.0"
__all__ = ["__version__"]