"""A small modal text editor for the terminal, built on curses."""

__version__ = "0.1.0"
__all__ = ["__version__"]