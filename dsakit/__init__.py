"""Classic data-structure and algorithm routines, plus an interactive array editor."""

__version__ = "0.1.0"