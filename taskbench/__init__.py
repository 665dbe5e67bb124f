"""Small data-processing exercises with sample data and a console task menu."""

__version__ = "0.1.0"