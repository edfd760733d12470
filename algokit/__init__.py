"""Classic algorithms on numbers, arrays, strings, matrices and binary trees."""

__version__ = "0.1.0"