"""Classic algorithms and data structures: sorting, searching, strings, arrays, graphs."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "conversions",
    "graphs",
    "mathematics",
    "searching",
    "sorting",
    "strings",
    "structures",
]