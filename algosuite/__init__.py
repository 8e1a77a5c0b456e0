"""Classic algorithm routines for lists, linked lists, trees, strings, grids, numbers and graphs."""

__version__ = "0.1.0"

__all__ = [
    "nodes",
    "linked_lists",
    "trees",
    "arrays",
    "inplace",
    "strings",
    "grids",
    "numeric",
    "graphs",
]