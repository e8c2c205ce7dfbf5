"""Classic algorithm exercises on strings, arrays, matrices, searching, dynamic programming, lists and trees."""

__version__ = "0.1.0"
__all__ = ["arrays", "dynamic", "linked_list", "matrix", "search", "strings", "tree"]