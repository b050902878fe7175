"""Solutions to classic problems on arrays, strings, linked lists and binary trees, with worked examples."""

__version__ = "0.1.0"
__all__ = ["arrays", "demo", "linked_list", "text", "trees"]