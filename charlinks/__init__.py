"""Linked lists and binary trees of characters."""

__version__ = "0.1.0"

__all__ = ["bintree", "dlist", "dliststats", "parenttree", "slist", "treeops"]