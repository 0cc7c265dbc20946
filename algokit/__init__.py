"""Linked lists, a circular character queue, binary search trees, a chained hash table, T9 contact search and single-linkage clustering."""

__version__ = "0.1.0"