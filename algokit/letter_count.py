"""Count letters, spaces and other characters of a text into a search tree."""

from __future__ import annotations

from algokit.bst_recursive import RecursiveBST

OTHER_KEY = "_"


def _key_for(char: str) -> str:
    lower = char.lower()
    if "a" <= lower <= "z" and len(lower) == 1:
        return lower
    if char == " ":
        return " "
    return OTHER_KEY


def letter_count(text: str) -> RecursiveBST:
    """Return a tree of occurrence counts.

    Letters a-z are counted case-insensitively under their lower-case form,
    spaces under ' ' and every other character under '_'.
    """
    tree = RecursiveBST()
    for char in text:
        key = _key_for(char)
        tree.insert(key, (tree.search(key) or 0) + 1)
    return tree