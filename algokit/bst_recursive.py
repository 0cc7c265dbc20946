"""Binary search tree whose operations are written recursively."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """A tree node holding a key, its value and two subtrees."""

    key: Any
    value: Any
    left: Node | None = None
    right: Node | None = None


def _find(node: Node | None, key: Any) -> Node | None:
    if node is None:
        return None
    if key == node.key:
        return node
    if key < node.key:
        return _find(node.left, key)
    return _find(node.right, key)


def _insert(node: Node | None, key: Any, value: Any) -> Node:
    if node is None:
        return Node(key, value)
    if key == node.key:
        node.value = value
    elif key < node.key:
        node.left = _insert(node.left, key, value)
    else:
        node.right = _insert(node.right, key, value)
    return node


def _replace_by_rightmost(target: Node, node: Node) -> Node | None:
    """Move the rightmost node's key and value into target; return the new subtree."""
    if node.right is None:
        target.key = node.key
        target.value = node.value
        return node.left
    node.right = _replace_by_rightmost(target, node.right)
    return node


def _delete(node: Node | None, key: Any) -> Node | None:
    if node is None:
        return None
    if key == node.key:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        node.left = _replace_by_rightmost(node, node.left)
    elif key < node.key:
        node.left = _delete(node.left, key)
    else:
        node.right = _delete(node.right, key)
    return node


def _preorder(node: Node | None) -> Iterator[Node]:
    if node is None:
        return
    yield node
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def _inorder(node: Node | None) -> Iterator[Node]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node
    yield from _inorder(node.right)


def _postorder(node: Node | None) -> Iterator[Node]:
    if node is None:
        return
    yield from _postorder(node.left)
    yield from _postorder(node.right)
    yield node


class RecursiveBST:
    """Binary search tree: smaller keys to the left, larger to the right."""

    def __init__(self) -> None:
        self._root: Node | None = None

    @property
    def root(self) -> Node | None:
        """The root node, or None for an empty tree."""
        return self._root

    def __len__(self) -> int:
        return sum(1 for _ in _inorder(self._root))

    def __contains__(self, key: object) -> bool:
        return _find(self._root, key) is not None

    def search(self, key: Any) -> Any:
        """Return the value stored under key, or None if there is none."""
        node = _find(self._root, key)
        return None if node is None else node.value

    def insert(self, key: Any, value: Any) -> None:
        """Store value under key, replacing the value of an existing key."""
        self._root = _insert(self._root, key, value)

    def delete(self, key: Any) -> None:
        """Remove key; a node with two subtrees takes the rightmost of its left subtree."""
        self._root = _delete(self._root, key)

    def dispose(self) -> None:
        """Remove every node."""
        self._root = None

    def preorder(self) -> list[tuple[Any, Any]]:
        """(key, value) pairs in preorder."""
        return [(node.key, node.value) for node in _preorder(self._root)]

    def inorder(self) -> list[tuple[Any, Any]]:
        """(key, value) pairs in inorder, i.e. sorted by key."""
        return [(node.key, node.value) for node in _inorder(self._root)]

    def postorder(self) -> list[tuple[Any, Any]]:
        """(key, value) pairs in postorder."""
        return [(node.key, node.value) for node in _postorder(self._root)]