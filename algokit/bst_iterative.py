"""Binary search tree whose operations are written with loops and explicit stacks."""

from __future__ import annotations

from typing import Any

from algokit.bst_recursive import Node


class IterativeBST:
    """Binary search tree: smaller keys to the left, larger to the right."""

    def __init__(self) -> None:
        self._root: Node | None = None

    @property
    def root(self) -> Node | None:
        """The root node, or None for an empty tree."""
        return self._root

    def __len__(self) -> int:
        return len(self.preorder())

    def __contains__(self, key: object) -> bool:
        return self._find(key) is not None

    def _find(self, key: Any) -> Node | None:
        node = self._root
        while node is not None:
            if key == node.key:
                return node
            node = node.left if key < node.key else node.right
        return None

    def search(self, key: Any) -> Any:
        """Return the value stored under key, or None if there is none."""
        node = self._find(key)
        return None if node is None else node.value

    def insert(self, key: Any, value: Any) -> None:
        """Store value under key, replacing the value of an existing key."""
        if self._root is None:
            self._root = Node(key, value)
            return
        node = self._root
        while True:
            if key == node.key:
                node.value = value
                return
            if key < node.key:
                if node.left is None:
                    node.left = Node(key, value)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = Node(key, value)
                    return
                node = node.right

    @staticmethod
    def _replace_by_rightmost(target: Node) -> None:
        """Move the rightmost node of target's left subtree into target and unlink it."""
        parent = target
        node = target.left
        assert node is not None
        while node.right is not None:
            parent = node
            node = node.right
        target.key = node.key
        target.value = node.value
        if parent is target:
            parent.left = node.left
        else:
            parent.right = node.left

    def delete(self, key: Any) -> None:
        """Remove key; a node with two subtrees takes the rightmost of its left subtree."""
        parent: Node | None = None
        node = self._root
        while node is not None and key != node.key:
            parent = node
            node = node.left if key < node.key else node.right
        if node is None:
            return
        if node.left is not None and node.right is not None:
            self._replace_by_rightmost(node)
            return
        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def dispose(self) -> None:
        """Remove every node."""
        self._root = None

    def preorder(self) -> list[tuple[Any, Any]]:
        """(key, value) pairs in preorder."""
        items: list[tuple[Any, Any]] = []
        to_visit: list[Node] = []

        def leftmost(node: Node | None) -> None:
            while node is not None:
                items.append((node.key, node.value))
                to_visit.append(node)
                node = node.left

        leftmost(self._root)
        while to_visit:
            leftmost(to_visit.pop().right)
        return items

    def inorder(self) -> list[tuple[Any, Any]]:
        """(key, value) pairs in inorder, i.e. sorted by key."""
        items: list[tuple[Any, Any]] = []
        to_visit: list[Node] = []

        def leftmost(node: Node | None) -> None:
            while node is not None:
                to_visit.append(node)
                node = node.left

        leftmost(self._root)
        while to_visit:
            node = to_visit.pop()
            items.append((node.key, node.value))
            leftmost(node.right)
        return items

    def postorder(self) -> list[tuple[Any, Any]]:
        """(key, value) pairs in postorder."""
        items: list[tuple[Any, Any]] = []
        to_visit: list[tuple[Node, bool]] = []

        def leftmost(node: Node | None) -> None:
            while node is not None:
                to_visit.append((node, True))
                node = node.left

        leftmost(self._root)
        while to_visit:
            node, first_visit = to_visit.pop()
            if first_visit:
                to_visit.append((node, False))
                leftmost(node.right)
            else:
                items.append((node.key, node.value))
        return items