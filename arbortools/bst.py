"""Binary search trees over integer nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from arbortools.tree import Node


def is_bst(tree: Node | None) -> bool:
    """True if every left descendant is smaller and every right one larger.

    Duplicate values are not allowed. An empty tree is not a BST.
    """
    if tree is None:
        return False
    stack: list[tuple[Node, int | None, int | None]] = [(tree, None, None)]
    while stack:
        node, low, high = stack.pop()
        if low is not None and node.value <= low:
            return False
        if high is not None and node.value >= high:
            return False
        if node.left is not None:
            stack.append((node.left, low, node.value))
        if node.right is not None:
            stack.append((node.right, node.value, high))
    return True


class BinarySearchTree:
    """A binary search tree holding distinct integers."""

    def __init__(self, root: Node | None = None) -> None:
        self.root = root

    @classmethod
    def from_iterable(cls, values: Iterable[int]) -> BinarySearchTree:
        """Build a tree by inserting values in order; repeats are skipped."""
        tree = cls()
        for value in values:
            tree.insert(value)
        return tree

    def insert(self, value: int) -> Node | None:
        """Insert a value and return its new node, or None if already present."""
        if self.root is None:
            self.root = Node(value)
            return self.root
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = Node(value, node)
                    return node.left
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = Node(value, node)
                    return node.right
                node = node.right
            else:
                return None

    def search(self, value: int) -> Node | None:
        """Return the node holding ``value``, or None."""
        node = self.root
        while node is not None:
            if node.value == value:
                return node
            node = node.left if value < node.value else node.right
        return None

    def _splice(self, node: Node, child: Node | None) -> None:
        parent = node.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        node.parent = node.left = node.right = None

    def remove(self, value: int) -> Node | None:
        """Remove ``value`` and return the new root.

        A node with two children takes the value of its in-order successor,
        which is then removed instead. Raises KeyError if the value is absent.
        """
        node = self.search(value)
        if node is None:
            raise KeyError(value)
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.value = successor.value
            node = successor
        self._splice(node, node.left if node.left is not None else node.right)
        return self.root

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.search(value) is not None

    def __iter__(self) -> Iterator[int]:
        if self.root is not None:
            yield from self.root.inorder()

    def __len__(self) -> int:
        return self.root.size() if self.root is not None else 0