"""AVL trees: self-balancing binary search trees."""

from __future__ import annotations

from arbortools.bst import BinarySearchTree, is_bst
from arbortools.shape import rotate_left, rotate_right
from arbortools.tree import Node


def is_avl(tree: Node | None) -> bool:
    """True if the tree is a BST whose subtree heights differ by at most one
    at every node. An empty tree is not an AVL tree."""
    if tree is None or not is_bst(tree):
        return False
    return all(abs(node.balance()) <= 1 for node in tree._nodes())


class AVLTree(BinarySearchTree):
    """A binary search tree that rebalances itself after each insertion.

    Removal is inherited unchanged and does not rebalance.
    """

    def insert(self, value: int) -> Node | None:
        """Insert a value, rebalance, and return its node (None if present)."""
        new = super().insert(value)
        if new is None:
            return None
        node = new.parent
        while node is not None:
            factor = node.balance()
            subtree = node
            if factor > 1 and node.left is not None:
                if node.left.value < value:
                    rotate_left(node.left)
                subtree = rotate_right(node)
            elif factor < -1 and node.right is not None:
                if node.right.value > value:
                    rotate_right(node.right)
                subtree = rotate_left(node)
            if subtree.parent is None:
                self.root = subtree
            node = subtree.parent
        return new