"""Shape queries, family lookups and rotations for binary trees."""

from __future__ import annotations

from collections import deque

from arbortools.tree import Node


def is_full(tree: Node | None) -> bool:
    """True if every node has either zero or two children.

    An empty tree is not full.
    """
    if tree is None:
        return False
    stack = [tree]
    while stack:
        node = stack.pop()
        if (node.left is None) != (node.right is None):
            return False
        stack.extend(node.children())
    return True


def _first_leaf_depth(tree: Node) -> int:
    """Depth below ``tree`` of the leaf reached by preferring left children."""
    depth = 0
    node = tree
    while not node.is_leaf():
        node = node.left if node.left is not None else node.right
        depth += 1
    return depth


def is_perfect(tree: Node | None) -> bool:
    """True if every inner node has two children and all leaves share a level.

    An empty tree is not perfect.
    """
    if tree is None:
        return False
    leaf_depth = _first_leaf_depth(tree)
    stack = [(tree, 0)]
    while stack:
        node, level = stack.pop()
        if node.is_leaf():
            if level != leaf_depth:
                return False
            continue
        if node.left is None or node.right is None:
            return False
        stack.append((node.right, level + 1))
        stack.append((node.left, level + 1))
    return True


def is_complete(tree: Node | None) -> bool:
    """True if every level is filled, except possibly the last from the left.

    An empty tree is not complete.
    """
    if tree is None:
        return False
    queue = deque([tree])
    gap_seen = False
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is None:
                gap_seen = True
            elif gap_seen:
                return False
            else:
                queue.append(child)
    return True


def sibling(node: Node | None) -> Node | None:
    """The other child of the node's parent, or None."""
    if node is None or node.parent is None:
        return None
    parent = node.parent
    return parent.right if parent.left is node else parent.left


def uncle(node: Node | None) -> Node | None:
    """The sibling of the node's parent, or None."""
    if node is None:
        return None
    return sibling(node.parent)


def _lineage(node: Node) -> list[Node]:
    chain = []
    current: Node | None = node
    while current is not None:
        chain.append(current)
        current = current.parent
    return chain


def lowest_common_ancestor(first: Node | None, second: Node | None) -> Node | None:
    """The deepest node that is an ancestor of both nodes (a node counts as
    its own ancestor), or None if they share none."""
    if first is None or second is None:
        return None
    ancestors = {id(node) for node in _lineage(first)}
    for node in _lineage(second):
        if id(node) in ancestors:
            return node
    return None


def _replace_in_parent(parent: Node | None, old: Node, new: Node) -> None:
    new.parent = parent
    if parent is not None:
        if parent.left is old:
            parent.left = new
        else:
            parent.right = new


def rotate_left(tree: Node) -> Node:
    """Left-rotate the subtree at ``tree`` and return its new root.

    Raises ValueError if ``tree`` is None or has no right child.
    """
    if tree is None or tree.right is None:
        raise ValueError("left rotation needs a node with a right child")
    pivot = tree.right
    moved = pivot.left
    parent = tree.parent
    pivot.left = tree
    tree.right = moved
    if moved is not None:
        moved.parent = tree
    tree.parent = pivot
    _replace_in_parent(parent, tree, pivot)
    return pivot


def rotate_right(tree: Node) -> Node:
    """Right-rotate the subtree at ``tree`` and return its new root.

    Raises ValueError if ``tree`` is None or has no left child.
    """
    if tree is None or tree.left is None:
        raise ValueError("right rotation needs a node with a left child")
    pivot = tree.left
    moved = pivot.right
    parent = tree.parent
    pivot.right = tree
    tree.left = moved
    if moved is not None:
        moved.parent = tree
    tree.parent = pivot
    _replace_in_parent(parent, tree, pivot)
    return pivot