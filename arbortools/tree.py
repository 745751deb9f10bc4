"""Binary tree nodes with structural queries and traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator


class Node:
    """A node of a binary tree holding an integer value."""

    def __init__(self, value: int, parent: Node | None = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Node | None = None
        self.right: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; an existing left child moves below it."""
        new = Node(value, self)
        if self.left is not None:
            new.left = self.left
            self.left.parent = new
        self.left = new
        return new

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; an existing right child moves below it."""
        new = Node(value, self)
        if self.right is not None:
            new.right = self.right
            self.right.parent = new
        self.right = new
        return new

    def detach(self) -> Node:
        """Remove this subtree from its parent and return it."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            elif parent.right is self:
                parent.right = None
        self.parent = None
        return self

    def is_leaf(self) -> bool:
        """True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """True if the node has no parent."""
        return self.parent is None

    def children(self) -> Iterator[Node]:
        """Yield the existing children, left first."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def _nodes(self) -> Iterator[Node]:
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def preorder(self) -> Iterator[int]:
        """Yield values in pre-order (node, left, right)."""
        for node in self._nodes():
            yield node.value

    def inorder(self) -> Iterator[int]:
        """Yield values in in-order (left, node, right)."""
        stack: list[Node] = []
        node: Node | None = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def postorder(self) -> Iterator[int]:
        """Yield values in post-order (left, right, node)."""
        stack: list[tuple[Node, bool]] = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                yield node.value
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    def levelorder(self) -> Iterator[int]:
        """Yield values level by level, left to right."""
        queue = deque([self])
        while queue:
            node = queue.popleft()
            yield node.value
            queue.extend(node.children())

    def _level_count(self) -> int:
        levels = 0
        level = [self]
        while level:
            levels += 1
            level = [child for node in level for child in node.children()]
        return levels

    def height(self) -> int:
        """Number of edges on the longest downward path to a leaf."""
        return self._level_count() - 1

    def depth(self) -> int:
        """Number of edges between this node and the root."""
        count = 0
        node = self.parent
        while node is not None:
            count += 1
            node = node.parent
        return count

    def size(self) -> int:
        """Number of nodes in this subtree."""
        return sum(1 for _ in self._nodes())

    def leaves(self) -> int:
        """Number of leaves in this subtree."""
        return sum(1 for node in self._nodes() if node.is_leaf())

    def internal_nodes(self) -> int:
        """Number of nodes in this subtree with at least one child."""
        return sum(1 for node in self._nodes() if not node.is_leaf())

    def balance(self) -> int:
        """Left subtree height minus right subtree height, counted in levels."""
        left = self.left._level_count() if self.left is not None else 0
        right = self.right._level_count() if self.right is not None else 0
        return left - right