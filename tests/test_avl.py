import random

import pytest

from arbortools.avl import AVLTree, is_avl
from arbortools.bst import BinarySearchTree
from arbortools.tree import Node


def _links_consistent(node):
    if node is None:
        return True
    for child in node.children():
        if child.parent is not node:
            return False
    return all(_links_consistent(child) for child in node.children())


def test_is_avl_empty_is_false():
    assert is_avl(None) is False


def test_is_avl_rejects_chain():
    tree = BinarySearchTree.from_iterable([1, 2, 3])
    assert is_avl(tree.root) is False


def test_is_avl_rejects_balanced_non_bst():
    root = Node(10)
    root.insert_left(20)
    root.insert_right(5)
    assert is_avl(root) is False


def test_is_avl_accepts_balanced_bst():
    tree = BinarySearchTree.from_iterable([10, 5, 15, 3])
    assert is_avl(tree.root) is True


@pytest.mark.parametrize(
    "order",
    [[1, 2, 3], [3, 2, 1], [3, 1, 2], [1, 3, 2]],
)
def test_single_and_double_rotations(order):
    tree = AVLTree.from_iterable(order)
    assert tree.root.value == 2
    assert tree.root.parent is None
    assert list(tree) == [1, 2, 3]
    assert is_avl(tree.root)
    assert _links_consistent(tree.root)


def test_insert_returns_new_node():
    tree = AVLTree()
    tree.insert(98)
    node = tree.insert(402)
    assert node.value == 402
    assert tree.search(402) is node


def test_insert_duplicate_returns_none():
    tree = AVLTree.from_iterable([98, 402, 12])
    assert tree.insert(12) is None
    assert len(tree) == 3


def test_sorted_inserts_stay_balanced():
    tree = AVLTree.from_iterable(range(100))
    assert list(tree) == list(range(100))
    assert is_avl(tree.root)
    assert _links_consistent(tree.root)


def test_array_with_repeats_builds_avl():
    values = [98, 402, 12, 46, 128, 256, 512, 50, 68, 89, 1, 12, 46]
    tree = AVLTree.from_iterable(values)
    assert list(tree) == sorted(set(values))
    assert is_avl(tree.root)
    assert _links_consistent(tree.root)


def test_random_inserts_keep_avl_property():
    rng = random.Random(42)
    tree = AVLTree()
    seen = set()
    for value in (rng.randrange(500) for _ in range(300)):
        tree.insert(value)
        seen.add(value)
        assert is_avl(tree.root)
    assert list(tree) == sorted(seen)
    assert tree.root.parent is None