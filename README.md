# arbortools

A small binary tree toolkit with no dependencies. It has:

- linked integer nodes with traversals and measurements
- shape checks, family lookups and rotations
- a plain-text renderer
- binary search trees
- AVL trees

## Building trees by hand

`arbortools.tree.Node` holds an integer `value` and links named `parent`, `left` and `right`.

```python
from arbortools.tree import Node

root = Node(98, None)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)

list(root.preorder())    # [98, 12, 54, 402]
list(root.inorder())     # [12, 54, 98, 402]
list(root.postorder())   # [54, 12, 402, 98]
list(root.levelorder())  # [98, 12, 402, 54]
```

Insertion behaviour:

- `insert_left` and `insert_right` always add a new node.
- If that side already has a child, the old child moves down and becomes the new node's child on the same side.

The traversal methods are generators that yield values.

### Measurements

Each node offers the following:

| Method | Returns |
| --- | --- |
| `height()` | Edges on the longest path down to a leaf. |
| `depth()` | Edges up to the root. |
| `size()` | Number of nodes in the subtree. |
| `leaves()` | Number of leaf nodes in the subtree. |
| `internal_nodes()` | Nodes in the subtree with at least one child. |
| `balance()` | Height of the left subtree minus height of the right, counted in levels. |
| `is_leaf()`, `is_root()` | Whether the node is a leaf, or a root. |
| `children()` | Yields the existing children, left first. |
| `detach()` | Unlinks the subtree from its parent and returns it. |

## Shape and relationships

```python
from arbortools.shape import (
    is_full, is_perfect, is_complete,
    sibling, uncle, lowest_common_ancestor,
    rotate_left, rotate_right,
)

is_complete(root)
new_root = rotate_right(root)
```

Shape checks:

- `is_full`, `is_perfect` and `is_complete` return `False` for `None`.

Relationship lookups:

- `sibling`, `uncle` and `lowest_common_ancestor` return `None` when there is no such node.
- For `lowest_common_ancestor`, a node counts as its own ancestor.

Rotations:

- `rotate_left` and `rotate_right` relink parent pointers and return the new subtree root.
- They also update the link from the old parent.
- `rotate_left` raises `ValueError` if the node has no right child, and `rotate_right` if it has no left child.

## Printing

```python
from arbortools.printing import render, print_tree

print(render(root))
print_tree(root)                 # to standard output
print_tree(root, file=some_file) # to any text stream
```

How the drawing works:

- Each value is drawn as a zero-padded `(nnn)` box.
- Branches made of `.` and `-` join each node to its children.
- There is one line per level, and trailing spaces are removed.

`render(None)` returns an empty string, and `print_tree(None)` writes nothing.

## Search trees

```python
from arbortools.bst import BinarySearchTree, is_bst
from arbortools.avl import AVLTree, is_avl

bst = BinarySearchTree.from_iterable([79, 47, 68, 87, 84, 91, 21, 32, 34])
68 in bst          # True
bst.search(68)     # the Node holding 68, or None
bst.remove(47)     # returns the new root; KeyError if the value is absent
list(bst)          # values in ascending order
len(bst)

avl = AVLTree.from_iterable([98, 402, 12, 46, 128, 256, 512, 50])
avl.insert(60)
is_avl(avl.root)   # True
```

### Inserting

- `insert` returns the new node.
- It returns `None` if the value is already present, so duplicates are ignored as in a set.

### Removing

- When a node with two children is removed, it takes the value of its in-order successor.
- The successor node is unlinked instead.

### Validity checks

- `is_bst` requires strictly smaller values on the left and strictly larger values on the right.
- `is_avl` also requires every node's balance to be within one.
- Both return `False` for an empty tree.

## What it does not do

- `AVLTree` rebalances only on insertion. `remove` is inherited from `BinarySearchTree` and leaves the tree unbalanced afterwards.
- There are no heaps, and no way to build a balanced tree directly from a sorted list.
- There is no command-line tool. The package is a library only.

## Tests

The test suite uses pytest, which the `test` extra installs.