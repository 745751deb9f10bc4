"""Binary trees, binary search trees and AVL trees with traversals, shape checks, rotations and text rendering."""

__version__ = "0.1.0"
__all__ = ["avl", "bst", "printing", "shape", "tree"]