"""Small tree structures: an AVL dictionary, a binary search tree and a book outline."""

__version__ = "0.1.0"
__all__ = ["avl", "bst", "book"]