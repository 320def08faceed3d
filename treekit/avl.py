"""A self-balancing AVL tree used as a word/meaning dictionary."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Any, Iterator, Optional, TextIO


class DuplicateWordError(KeyError):
    """Raised when inserting a word that is already in the tree."""


class WordNotFoundError(KeyError):
    """Raised when deleting a word that is not in the tree."""


@dataclass
class AVLNode:
    """A tree node holding a word, its meaning and the subtree height."""

    word: Any
    meaning: str
    left: Optional[AVLNode] = None
    right: Optional[AVLNode] = None
    height: int = 0


def _height(node: Optional[AVLNode]) -> int:
    return -1 if node is None else node.height


def _balance(node: Optional[AVLNode]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _update(node: AVLNode) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_right(node: AVLNode) -> AVLNode:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _update(node)
    _update(pivot)
    return pivot


def _rotate_left(node: AVLNode) -> AVLNode:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _update(node)
    _update(pivot)
    return pivot


def _rebalance(node: AVLNode) -> AVLNode:
    _update(node)
    if _balance(node) == 2:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)  # type: ignore[arg-type]
        node = _rotate_right(node)
    if _balance(node) == -2:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)  # type: ignore[arg-type]
        node = _rotate_left(node)
    return node


def _insert(node: Optional[AVLNode], word: Any, meaning: str) -> AVLNode:
    if node is None:
        return AVLNode(word, meaning)
    if word < node.word:
        node.left = _insert(node.left, word, meaning)
    elif word > node.word:
        node.right = _insert(node.right, word, meaning)
    else:
        raise DuplicateWordError(word)
    return _rebalance(node)


def _delete(node: Optional[AVLNode], word: Any) -> Optional[AVLNode]:
    if node is None:
        raise WordNotFoundError(word)
    if word > node.word:
        node.right = _delete(node.right, word)
    elif word < node.word:
        node.left = _delete(node.left, word)
    elif node.left is None or node.right is None:
        return node.left if node.left is not None else node.right
    else:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.word, node.meaning = successor.word, successor.meaning
        node.right = _delete(node.right, successor.word)
    return _rebalance(node)


class AVLTree:
    """An ordered word -> meaning mapping kept height-balanced."""

    def __init__(self) -> None:
        self.root: Optional[AVLNode] = None
        self._size = 0

    def insert(self, word: Any, meaning: str) -> None:
        """Add a word; raise DuplicateWordError if it is already present."""
        self.root = _insert(self.root, word, meaning)
        self._size += 1

    def delete(self, word: Any) -> None:
        """Remove a word; raise WordNotFoundError if it is absent."""
        self.root = _delete(self.root, word)
        self._size -= 1

    def in_order(self) -> Iterator[tuple[Any, str]]:
        """Yield (word, meaning) pairs in ascending word order."""
        stack: list[AVLNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.word, node.meaning
            node = node.right

    def pre_order(self) -> Iterator[tuple[Any, str]]:
        """Yield (word, meaning) pairs with each node before its subtrees."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node.word, node.meaning
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def height(self) -> int:
        """Height of the tree: -1 when empty, 0 for a single node."""
        return _height(self.root)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: Any) -> bool:
        node = self.root
        while node is not None:
            if word == node.word:
                return True
            node = node.left if word < node.word else node.right
        return False


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> Optional[int]:
    token = next(tokens, None)
    if token is None:
        raise EOFError
    try:
        return int(token)
    except ValueError:
        print("\nInvalid number")
        return None


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive AVL dictionary menu on standard input."""
    argparse.ArgumentParser(description="Interactive AVL tree dictionary.").parse_args(argv)
    tree = AVLTree()
    tokens = _tokens(sys.stdin)
    print("\n--------------------------------------", end="")
    print("\n\tAVL TREE IMPLEMENTATION", end="")
    print("\n--------------------------------------", end="")
    try:
        while True:
            print("\n\t\tMENU", end="")
            print("\n1.Insert 2.Inorder 3.Delete 4.Exit", end="")
            print("\n--------------------------------", end="")
            print("\nEnter your choice: ", end="")
            choice = _read_int(tokens)
            if choice == 1:
                print("\nEnter Word: ", end="")
                word = _read_int(tokens)
                print("\nEnter Meaning: ", end="")
                meaning = next(tokens, None)
                if meaning is None:
                    raise EOFError
                if word is None:
                    continue
                try:
                    tree.insert(word, meaning)
                except DuplicateWordError:
                    print("\nRedundant AVLnode")
            elif choice == 2:
                print("\nInorder Traversal:\n\tWORD\tMEANING", end="")
                for word, meaning in tree.in_order():
                    print(f"\n\t{word}\t{meaning}", end="")
                print("\n\nPreorder Traversal:\n\tWORD\tMEANING", end="")
                for word, meaning in tree.pre_order():
                    print(f"\n\t{word}\t{meaning}", end="")
                print()
            elif choice == 3:
                print("\nEnter the word to be deleted : ", end="")
                word = _read_int(tokens)
                if word is None:
                    continue
                try:
                    tree.delete(word)
                except WordNotFoundError:
                    print("\nWord not present!")
                else:
                    print("\nWord deleted Successfully!")
            elif choice == 4:
                return 0
    except EOFError:
        print()
        return 0


if __name__ == "__main__":
    sys.exit(main())