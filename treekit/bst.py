"""An unbalanced binary search tree of integers that allows duplicates."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional, TextIO


class EmptyTreeError(ValueError):
    """Raised when an operation needs at least one node."""


@dataclass
class BSTNode:
    """A tree node holding one value."""

    value: Any
    left: Optional[BSTNode] = None
    right: Optional[BSTNode] = None


class BinarySearchTree:
    """A binary search tree; equal values go to the left subtree."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Optional[BSTNode] = None
        self.extend(values)

    def insert(self, value: Any) -> BSTNode:
        """Insert a value and return its new node."""
        new = BSTNode(value)
        if self.root is None:
            self.root = new
            return new
        node = self.root
        while True:
            if value <= node.value:
                if node.left is None:
                    node.left = new
                    return new
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return new
                node = node.right

    def extend(self, values: Iterable[Any]) -> None:
        """Insert every value in order."""
        for value in values:
            self.insert(value)

    def inorder(self) -> Iterator[Any]:
        """Yield values in ascending order."""
        stack: list[BSTNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def preorder(self) -> Iterator[Any]:
        """Yield each value before those of its subtrees."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def postorder(self) -> Iterator[Any]:
        """Yield each value after those of its subtrees."""
        result = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        yield from reversed(result)

    def search(self, key: Any) -> Optional[BSTNode]:
        """Return the first node holding key, or None."""
        node = self.root
        while node is not None:
            if node.value == key:
                return node
            node = node.left if key < node.value else node.right
        return None

    def __contains__(self, key: Any) -> bool:
        return self.search(key) is not None

    def minimum(self) -> Any:
        """Return the smallest value; raise EmptyTreeError when empty."""
        if self.root is None:
            raise EmptyTreeError("tree is empty")
        node = self.root
        while node.left is not None:
            node = node.left
        return node.value

    def height(self) -> int:
        """Number of levels: 0 when empty, 1 for a single node."""
        levels = 0
        level = [self.root] if self.root is not None else []
        while level:
            levels += 1
            level = [c for n in level for c in (n.left, n.right) if c is not None]
        return levels


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    token = next(tokens, None)
    if token is None:
        raise EOFError
    return int(token)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive binary search tree menu on standard input."""
    argparse.ArgumentParser(description="Interactive binary search tree.").parse_args(argv)
    tree = BinarySearchTree()
    tokens = _tokens(sys.stdin)
    try:
        while True:
            print(
                "\n1. Create\n2. Insert\n3. Inorder\n4. Preorder\n5. Postorder"
                "\n6. Search\n7. Minimum\n8. Height\n\nPress 0 to Exit"
            )
            print("=============================", end="")
            print("\n\nEnter Your Choice:", end="")
            try:
                choice = _read_int(tokens)
            except ValueError:
                print("\nInvalid number")
                continue
            try:
                if choice == 0:
                    return 0
                if choice == 1:
                    print("Enter Data:", end="")
                    while True:
                        tree.insert(_read_int(tokens))
                        print("Want to Continue:", end="")
                        if _read_int(tokens) != 1:
                            break
                elif choice == 2:
                    print("Enter Data:", end="")
                    tree.insert(_read_int(tokens))
                elif choice == 3:
                    print("Inorder Traversal is")
                    print("".join(f" {v}" for v in tree.inorder()), end="")
                elif choice == 4:
                    print("Preorder Traversal is")
                    print("".join(f"  {v}" for v in tree.preorder()), end="")
                elif choice == 5:
                    print("Postorder Traversal is")
                    print("".join(f" {v}" for v in tree.postorder()), end="")
                elif choice == 6:
                    print("\n Enter key:", end="")
                    key = _read_int(tokens)
                    print("found" if key in tree else "not found", end="")
                elif choice == 7:
                    try:
                        print(f"Minimum No. is:{tree.minimum()}", end="")
                    except EmptyTreeError:
                        print("Tree is empty", end="")
                elif choice == 8:
                    print(f"Height of Tree: {tree.height()}", end="")
            except ValueError:
                print("\nInvalid number")
    except EOFError:
        print()
        return 0


if __name__ == "__main__":
    sys.exit(main())