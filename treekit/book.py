"""A book outline tree: a book holds chapters, sections and subsections."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Iterator, Optional, TextIO


class BookError(Exception):
    """Raised when an outline operation cannot be carried out."""


class Level(IntEnum):
    """Depth of a node in the book outline."""

    BOOK = 0
    CHAPTER = 1
    SECTION = 2
    SUBSECTION = 3


_INDENT = {
    Level.BOOK: " ",
    Level.CHAPTER: "\t" * 2,
    Level.SECTION: "\t" * 4,
    Level.SUBSECTION: "\t" * 6,
}


@dataclass
class BookNode:
    """A named node with an ordered list of child nodes."""

    name: str
    children: list[BookNode] = field(default_factory=list)

    def find(self, name: str) -> Optional[BookNode]:
        """Return the first child with the given name, or None."""
        return next((child for child in self.children if child.name == name), None)


class Book:
    """A single book with chapters, sections and subsections."""

    def __init__(self) -> None:
        self.root: Optional[BookNode] = None

    def create(self, name: str) -> BookNode:
        """Create the book node; raise BookError if a book already exists."""
        if self.root is not None:
            raise BookError("book exist")
        self.root = BookNode(name)
        return self.root

    def _book(self) -> BookNode:
        if self.root is None:
            raise BookError("there is no book")
        return self.root

    def _chapter(self, chapter: str) -> BookNode:
        book = self._book()
        if not book.children:
            raise BookError("there are no chapters in book")
        node = book.find(chapter)
        if node is None:
            raise BookError(f"no chapter named {chapter!r}")
        return node

    def _section(self, chapter: str, section: str) -> BookNode:
        node = self._chapter(chapter)
        if not node.children:
            raise BookError("there are no sections")
        found = node.find(section)
        if found is None:
            raise BookError(f"no section named {section!r} in chapter {chapter!r}")
        return found

    def add_chapters(self, names: Iterable[str]) -> None:
        """Append chapters to the book."""
        self._book().children.extend(BookNode(name) for name in names)

    def add_sections(self, chapter: str, names: Iterable[str]) -> None:
        """Append sections to the first chapter with the given name."""
        self._chapter(chapter).children.extend(BookNode(name) for name in names)

    def add_subsections(self, chapter: str, section: str, names: Iterable[str]) -> None:
        """Append subsections to a section of a chapter."""
        self._section(chapter, section).children.extend(BookNode(name) for name in names)

    def walk(self) -> Iterator[tuple[Level, str]]:
        """Yield (level, name) for every node, parents before children."""
        if self.root is None:
            return
        stack: list[tuple[Level, BookNode]] = [(Level.BOOK, self.root)]
        while stack:
            level, node = stack.pop()
            yield level, node.name
            if level < Level.SUBSECTION:
                stack.extend((Level(level + 1), child) for child in reversed(node.children))

    def render(self) -> str:
        """Return the indented outline; raise BookError if there is no book."""
        if self.root is None:
            raise BookError("book not exist")
        return "\n".join(
            f"{_INDENT[level]}NAME OF {level.name}:  {name}" for level, name in self.walk()
        )


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read(tokens: Iterator[str]) -> str:
    token = next(tokens, None)
    if token is None:
        raise EOFError
    return token


def _read_names(tokens: Iterator[str], count: int) -> list[str]:
    names = []
    for _ in range(count):
        print("\n enter the name", end="")
        names.append(_read(tokens))
    return names


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive book outline menu on standard input."""
    argparse.ArgumentParser(description="Interactive book outline tree.").parse_args(argv)
    book = Book()
    tokens = _tokens(sys.stdin)
    try:
        while True:
            print("\n\n enter your choice", end="")
            print("\n 1.insert book", end="")
            print("\n 2.insert chapter", end="")
            print("\n 3.insert section", end="")
            print("\n 4.insert subsection", end="")
            print("\n 5.display book", end="")
            print("\n 6.exit", end="")
            try:
                choice = int(_read(tokens))
                if choice == 1:
                    if book.root is not None:
                        print("\n book exist", end="")
                        continue
                    print("\n enter the name", end="")
                    book.create(_read(tokens))
                elif choice == 2:
                    book._book()
                    print("\n how many chapters you want to insert", end="")
                    count = int(_read(tokens))
                    book.add_chapters(_read_names(tokens, count))
                elif choice == 3:
                    book._book()
                    print(
                        "\n Enter the name of chapter on which  you want to enter the section",
                        end="",
                    )
                    chapter = _read(tokens)
                    book._chapter(chapter)
                    print("\n how many sections you want to enter", end="")
                    count = int(_read(tokens))
                    book.add_sections(chapter, _read_names(tokens, count))
                elif choice == 4:
                    book._book()
                    print(
                        "\n Enter the name of chapter on which  you want to enter the section",
                        end="",
                    )
                    chapter = _read(tokens)
                    book._chapter(chapter)
                    print(
                        "\n enter name of section in which you want to enter the sub section",
                        end="",
                    )
                    section = _read(tokens)
                    book._section(chapter, section)
                    print("\n how many subsections you want to enter", end="")
                    count = int(_read(tokens))
                    book.add_subsections(chapter, section, _read_names(tokens, count))
                elif choice == 5:
                    print("\n" + book.render(), end="")
                elif choice == 6:
                    print()
                    return 0
            except BookError as exc:
                print(f"\n {exc}", end="")
            except ValueError:
                print("\nInvalid number", end="")
    except EOFError:
        print()
        return 0


if __name__ == "__main__":
    sys.exit(main())