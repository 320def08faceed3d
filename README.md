# treekit

Three small tree structures, each usable as a library and as an
interactive menu program:

- `treekit.avl`: a self-balancing AVL tree that maps words (any mutually
  comparable keys; the menu program uses integers) to meanings.
- `treekit.bst`: an unbalanced binary search tree that keeps duplicates
  (equal values go to the left).
- `treekit.book`: a book outline made of chapters, sections and
  subsections.

## Installation

```
pip install .
```

To run the tests, install with the `test` extra and run `pytest`.

## Library use

### AVL tree

```python
from treekit.avl import AVLTree, DuplicateWordError, WordNotFoundError

tree = AVLTree()
tree.insert(10, "ten")
tree.insert(20, "twenty")
tree.insert(30, "thirty")   # rebalances; 20 becomes the root

list(tree.in_order())       # [(10, 'ten'), (20, 'twenty'), (30, 'thirty')]
list(tree.pre_order())      # [(20, 'twenty'), (10, 'ten'), (30, 'thirty')]
tree.height()               # 1  (-1 for an empty tree, 0 for one node)
len(tree)                   # 3
20 in tree                  # True

tree.delete(20)
```

Inserting a word that is already present raises `DuplicateWordError`;
deleting a word that is absent raises `WordNotFoundError`. Both are
subclasses of `KeyError`. The nodes are `AVLNode` objects reachable
through `tree.root`.

### Binary search tree

```python
from treekit.bst import BinarySearchTree, EmptyTreeError

bst = BinarySearchTree([50, 30, 70, 20, 40])
bst.insert(60)              # returns the new BSTNode
bst.extend([80, 30])

list(bst.inorder())         # sorted values, duplicates included
list(bst.preorder())
list(bst.postorder())
bst.search(40)              # the BSTNode holding 40, or None
70 in bst                   # True
bst.minimum()               # 20
bst.height()                # number of levels; 0 for an empty tree
```

`minimum()` on an empty tree raises `EmptyTreeError` (a `ValueError`).

### Book outline

```python
from treekit.book import Book, BookError

book = Book()
book.create("Algorithms")
book.add_chapters(["Sorting", "Graphs"])
book.add_sections("Sorting", ["Quicksort", "Mergesort"])
book.add_subsections("Sorting", "Quicksort", ["Partitioning"])

print(book.render())
for level, name in book.walk():
    print(level.name, name)     # level is a treekit.book.Level
```

`render()` produces one line per node, indented by depth, of the form
`NAME OF CHAPTER:  Sorting`. `walk()` yields `(Level, name)` pairs with
each node before its children; `Level` has the members `BOOK`, `CHAPTER`,
`SECTION` and `SUBSECTION`. Each node is a `BookNode` with a `name`, a
list of `children` and a `find(name)` method returning the first child of
that name or `None`.

A `BookError` is raised when a book is created twice, when chapters are
added before the book exists, when sections are added to a chapter that
does not exist, when subsections are added to a section that does not
exist, and when `render()` is called with no book. Only one book is held
at a time, and names of the same level need not be unique: sections and
subsections go to the first match.

## Command-line programs

Each structure comes with a menu-driven program that reads
whitespace-separated choices and values from standard input and stops at
end of input:

```
treekit-avl
treekit-bst
treekit-book
```

- `treekit-avl`: insert a word and its meaning, show the in-order and
  pre-order traversals, delete a word, exit (`4`).
- `treekit-bst`: create a tree from several values (answer `1` to keep
  going), insert, show in-order, pre-order and post-order traversals,
  search, minimum, height; `0` exits.
- `treekit-book`: insert the book, chapters, sections and subsections,
  display the outline, exit (`6`).

## What it does not do

The trees live in memory only; nothing is saved between runs. The binary
search tree and the book outline have no way to remove entries.