import io

import pytest

from treekit.book import Book, BookError, BookNode, Level, main


@pytest.fixture
def book():
    b = Book()
    b.create("Algorithms")
    b.add_chapters(["Intro", "Trees"])
    b.add_sections("Trees", ["BST", "AVL"])
    b.add_subsections("Trees", "AVL", ["Rotations"])
    return b


def test_create_sets_root():
    b = Book()
    node = b.create("Algorithms")
    assert b.root is node
    assert node.name == "Algorithms"
    assert node.children == []


def test_create_twice_raises():
    b = Book()
    b.create("One")
    with pytest.raises(BookError, match="book exist"):
        b.create("Two")
    assert b.root.name == "One"


def test_chapters_without_book_raise():
    with pytest.raises(BookError, match="there is no book"):
        Book().add_chapters(["Intro"])


def test_sections_without_chapters_raise():
    b = Book()
    b.create("Algorithms")
    with pytest.raises(BookError, match="no chapters"):
        b.add_sections("Intro", ["A"])


def test_sections_to_missing_chapter_raise(book):
    with pytest.raises(BookError):
        book.add_sections("Graphs", ["BFS"])


def test_subsections_without_sections_raise(book):
    with pytest.raises(BookError, match="no sections"):
        book.add_subsections("Intro", "Any", ["X"])


def test_subsections_to_missing_section_raise(book):
    with pytest.raises(BookError):
        book.add_subsections("Trees", "Heap", ["X"])


def test_chapters_appended_in_order(book):
    book.add_chapters(["Graphs"])
    assert [c.name for c in book.root.children] == ["Intro", "Trees", "Graphs"]


def test_find_returns_first_match():
    node = BookNode("root", [BookNode("a"), BookNode("b"), BookNode("a", [BookNode("x")])])
    assert node.find("a") is node.children[0]
    assert node.find("missing") is None


def test_walk_is_preorder(book):
    assert list(book.walk()) == [
        (Level.BOOK, "Algorithms"),
        (Level.CHAPTER, "Intro"),
        (Level.CHAPTER, "Trees"),
        (Level.SECTION, "BST"),
        (Level.SECTION, "AVL"),
        (Level.SUBSECTION, "Rotations"),
    ]


def test_walk_empty_book():
    assert list(Book().walk()) == []


def test_render_format(book):
    lines = book.render().split("\n")
    assert lines[0] == " NAME OF BOOK:  Algorithms"
    assert lines[2] == "\t\tNAME OF CHAPTER:  Trees"
    assert lines[3] == "\t\t\t\tNAME OF SECTION:  BST"
    assert lines[5] == "\t\t\t\t\t\tNAME OF SUBSECTION:  Rotations"
    assert len(lines) == 6


def test_render_without_book_raises():
    with pytest.raises(BookError, match="book not exist"):
        Book().render()


def test_main_builds_and_displays(monkeypatch, capsys):
    monkeypatch.setattr(
        "sys.stdin",
        io.StringIO("1 Algorithms\n2 2 Intro Trees\n3 Trees 1 BST\n4 Trees BST 1 Insert\n5\n6\n"),
    )
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "NAME OF BOOK:  Algorithms" in out
    assert "\t\tNAME OF CHAPTER:  Trees" in out
    assert "NAME OF SECTION:  BST" in out
    assert "NAME OF SUBSECTION:  Insert" in out


def test_main_reports_missing_book(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n5\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "there is no book" in out
    assert "book not exist" in out