import io
import random

import pytest

from treekit.avl import AVLTree, DuplicateWordError, WordNotFoundError, main


def _check_node(node):
    """Return the height of node after asserting AVL and BST invariants."""
    if node is None:
        return -1
    left = _check_node(node.left)
    right = _check_node(node.right)
    assert abs(left - right) <= 1
    assert node.height == max(left, right) + 1
    if node.left is not None:
        assert node.left.word < node.word
    if node.right is not None:
        assert node.right.word > node.word
    return node.height


def test_empty_tree():
    tree = AVLTree()
    assert len(tree) == 0
    assert tree.height() == -1
    assert list(tree.in_order()) == []
    assert list(tree.pre_order()) == []


def test_single_node_height():
    tree = AVLTree()
    tree.insert(7, "seven")
    assert tree.height() == 0
    assert list(tree.in_order()) == [(7, "seven")]


def test_ascending_inserts_rotate():
    tree = AVLTree()
    for word in (1, 2, 3):
        tree.insert(word, str(word))
    assert [w for w, _ in tree.pre_order()] == [2, 1, 3]


def test_left_right_case():
    tree = AVLTree()
    for word in (30, 10, 20):
        tree.insert(word, "x")
    assert [w for w, _ in tree.pre_order()] == [20, 10, 30]


def test_random_inserts_stay_balanced():
    rng = random.Random(1234)
    words = rng.sample(range(10000), 500)
    tree = AVLTree()
    for word in words:
        tree.insert(word, f"m{word}")
    _check_node(tree.root)
    assert [w for w, _ in tree.in_order()] == sorted(words)
    assert len(tree) == len(words)
    assert all(word in tree for word in words)


def test_duplicate_raises_and_keeps_tree():
    tree = AVLTree()
    tree.insert(5, "five")
    with pytest.raises(DuplicateWordError):
        tree.insert(5, "again")
    assert list(tree.in_order()) == [(5, "five")]
    assert len(tree) == 1


def test_delete_missing_raises():
    tree = AVLTree()
    with pytest.raises(WordNotFoundError):
        tree.delete(3)
    tree.insert(1, "one")
    with pytest.raises(WordNotFoundError):
        tree.delete(2)
    assert len(tree) == 1


def test_delete_two_children_keeps_meanings():
    tree = AVLTree()
    for word in (2, 1, 3):
        tree.insert(word, f"m{word}")
    tree.delete(2)
    assert list(tree.in_order()) == [(1, "m1"), (3, "m3")]
    assert 2 not in tree


def test_random_deletes_stay_balanced():
    rng = random.Random(99)
    words = rng.sample(range(5000), 300)
    tree = AVLTree()
    for word in words:
        tree.insert(word, f"m{word}")
    removed = words[::2]
    for word in removed:
        tree.delete(word)
        _check_node(tree.root)
    remaining = sorted(set(words) - set(removed))
    assert list(tree.in_order()) == [(w, f"m{w}") for w in remaining]
    assert len(tree) == len(remaining)


def test_main_insert_and_print(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 5 five 1 5 dup 2 3 9 3 5 2 4\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "\t5\tfive" in out
    assert "Redundant AVLnode" in out
    assert "Word not present!" in out
    assert "Word deleted Successfully!" in out