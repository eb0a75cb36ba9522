import io
import sys

from krtools.wordtree import TreeNode, addtree, build_tree, main, tree_lines, walk


def test_addtree_on_empty_creates_node():
    root = addtree(None, "now")
    assert (root.word, root.count, root.left, root.right) == ("now", 1, None, None)


def test_addtree_places_smaller_left_and_larger_right():
    root = addtree(None, "m")
    root = addtree(root, "a")
    root = addtree(root, "z")
    assert root.word == "m"
    assert root.left.word == "a"
    assert root.right.word == "z"


def test_duplicate_increments_count():
    root = None
    for _ in range(4):
        root = addtree(root, "the")
    assert root.count == 4
    assert root.left is None and root.right is None


def test_walk_is_sorted_and_counts_add_up():
    words = "now is the time for all good men to come to the aid of the party".split()
    root = None
    for w in words:
        root = addtree(root, w)
    nodes = list(walk(root))
    assert [n.word for n in nodes] == sorted(set(words))
    assert {n.word: n.count for n in nodes} == {w: words.count(w) for w in set(words)}


def test_walk_empty_tree():
    assert list(walk(None)) == []


def test_sorted_input_does_not_exhaust_recursion():
    words = [f"w{i:05d}" for i in range(5000)]
    root = None
    for w in words:
        root = addtree(root, w)
    assert [n.word for n in walk(root)] == words


def test_tree_lines_layout():
    root = TreeNode("beta", 2, left=TreeNode("alpha"))
    assert list(tree_lines(root)) == ["   1 alpha", "   2 beta"]


def test_build_tree_skips_non_letter_tokens():
    root = build_tree(io.StringIO("x = 1 + x; 2y"))
    assert [(n.word, n.count) for n in walk(root)] == [("x", 2), ("y", 1)]


def test_build_tree_empty_input():
    assert build_tree(io.StringIO("  \n")) is None


def test_main_prints_frequencies(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("b a b"))
    assert main([]) == 0
    assert capsys.readouterr().out == "   1 a\n   2 b\n"