import random

from estruturas.trees import (
    Node,
    SearchTree,
    contains,
    format_inorder,
    format_preorder,
    height,
    main,
)


def test_height_of_empty_and_leaf():
    assert height(None) == -1
    assert height(Node("a")) == 0


def test_height_grows_with_chain():
    chain = Node(1, Node(2, Node(3)))
    assert height(chain) == height(Node(2, Node(3))) + 1


def test_contains_searches_both_sides():
    tree = Node("a", Node("b"), Node("c", Node("f")))
    assert contains(tree, "f") is True
    assert contains(tree, "b") is True
    assert contains(tree, "z") is False


def test_format_preorder():
    assert format_preorder(None) == ""
    assert format_preorder(Node("a")) == "<a >"
    assert format_preorder(Node("a", Node("b"), Node("c"))) == "<a <b ><c >>"


def test_format_inorder_puts_left_first():
    text = format_inorder(Node("a", Node("b"), Node("c")))
    assert text.index("b") < text.index("a") < text.index("c")


def test_search_tree_iterates_sorted():
    values = [5, 3, 8, 1, 4, 7, 9, 3]
    tree = SearchTree(values)
    assert list(tree) == sorted(set(values))
    assert len(tree) == len(set(values))


def test_insert_duplicate_returns_false():
    tree = SearchTree([5])
    assert tree.insert(5) is False
    assert len(tree) == 1


def test_find_and_contains():
    tree = SearchTree([5, 3, 8])
    node = tree.find(3)
    assert node is not None and node.value == 3
    assert tree.find(4) is None
    assert 8 in tree
    assert 6 not in tree


def test_remove_leaf_single_child_and_two_children():
    tree = SearchTree([5, 3, 8, 1, 4, 7])
    assert tree.remove(1) is True
    assert tree.remove(8) is True
    assert tree.remove(5) is True
    assert list(tree) == [3, 4, 7]
    assert tree.root is not None and tree.root.value == 4


def test_remove_missing_returns_false():
    tree = SearchTree([2, 1])
    assert tree.remove(9) is False
    assert len(tree) == 2


def test_random_removals_keep_order():
    rng = random.Random(7)
    values = rng.sample(range(100), 30)
    tree = SearchTree(values)
    for value in values[:15]:
        assert tree.remove(value) is True
    assert list(tree) == sorted(values[15:])


def test_main_prints_growing_tree(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "<a >"
    assert lines[-1] == "Arvore liberada!"
    assert lines[3].startswith("Altura da arvore = ")