import pytest

from treekit.tree import BinaryTree, TreeNode, main


@pytest.fixture
def six():
    return BinaryTree([1, 2, 3, 4, 5, 6])


def test_level_order_matches_insertion_order(six):
    assert list(six.level_order()) == [1, 2, 3, 4, 5, 6]


def test_inorder_of_demo_tree(six):
    assert list(six.inorder()) == [4, 2, 5, 1, 6, 3]


def test_preorder_of_demo_tree(six):
    assert list(six.preorder()) == [1, 2, 4, 5, 3, 6]


def test_postorder_of_demo_tree(six):
    assert list(six.postorder()) == [4, 5, 2, 6, 3, 1]


def test_insert_fills_left_before_right():
    tree = BinaryTree([1, 2])
    assert tree.root.value == 1
    assert tree.root.left.value == 2
    assert tree.root.right is None
    tree.insert(3)
    assert tree.root.right.value == 3


@pytest.mark.parametrize("n", [0, 1, 2, 7, 20])
def test_traversals_visit_every_value_once(n):
    values = list(range(n))
    tree = BinaryTree(values)
    for order in (tree.inorder, tree.preorder, tree.postorder, tree.level_order):
        assert sorted(order()) == values
    assert len(tree) == n


def test_iter_is_inorder(six):
    assert list(six) == list(six.inorder())


def test_preorder_starts_and_postorder_ends_with_root(six):
    assert next(six.preorder()) == six.root.value
    assert list(six.postorder())[-1] == six.root.value


def test_search(six):
    assert six.search(6) is True
    assert six.search(7) is False
    assert 4 in six
    assert 0 not in six


def test_empty_tree():
    tree = BinaryTree()
    assert list(tree.inorder()) == []
    assert list(tree.level_order()) == []
    assert 1 not in tree
    tree.delete(1)
    assert tree.root is None


def test_delete_node_with_single_child_promotes_child(six):
    three = six.root.right
    six.delete(3)
    assert 3 not in six
    assert six.root.right is three.left
    assert len(six) == 5


def test_delete_leaf():
    tree = BinaryTree([1, 2, 3, 4, 5])
    tree.delete(3)
    assert list(tree.level_order()) == [1, 2, 4, 5]


def test_delete_node_with_two_children_takes_leftmost_of_right(six):
    successor = six.root.right
    while successor.left is not None:
        successor = successor.left
    expected = successor.value
    six.delete(1)
    assert six.root.value == expected
    assert 1 not in six
    assert sorted(six.inorder()) == [2, 3, 4, 5, 6]


def test_delete_absent_value_changes_nothing(six):
    before = list(six.level_order())
    six.delete(42)
    assert list(six.level_order()) == before


def test_delete_only_node():
    tree = BinaryTree([9])
    tree.delete(9)
    assert tree.root is None
    assert len(tree) == 0


def test_delete_removes_duplicates_in_separate_branches():
    tree = BinaryTree([1, 2, 2])
    tree.delete(2)
    assert 2 not in tree
    assert list(tree.level_order()) == [1]


def test_tree_node_defaults():
    node = TreeNode("a")
    assert node.value == "a"
    assert node.left is None and node.right is None


def test_works_with_strings():
    tree = BinaryTree(["b", "a", "c"])
    assert list(tree.level_order()) == ["b", "a", "c"]
    assert "a" in tree


def test_repr_shows_level_order():
    assert repr(BinaryTree([1, 2])) == "BinaryTree([1, 2])"


def test_main_default_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "Searching for 7: Not Found" in lines
    assert "Searching for 6: Found" in lines
    assert lines[3] == "Level order traversal: 1 2 3 4 5 6"
    assert lines[-1].startswith("Inorder traversal after removing 3:")
    assert "3" not in lines[-1].split(":")[1].split()


def test_main_custom_values(capsys):
    assert main(["5", "7", "--find", "7", "--remove", "7"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "Searching for 7: Found" in lines
    assert lines[-1] == "Inorder traversal after removing 7: 5"