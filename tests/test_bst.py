import random

import pytest

from algoshelf.bst import BinarySearchTree, BstNode, is_bst, is_bst_naive

LINEAR = [15, 10, 20, 30, 45]
BRANCHED = [15, 10, 20, 16, 45]


def test_search_finds_inserted_values():
    tree = BinarySearchTree(LINEAR)
    for value in LINEAR:
        assert tree.search(value) is True
        assert value in tree
    assert tree.search(11) is False
    assert 99 not in tree


def test_empty_tree():
    tree = BinarySearchTree()
    assert tree.search(1) is False
    assert tree.inorder() == []
    assert tree.preorder() == []
    assert tree.postorder() == []
    assert tree.level_order() == []
    assert tree.height() == -1
    assert tree.is_valid() is True


def test_find_min_empty_raises():
    with pytest.raises(ValueError):
        BinarySearchTree().find_min()


def test_find_min():
    assert BinarySearchTree(LINEAR).find_min() == min(LINEAR)


def test_inorder_is_sorted():
    rng = random.Random(7)
    values = [rng.randint(-50, 50) for _ in range(60)]
    tree = BinarySearchTree(values)
    assert tree.inorder() == sorted(values)


def test_preorder_of_branched_tree():
    assert BinarySearchTree(BRANCHED).preorder() == [15, 10, 20, 16, 45]


def test_level_order_of_linear_tree():
    assert BinarySearchTree(LINEAR).level_order() == LINEAR


def test_postorder_ends_with_root_and_keeps_values():
    tree = BinarySearchTree(BRANCHED)
    post = tree.postorder()
    assert post[-1] == 15
    assert sorted(post) == sorted(BRANCHED)


def test_height_of_linear_tree():
    assert BinarySearchTree(LINEAR).height() == 3


def test_height_single_node():
    assert BinarySearchTree([5]).height() == 0


def test_duplicates_go_left():
    tree = BinarySearchTree([5, 5])
    assert tree.root is not None
    assert tree.root.left is not None
    assert tree.root.left.data == 5
    assert tree.root.right is None
    assert tree.is_valid() is True


def test_delete_root_with_two_children():
    tree = BinarySearchTree(BRANCHED)
    assert tree.delete(15) is True
    assert tree.postorder() == [10, 45, 20, 16]
    assert 15 not in tree
    assert tree.is_valid()


def test_delete_missing_value():
    tree = BinarySearchTree(LINEAR)
    assert tree.delete(99) is False
    assert tree.inorder() == sorted(LINEAR)


def test_delete_leaf_and_single_child():
    tree = BinarySearchTree(LINEAR)
    assert tree.delete(45) is True
    assert tree.delete(20) is True
    assert tree.inorder() == [10, 15, 30]
    assert tree.is_valid()


def test_valid_tree_passes_both_checks():
    tree = BinarySearchTree(BRANCHED)
    assert is_bst(tree.root) is True
    assert is_bst_naive(tree.root) is True


def test_invalid_deep_value_detected():
    # 16 sits in the left subtree of 15, violating the ordering below the root.
    root = BstNode(15, left=BstNode(10, right=BstNode(16)), right=BstNode(20))
    assert is_bst(root) is False
    assert is_bst_naive(root) is False


def test_equal_value_on_right_is_invalid():
    root = BstNode(10, right=BstNode(10))
    assert is_bst(root) is False
    assert is_bst_naive(root) is False


def test_empty_root_is_valid():
    assert is_bst(None) is True
    assert is_bst_naive(None) is True


@pytest.mark.parametrize("seed", range(10))
def test_checks_agree_on_random_trees(seed):
    rng = random.Random(seed)

    def build(depth):
        if depth == 0 or rng.random() < 0.3:
            return None
        return BstNode(rng.randint(0, 10), build(depth - 1), build(depth - 1))

    root = build(4)
    assert is_bst(root) == is_bst_naive(root)