import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsalab.binary_tree import (
    TreeNode,
    inorder,
    level,
    level_order,
    postorder,
    preorder,
)


@pytest.fixture
def sample_tree():
    return TreeNode(
        1,
        TreeNode(2, TreeNode(4), TreeNode(5)),
        TreeNode(3, TreeNode(6), TreeNode(7)),
    )


def test_preorder_of_sample(sample_tree):
    assert list(preorder(sample_tree)) == [1, 2, 4, 5, 3, 6, 7]


def test_inorder_of_sample(sample_tree):
    assert list(inorder(sample_tree)) == [4, 2, 5, 1, 6, 3, 7]


def test_postorder_of_sample(sample_tree):
    assert list(postorder(sample_tree)) == [4, 5, 2, 6, 7, 3, 1]


def test_level_order_matches_levels_joined(sample_tree):
    by_levels = [v for depth in range(1, 4) for v in level(sample_tree, depth)]
    assert list(level_order(sample_tree)) == by_levels


def test_level_order_of_numbered_tree_is_sorted(sample_tree):
    assert list(level_order(sample_tree)) == sorted(preorder(sample_tree))


def test_first_level_is_root(sample_tree):
    assert list(level(sample_tree, 1)) == [sample_tree.value]


def test_levels_outside_tree_are_empty(sample_tree):
    assert list(level(sample_tree, 4)) == []
    assert list(level(sample_tree, 0)) == []


def test_empty_tree_yields_nothing():
    assert list(preorder(None)) == []
    assert list(inorder(None)) == []
    assert list(postorder(None)) == []
    assert list(level_order(None)) == []


def test_single_node():
    node = TreeNode("x")
    for traversal in (preorder, inorder, postorder, level_order):
        assert list(traversal(node)) == ["x"]


def test_left_chain_inorder_reverses_preorder():
    chain = TreeNode("a", TreeNode("b", TreeNode("c")))
    assert list(inorder(chain)) == list(reversed(list(preorder(chain))))
    assert list(postorder(chain)) == list(inorder(chain))


def _trees():
    return st.recursive(
        st.builds(TreeNode, st.integers()),
        lambda children: st.builds(
            TreeNode,
            st.integers(),
            st.none() | children,
            st.none() | children,
        ),
        max_leaves=20,
    )


@given(_trees())
def test_traversals_visit_every_node_once(root):
    reference = sorted(preorder(root))
    assert sorted(inorder(root)) == reference
    assert sorted(postorder(root)) == reference
    assert sorted(level_order(root)) == reference


@given(_trees())
def test_root_position_in_traversals(root):
    assert list(preorder(root))[0] == root.value
    assert list(postorder(root))[-1] == root.value
    assert list(level_order(root))[0] == root.value