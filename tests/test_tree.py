import pytest

from algokit.tree import (
    Node,
    build_level_order,
    build_preorder,
    count_leaves,
    inorder,
    is_identical,
    level_order,
    parse_level_order,
    postorder,
    preorder,
)

LEVEL_ORDER_SAMPLE = [1, 3, 5, 7, 11, 17, -1, -1, -1, -1, -1, -1, -1]
PREORDER_SAMPLE = [1, 3, 7, -1, -1, 11, -1, -1, 5, 17, -1, -1, -1]


def test_both_sample_inputs_build_the_same_tree():
    assert is_identical(
        build_level_order(LEVEL_ORDER_SAMPLE), build_preorder(PREORDER_SAMPLE)
    )


def test_level_order_flattens_to_input_values():
    root = build_level_order(LEVEL_ORDER_SAMPLE)
    flat = [value for level in level_order(root) for value in level]
    assert flat == [value for value in LEVEL_ORDER_SAMPLE if value != -1]


def test_preorder_matches_preorder_input():
    root = build_preorder(PREORDER_SAMPLE)
    assert preorder(root) == [value for value in PREORDER_SAMPLE if value != -1]


def test_inorder_of_sample():
    assert inorder(build_preorder(PREORDER_SAMPLE)) == [7, 3, 11, 1, 17, 5]


def test_postorder_of_sample():
    assert postorder(build_preorder(PREORDER_SAMPLE)) == [7, 11, 3, 17, 5, 1]


def test_inorder_of_search_tree_is_sorted():
    values = [4, 2, 6, 1, 3, 5, 7]
    root = parse_level_order(" ".join(map(str, values)))
    assert inorder(root) == sorted(values)


def test_traversals_are_permutations_of_each_other():
    root = parse_level_order("8 3 10 1 6 N 14 N N 4 7 13")
    assert sorted(inorder(root)) == sorted(preorder(root)) == sorted(postorder(root))
    assert preorder(root)[0] == root.data
    assert postorder(root)[-1] == root.data


def test_parse_level_order_skips_missing_children():
    root = parse_level_order("1 N 2")
    assert root.left is None
    assert root.right.data == 2


def test_parse_level_order_empty_inputs():
    assert parse_level_order("") is None
    assert parse_level_order("N 1 2") is None
    assert level_order(None) == []


def test_parse_level_order_rejects_non_integers():
    with pytest.raises(ValueError):
        parse_level_order("1 x")


def test_build_preorder_runs_out_of_values():
    with pytest.raises(ValueError):
        build_preorder([1, 2, -1])


def test_build_level_order_runs_out_of_values():
    with pytest.raises(ValueError):
        build_level_order([1, 2])


def test_build_level_order_null_root():
    assert build_level_order([-1]) is None


def test_count_leaves_of_perfect_tree():
    root = Node(1, Node(2, Node(4), Node(5)), Node(3, Node(6), Node(7)))
    assert count_leaves(root) == 4


def test_count_leaves_of_empty_and_single():
    assert count_leaves(None) == 0
    assert count_leaves(Node(9)) == 1


def test_is_identical_same_input():
    assert is_identical(parse_level_order("1 2 3"), parse_level_order("1 2 3"))
    assert is_identical(None, None)


def test_is_identical_differences():
    assert not is_identical(parse_level_order("1 2 3"), parse_level_order("1 2 4"))
    assert not is_identical(parse_level_order("1 2"), parse_level_order("1 N 2"))
    assert not is_identical(Node(1), None)
    assert not is_identical(None, Node(1))