"""Measurements and shape checks on binary trees."""

from typing import Optional, Tuple

from algokit.tree import Node


def height(root: Optional[Node]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def _sum_tree(node: Optional[Node]) -> Tuple[bool, int]:
    if node is None:
        return True, 0
    if node.is_leaf:
        return True, node.data
    left_ok, left_sum = _sum_tree(node.left)
    if not left_ok:
        return False, 0
    right_ok, right_sum = _sum_tree(node.right)
    if not right_ok or left_sum + right_sum != node.data:
        return False, 0
    return True, node.data + left_sum + right_sum


def is_sum_tree(root: Optional[Node]) -> bool:
    """Return whether every inner node equals the sum of its two subtrees.

    Leaves and the empty tree count as sum trees.
    """
    return _sum_tree(root)[0]


def diameter(root: Optional[Node]) -> int:
    """Return the number of nodes on the longest path between two nodes.

    Recomputes subtree heights at every node.
    """
    if root is None:
        return 0
    through_root = height(root.left) + height(root.right) + 1
    return max(diameter(root.left), diameter(root.right), through_root)


def _diameter_and_height(node: Optional[Node]) -> Tuple[int, int]:
    if node is None:
        return 0, 0
    left_diameter, left_height = _diameter_and_height(node.left)
    right_diameter, right_height = _diameter_and_height(node.right)
    best = max(left_diameter, right_diameter, left_height + right_height + 1)
    return best, max(left_height, right_height) + 1


def diameter_fast(root: Optional[Node]) -> int:
    """Return the same value as :func:`diameter` in a single pass."""
    return _diameter_and_height(root)[0]


def _balanced_and_height(node: Optional[Node]) -> Tuple[bool, int]:
    if node is None:
        return True, 0
    left_ok, left_height = _balanced_and_height(node.left)
    right_ok, right_height = _balanced_and_height(node.right)
    balanced = left_ok and right_ok and abs(left_height - right_height) <= 1
    return balanced, max(left_height, right_height) + 1


def is_balanced(root: Optional[Node]) -> bool:
    """Return whether the subtree heights differ by at most one at every node."""
    return _balanced_and_height(root)[0]


def _is_mirror(left: Optional[Node], right: Optional[Node]) -> bool:
    if left is None or right is None:
        return left is None and right is None
    return (
        left.data == right.data
        and _is_mirror(left.left, right.right)
        and _is_mirror(left.right, right.left)
    )


def is_symmetric(root: Optional[Node]) -> bool:
    """Return whether the tree is a mirror image of itself."""
    if root is None:
        return True
    return _is_mirror(root.left, root.right)