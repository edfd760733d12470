"""Boundary and zig-zag traversals of binary trees."""

from typing import List, Optional

from algokit.tree import Node


def _left_edge(node: Optional[Node], out: List[int]) -> None:
    while node is not None and not node.is_leaf:
        out.append(node.data)
        node = node.left if node.left is not None else node.right


def _leaves(node: Optional[Node], out: List[int]) -> None:
    if node is None:
        return
    if node.is_leaf:
        out.append(node.data)
        return
    _leaves(node.left, out)
    _leaves(node.right, out)


def _right_edge(node: Optional[Node], out: List[int]) -> None:
    edge: List[int] = []
    while node is not None and not node.is_leaf:
        edge.append(node.data)
        node = node.right if node.right is not None else node.left
    out.extend(reversed(edge))


def boundary(root: Optional[Node]) -> List[int]:
    """Return the boundary anticlockwise from the root.

    The root comes first, then the left edge, the leaves from left to right
    and the right edge from the bottom up. A root that is itself a leaf is
    listed both as the root and as a leaf.
    """
    result: List[int] = []
    if root is None:
        return result
    result.append(root.data)
    _left_edge(root.left, result)
    _leaves(root, result)
    _right_edge(root.right, result)
    return result


def zigzag(root: Optional[Node]) -> List[int]:
    """Return the values level by level, alternating left-to-right and back."""
    result: List[int] = []
    level = [root] if root is not None else []
    left_to_right = True
    while level:
        values = [node.data for node in level]
        result.extend(values if left_to_right else reversed(values))
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
        left_to_right = not left_to_right
    return result