"""Binary tree nodes, builders, traversals and structural comparison."""

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

NULL_TOKEN = "N"
NULL_VALUE = -1


@dataclass
class Node:
    """A binary tree node holding an integer."""

    data: int
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    @property
    def is_leaf(self) -> bool:
        """Whether the node has no children."""
        return self.left is None and self.right is None


def parse_level_order(text: str) -> Optional[Node]:
    """Build a tree from space-separated values in level order.

    ``N`` marks a missing child. An empty string, or one whose first value
    is ``N``, gives an empty tree. Values that are not integers raise
    ValueError.
    """
    tokens = text.split()
    if not tokens or tokens[0].startswith(NULL_TOKEN):
        return None
    root = Node(int(tokens[0]))
    pending = deque([root])
    rest = iter(tokens[1:])
    for left_token in rest:
        if not pending:
            break
        current = pending.popleft()
        if left_token != NULL_TOKEN:
            current.left = Node(int(left_token))
            pending.append(current.left)
        right_token = next(rest, None)
        if right_token is None:
            break
        if right_token != NULL_TOKEN:
            current.right = Node(int(right_token))
            pending.append(current.right)
    return root


def _take(values: Iterator[int]) -> int:
    try:
        return next(values)
    except StopIteration:
        raise ValueError("not enough values to complete the tree") from None


def build_level_order(values: Iterable[int]) -> Optional[Node]:
    """Build a tree from values in level order, with -1 for a missing child.

    Every node present needs both of its child slots filled; running out of
    values raises ValueError. Values left over are ignored.
    """
    stream = iter(values)
    first = _take(stream)
    if first == NULL_VALUE:
        return None
    root = Node(first)
    pending = deque([root])
    while pending:
        current = pending.popleft()
        left = _take(stream)
        if left != NULL_VALUE:
            current.left = Node(left)
            pending.append(current.left)
        right = _take(stream)
        if right != NULL_VALUE:
            current.right = Node(right)
            pending.append(current.right)
    return root


def build_preorder(values: Iterable[int]) -> Optional[Node]:
    """Build a tree from values in pre-order, with -1 for a missing child.

    Running out of values before the tree is complete raises ValueError.
    """
    stream = iter(values)

    def build() -> Optional[Node]:
        value = _take(stream)
        if value == NULL_VALUE:
            return None
        node = Node(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def level_order(root: Optional[Node]) -> List[List[int]]:
    """Return the values level by level, each level from left to right."""
    levels: List[List[int]] = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.data for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def inorder(root: Optional[Node]) -> List[int]:
    """Return the values in left, node, right order."""
    if root is None:
        return []
    return inorder(root.left) + [root.data] + inorder(root.right)


def preorder(root: Optional[Node]) -> List[int]:
    """Return the values in node, left, right order."""
    if root is None:
        return []
    return [root.data] + preorder(root.left) + preorder(root.right)


def postorder(root: Optional[Node]) -> List[int]:
    """Return the values in left, right, node order."""
    if root is None:
        return []
    return postorder(root.left) + postorder(root.right) + [root.data]


def count_leaves(root: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    if root is None:
        return 0
    if root.is_leaf:
        return 1
    return count_leaves(root.left) + count_leaves(root.right)


def is_identical(p: Optional[Node], q: Optional[Node]) -> bool:
    """Return whether two trees have the same shape and the same values."""
    if p is None or q is None:
        return p is None and q is None
    return (
        p.data == q.data
        and is_identical(p.left, q.left)
        and is_identical(p.right, q.right)
    )