"""Binary and n-ary tree puzzles."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional

_MISSING = -1


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


@dataclass(eq=False)
class Node:
    """A node of a tree with any number of children."""

    val: int = 0
    children: list[Node] = field(default_factory=list)


def _inorder(root: Optional[TreeNode]) -> Iterator[int]:
    stack: list[TreeNode] = []
    node = root
    while node is not None or stack:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.val
        node = node.right


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Values in left, node, right order."""
    return list(_inorder(root))


def preorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Values in node, left, right order."""
    if root is None:
        return []
    values: list[int] = []
    stack = [root]
    while stack:
        node = stack.pop()
        values.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return values


def _serialize(root: Optional[TreeNode]) -> Iterator[int]:
    stack: list[Optional[TreeNode]] = [root]
    while stack:
        node = stack.pop()
        if node is None:
            yield _MISSING
            continue
        yield node.val
        stack.append(node.right)
        stack.append(node.left)


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """True when both preorder listings, with -1 for each missing child, match."""
    return list(_serialize(p)) == list(_serialize(q))


def max_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place and return its root."""
    if root is None:
        return None
    root.left, root.right = root.right, root.left
    invert_tree(root.left)
    invert_tree(root.right)
    return root


def sum_of_left_leaves(root: Optional[TreeNode]) -> int:
    """Sum of the leaves that are a left child."""
    total = 0
    stack: list[tuple[TreeNode, Optional[TreeNode]]] = [(root, None)] if root else []
    while stack:
        node, parent = stack.pop()
        if node.left is None and node.right is None:
            if parent is not None and parent.left is node:
                total += node.val
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, node))
    return total


def _levels(root: Optional[Node]) -> Iterator[list[Node]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [child for node in level for child in node.children]


def level_order(root: Optional[Node]) -> list[list[int]]:
    """Values of an n-ary tree, one list per level."""
    return [[node.val for node in level] for level in _levels(root)]


def nary_max_depth(root: Optional[Node]) -> int:
    """Number of levels in an n-ary tree."""
    return sum(1 for _ in _levels(root))


def preorder(root: Optional[Node]) -> list[int]:
    """Values of an n-ary tree, each node before its children."""
    if root is None:
        return []
    values: list[int] = []
    stack = [root]
    while stack:
        node = stack.pop()
        values.append(node.val)
        stack.extend(reversed(node.children))
    return values


def postorder(root: Optional[Node]) -> list[int]:
    """Values of an n-ary tree, each node after its children."""
    if root is None:
        return []
    values: list[int] = []
    stack: list[tuple[Node, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            values.append(node.val)
            continue
        stack.append((node, True))
        stack.extend((child, False) for child in reversed(node.children))
    return values


def merge_trees(t1: Optional[TreeNode], t2: Optional[TreeNode]) -> Optional[TreeNode]:
    """Overlay ``t2`` onto ``t1`` in place, adding values where both have a node."""
    if t1 is None:
        return t2
    if t2 is None:
        return t1
    t1.val += t2.val
    t1.left = merge_trees(t1.left, t2.left)
    t1.right = merge_trees(t1.right, t2.right)
    return t1


def search_bst(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """The node of a binary search tree holding ``val``, or None."""
    node = root
    while node is not None and node.val != val:
        node = node.right if node.val < val else node.left
    return node


def range_sum_bst(root: Optional[TreeNode], low: int, high: int) -> int:
    """Sum of the in-order values from the node holding ``low`` to the one holding ``high``.

    Both bounds must be values present in the tree.
    """
    values = inorder_traversal(root)
    try:
        end = values.index(high)
    except ValueError:
        raise ValueError(f"{high} is not in the tree") from None
    starts = [i for i, value in enumerate(values[: end + 1]) if value == low]
    if not starts:
        raise ValueError(f"{low} is not in the tree")
    return sum(values[starts[-1] : end + 1])


def is_unival_tree(root: Optional[TreeNode]) -> bool:
    """True when every node holds the same value as the root."""
    if root is None:
        raise ValueError("empty tree")
    values = inorder_traversal(root)
    return Counter(values)[root.val] == len(values)