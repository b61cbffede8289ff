"""Binary trees and binary search trees: building, searching and inspection."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass


@dataclass
class Node:
    """A binary tree node holding an integer."""

    data: int
    left: Node | None = None
    right: Node | None = None


def build_tree(text: str) -> Node | None:
    """Build a tree from space-separated level-order values, ``N`` marking no child.

    An empty string, or one starting with ``N``, gives an empty tree.
    """
    if not text or text[0] == "N":
        return None
    tokens = text.split()
    root = Node(int(tokens[0]))
    pending: deque[Node] = deque([root])
    values = iter(tokens[1:])
    while pending:
        parent = pending.popleft()
        left = next(values, None)
        if left is None:
            break
        if left != "N":
            parent.left = Node(int(left))
            pending.append(parent.left)
        right = next(values, None)
        if right is None:
            break
        if right != "N":
            parent.right = Node(int(right))
            pending.append(parent.right)
    return root


def lowest_common_ancestor(root: Node | None, first: int, second: int) -> Node:
    """Lowest node of a BST whose value separates ``first`` and ``second``.

    Raises ``ValueError`` when the walk runs off the tree.
    """
    node = root
    while node is not None:
        if node.data < first and node.data < second:
            node = node.right
        elif node.data > first and node.data > second:
            node = node.left
        else:
            return node
    raise ValueError("no common ancestor in this tree")


def insert(root: Node | None, value: int) -> Node:
    """Insert ``value`` into a BST and return its root; duplicates are ignored."""
    if root is None:
        return Node(value)
    node = root
    while True:
        if value < node.data:
            if node.left is None:
                node.left = Node(value)
                break
            node = node.left
        elif value > node.data:
            if node.right is None:
                node.right = Node(value)
                break
            node = node.right
        else:
            break
    return root


def count_in_range(root: Node | None, low: int, high: int) -> int:
    """Number of BST nodes whose value lies in ``low .. high`` inclusive."""
    if root is None:
        return 0
    if root.data == high and root.data == low:
        return 1
    if low <= root.data <= high:
        return (
            1
            + count_in_range(root.left, low, high)
            + count_in_range(root.right, low, high)
        )
    if root.data < low:
        return count_in_range(root.right, low, high)
    return count_in_range(root.left, low, high)


def is_dead_end(root: Node | None) -> bool:
    """Tell whether a BST of positive values has a leaf where no value can be added.

    A leaf ``x`` is a dead end when both ``x - 1`` and ``x + 1`` are taken,
    zero counting as taken.
    """
    if root is None:
        return False
    taken = {0}
    leaves: list[int] = []
    queue: deque[Node] = deque([root])
    while queue:
        node = queue.popleft()
        if node.left is None and node.right is None:
            leaves.append(node.data)
            continue
        taken.add(node.data)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return any(leaf + 1 in taken and leaf - 1 in taken for leaf in leaves)