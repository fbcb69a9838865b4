"""Binary tree nodes with traversals, depth and balance checks."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    value: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


Root = Optional[TreeNode]


def preorder(root: Root) -> list[Any]:
    """Values in node, left, right order."""
    if root is None:
        return []
    return [root.value, *preorder(root.left), *preorder(root.right)]


def inorder(root: Root) -> list[Any]:
    """Values in left, node, right order."""
    if root is None:
        return []
    return [*inorder(root.left), root.value, *inorder(root.right)]


def postorder(root: Root) -> list[Any]:
    """Values in left, right, node order."""
    if root is None:
        return []
    return [*postorder(root.left), *postorder(root.right), root.value]


def preorder_iterative(root: Root) -> list[Any]:
    """Preorder traversal with an explicit stack."""
    if root is None:
        return []
    result: list[Any] = []
    stack = [root]
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def inorder_iterative(root: Root) -> list[Any]:
    """Inorder traversal with an explicit stack."""
    result: list[Any] = []
    stack: list[TreeNode] = []
    node = root
    while node is not None or stack:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.value)
        node = node.right
    return result


def postorder_iterative(root: Root) -> list[Any]:
    """Postorder traversal with two stacks."""
    if root is None:
        return []
    pending = [root]
    visited: list[TreeNode] = []
    while pending:
        node = pending.pop()
        visited.append(node)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return [node.value for node in reversed(visited)]


def level_order(root: Root) -> list[list[Any]]:
    """Values grouped by level, top level first, each level left to right."""
    if root is None:
        return []
    levels: list[list[Any]] = []
    queue = deque([root])
    while queue:
        level: list[Any] = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.value)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        levels.append(level)
    return levels


def height(root: Root) -> int:
    """Number of nodes on the longest path from ``root`` down to a leaf."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def max_depth(root: Root) -> int:
    """Depth of the tree, counted in nodes; an empty tree has depth 0."""
    return height(root)


def max_depth_iterative(root: Root) -> int:
    """Depth of the tree found by a level-by-level walk."""
    if root is None:
        return 0
    depth = 0
    queue = deque([root])
    while queue:
        for _ in range(len(queue)):
            node = queue.popleft()
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        depth += 1
    return depth


def _balanced_height(node: Root) -> Optional[int]:
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left is None:
        return None
    right = _balanced_height(node.right)
    if right is None or abs(left - right) > 1:
        return None
    return 1 + max(left, right)


def is_balanced(root: Root) -> bool:
    """Return whether, at every node, the subtree heights differ by at most one."""
    return _balanced_height(root) is not None