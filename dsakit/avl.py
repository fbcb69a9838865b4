"""A self-balancing binary search tree (AVL tree)."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class AVLNode:
    """A node of an AVL tree, caching the height of its subtree."""

    key: Any
    height: int = 1
    left: Optional["AVLNode"] = None
    right: Optional["AVLNode"] = None

    def __repr__(self) -> str:
        return f"AVLNode({self.key!r})"


Subtree = Optional[AVLNode]


def _height(node: Subtree) -> int:
    return 0 if node is None else node.height


def _balance(node: Subtree) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _update_height(node: AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(y: AVLNode) -> AVLNode:
    x = y.left
    y.left = x.right
    x.right = y
    _update_height(y)
    _update_height(x)
    return x


def _rotate_left(x: AVLNode) -> AVLNode:
    y = x.right
    x.right = y.left
    y.left = x
    _update_height(x)
    _update_height(y)
    return y


def _insert(node: Subtree, key: Any) -> tuple[AVLNode, bool]:
    if node is None:
        return AVLNode(key), True
    if key < node.key:
        node.left, added = _insert(node.left, key)
    elif key > node.key:
        node.right, added = _insert(node.right, key)
    else:
        return node, False

    _update_height(node)
    balance = _balance(node)

    if balance > 1 and key < node.left.key:
        return _rotate_right(node), added
    if balance < -1 and key > node.right.key:
        return _rotate_left(node), added
    if balance > 1 and key > node.left.key:
        node.left = _rotate_left(node.left)
        return _rotate_right(node), added
    if balance < -1 and key < node.right.key:
        node.right = _rotate_right(node.right)
        return _rotate_left(node), added
    return node, added


def _min_node(node: AVLNode) -> AVLNode:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: Subtree, key: Any) -> tuple[Subtree, bool]:
    if node is None:
        return None, False
    if key < node.key:
        node.left, removed = _delete(node.left, key)
    elif key > node.key:
        node.right, removed = _delete(node.right, key)
    else:
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True
        successor = _min_node(node.right)
        node.key = successor.key
        node.right, removed = _delete(node.right, successor.key)

    _update_height(node)
    balance = _balance(node)

    if balance > 1 and _balance(node.left) >= 0:
        return _rotate_right(node), removed
    if balance < -1 and _balance(node.right) <= 0:
        return _rotate_left(node), removed
    if balance > 1 and _balance(node.left) < 0:
        node.left = _rotate_left(node.left)
        return _rotate_right(node), removed
    if balance < -1 and _balance(node.right) > 0:
        node.right = _rotate_right(node.right)
        return _rotate_left(node), removed
    return node, removed


def _preorder(node: Subtree) -> Iterator[Any]:
    if node is not None:
        yield node.key
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: Subtree) -> Iterator[Any]:
    stack: list[AVLNode] = []
    while node is not None or stack:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.key
        node = node.right


class AVLTree:
    """A set of distinct, ordered keys kept in a height-balanced search tree."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self._root: Subtree = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> None:
        """Add ``key``; a key already present is left as it is."""
        self._root, added = _insert(self._root, key)
        if added:
            self._size += 1

    def delete(self, key: Any) -> None:
        """Remove ``key``; a missing key changes nothing."""
        self._root, removed = _delete(self._root, key)
        if removed:
            self._size -= 1

    def preorder(self) -> list[Any]:
        """Keys in node, left, right order."""
        return list(_preorder(self._root))

    def inorder(self) -> list[Any]:
        """Keys in ascending order."""
        return list(_inorder(self._root))

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path; 0 when empty."""
        return _height(self._root)

    def __contains__(self, key: Any) -> bool:
        node = self._root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return True
        return False

    def __iter__(self) -> Iterator[Any]:
        return _inorder(self._root)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"AVLTree({self.inorder()!r})"